"""Core parsing, resolution and annotation modules.

WHY: The core package is the engine: everything between raw WebVTT text
and the segments a transcript view renders. It has no I/O and no global
state, so every function here can be called from any thread.

HOW: ir.py defines the data structures, timecode.py and vtt.py turn
subtitle text into cues, resolver.py picks the active cue, vocabulary.py
builds the lookup index, matcher.py and annotator.py segment cue text,
and indexer.py collects hits across a whole transcript.

RULES:
- IR dataclasses are the contract; change with care
- No module here opens files or sockets; settings come from config.py
- Nothing here keeps a cache; callers own the cue list and the index
"""

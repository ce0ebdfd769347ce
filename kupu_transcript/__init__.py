"""Kupu Transcript — subtitle synchronization and vocabulary annotation.

WHY: A language-learning video player shows the transcript next to the
video, highlights the cue being spoken, and lets learners hover known
vocabulary for a translation. This package is the engine behind that:
it turns WebVTT text into cues, picks the active cue for a playback
time, and splits cue text into plain and vocabulary-tagged segments.

HOW: Three stages: parse (core.vtt), resolve (core.resolver), annotate
(core.vocabulary, core.matcher, core.annotator). Adapters bring
vocabulary records in, formatters take annotated cues out.

RULES:
- The core is pure and synchronous: no I/O, no caches, no globals
- Segments always reconstruct the cue text exactly
- Longest vocabulary phrase wins; hits never overlap
- Overlapping cues resolve to the one listed last
"""

from kupu_transcript.core.annotator import annotate, annotate_cues, segments_text, tokenize
from kupu_transcript.core.indexer import index_transcript
from kupu_transcript.core.ir import (
    AnnotatedCue,
    Cue,
    LiteralSegment,
    PhraseMatch,
    Segment,
    TaggedSegment,
    VocabularyEntry,
    VocabularyOccurrence,
)
from kupu_transcript.core.matcher import find_longest_match
from kupu_transcript.core.resolver import active_index, resolve_active
from kupu_transcript.core.vocabulary import VocabularyIndex, build_index, lookup, normalize_phrase
from kupu_transcript.core.vtt import parse_vtt

__version__ = "0.1.0"

__all__ = [
    "AnnotatedCue",
    "Cue",
    "LiteralSegment",
    "PhraseMatch",
    "Segment",
    "TaggedSegment",
    "VocabularyEntry",
    "VocabularyIndex",
    "VocabularyOccurrence",
    "active_index",
    "annotate",
    "annotate_cues",
    "build_index",
    "find_longest_match",
    "index_transcript",
    "lookup",
    "normalize_phrase",
    "parse_vtt",
    "resolve_active",
    "segments_text",
    "tokenize",
]

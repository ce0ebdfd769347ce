"""Adapter modules for converting external records into IR types.

WHY: The engine's IR (VocabularyEntry, Cue) is language-neutral, while
the collaborating services speak in their own field names. Adapters
bridge the two so each side can evolve independently.

HOW: Each adapter module provides conversion functions that validate the
external shape and map it onto IR dataclasses.

RULES:
- Adapters are pure data transformations: no I/O.
- Each adapter lives in its own module under this package.
- Adapters must not modify their input records.
"""

from kupu_transcript.adapters.vocabulary_records import (
    derive_vocab_id,
    record_to_entry,
    records_to_entries,
)

__all__ = ["derive_vocab_id", "record_to_entry", "records_to_entries"]

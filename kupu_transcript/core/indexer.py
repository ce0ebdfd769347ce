"""Transcript-wide vocabulary occurrence index.

WHY: Besides highlighting the active cue, learners search a video for a
word ("where is 'whānau' said?") and the word list links each entry back
to the moments it is spoken. That needs every hit across the whole
transcript, with the cue timing attached so the player can seek.

HOW: Annotate each cue with the same index and turn every TaggedSegment
into a VocabularyOccurrence carrying the cue's id, position and interval.
Using annotate() keeps the occurrences consistent with what the viewer
highlights: same longest-match choice, same non-overlap.

RULES:
- Occurrences are ordered by cue, then by position within the cue text
- line_number is the 1-based position of the cue in the input
- A cue with no hits contributes nothing
"""

from __future__ import annotations

from typing import Sequence

from kupu_transcript.core.annotator import annotate
from kupu_transcript.core.ir import Cue, TaggedSegment, VocabularyOccurrence
from kupu_transcript.core.vocabulary import VocabularyIndex


def index_transcript(
    cues: Sequence[Cue],
    index: VocabularyIndex,
) -> list[VocabularyOccurrence]:
    """List every vocabulary hit in a transcript.

    Args:
        cues: Parsed cues in source order.
        index: Vocabulary index for the current snapshot.

    Returns:
        One VocabularyOccurrence per tagged segment across all cues.
    """
    occurrences: list[VocabularyOccurrence] = []
    for line_number, cue in enumerate(cues, start=1):
        for segment in annotate(cue.text, index):
            if not isinstance(segment, TaggedSegment):
                continue
            occurrences.append(VocabularyOccurrence(
                cue_id=cue.id,
                line_number=line_number,
                start_s=cue.start_s,
                end_s=cue.end_s,
                entry=segment.entry,
                matched_text=segment.matched_text,
                cue_text=cue.text,
            ))
    return occurrences


def occurrences_for(
    occurrences: Sequence[VocabularyOccurrence],
    vocab_id: str,
) -> list[VocabularyOccurrence]:
    """Filter occurrences down to one vocabulary entry."""
    return [occ for occ in occurrences if occ.entry.id == vocab_id]

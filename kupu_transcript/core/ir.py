"""Intermediate representation dataclasses for cues, vocabulary and segments.

WHY: The parser, resolver, matcher and annotator all pass the same few
shapes between each other: a timed cue, a dictionary entry, a match, and
the segments an annotated cue is split into. Defining them once keeps
every stage typed against the same contract and lets the formatters
consume annotation results without knowing how they were produced.

HOW: Frozen dataclasses form a small hierarchy:
  Cue                  — one timed subtitle block from a WebVTT file
  VocabularyEntry      — one dictionary item (headword + translation)
  PhraseMatch          — the matcher's answer for one cursor position
  LiteralSegment       — plain text, rendered verbatim
  TaggedSegment        — one vocabulary hit inside a cue's text
  AnnotatedCue         — a cue together with its segments
  VocabularyOccurrence — one hit located in a transcript (cue + timing)

RULES:
- Everything here is immutable once built (frozen=True)
- All times are float seconds
- Cue intervals are inclusive on both ends; end_s >= start_s
- Joining the .text of an annotation's segments reproduces the source text
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Cue:
    """One timed subtitle unit parsed from a WebVTT document.

    RULES:
    - id: identifier line from the source, or the cue's 1-based position
      in the parsed list when the source has none
    - start_s / end_s: inclusive bounds in seconds
    - text: visual lines of the cue joined by a single space
    """

    id: str
    start_s: float
    end_s: float
    text: str

    def contains(self, t: float) -> bool:
        """True if ``t`` falls inside this cue's inclusive interval."""
        return self.start_s <= t <= self.end_s


@dataclass(frozen=True)
class VocabularyEntry:
    """A single dictionary item: a source-language phrase and its gloss.

    WHY: The annotator needs the headword to match against and the rest
    of the record to hand through to whatever renders the hit (tooltip,
    word list, search result).

    RULES:
    - headword: 1-5 words in the source language; must not be blank
    - translation: target-language gloss
    - pronunciation / note: optional extras, passed through untouched
    """

    id: str
    headword: str
    translation: str
    pronunciation: str | None = None
    note: str | None = None

    def __post_init__(self) -> None:
        if not self.headword or not self.headword.strip():
            raise ValueError(
                "Vocabulary entry {!r} has an empty headword".format(self.id)
            )


@dataclass(frozen=True)
class PhraseMatch:
    """The longest vocabulary phrase found at one word position.

    RULES:
    - word_count: number of words consumed (1..MAX_PHRASE_WORDS)
    - matched_text: those words joined by single spaces, original casing
    """

    entry: VocabularyEntry
    word_count: int
    matched_text: str


@dataclass(frozen=True)
class LiteralSegment:
    """A stretch of source text with no vocabulary hit, whitespace included."""

    text: str


@dataclass(frozen=True)
class TaggedSegment:
    """One non-overlapping vocabulary hit inside annotated text.

    RULES:
    - text: exact concatenation of the source slots the hit covers
      (whitespace and edge punctuation included), so reconstruction holds
    - matched_text: the matched words joined by single spaces
    - vocab_id: the entry's id, duplicated for renderers that only key on it
    """

    text: str
    matched_text: str
    entry: VocabularyEntry
    vocab_id: str


Segment = Union[LiteralSegment, TaggedSegment]


@dataclass(frozen=True)
class AnnotatedCue:
    """A cue and the segmentation of its text."""

    cue: Cue
    segments: tuple[Segment, ...] = field(default_factory=tuple)

    @property
    def tagged(self) -> list[TaggedSegment]:
        return [s for s in self.segments if isinstance(s, TaggedSegment)]


@dataclass(frozen=True)
class VocabularyOccurrence:
    """Where a vocabulary entry appears in a transcript.

    RULES:
    - line_number: 1-based position of the cue in the transcript
    - start_s / end_s: the cue's interval, for seeking the player
    - cue_text: the whole cue text, for showing the hit in context
    """

    cue_id: str
    line_number: int
    start_s: float
    end_s: float
    entry: VocabularyEntry
    matched_text: str
    cue_text: str

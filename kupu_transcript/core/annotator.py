"""Whitespace-preserving vocabulary annotation of cue text.

WHY: The transcript view renders every cue as a run of spans: plain text,
and hoverable vocabulary hits. Rendering must reproduce the cue text
exactly (odd spacing included), while matching has to work on words and
ignore the punctuation stuck to them ("ora," must still find "ora").
Two index spaces are involved, and mixing them inside the matching loop
is how hits end up overlapping or text gets lost.

HOW: Four steps, each in its own index space:
  1. tokenize() splits the text into slots, keeping whitespace runs as
     slots of their own, so "".join(slots) == text.
  2. _word_map() picks the word slots, computes each one's match form
     (dash variants folded to "-", edge punctuation stripped) and records
     word index → slot index.
  3. _find_hits() runs a cursor over the words: the phrase matcher either
     returns k matched words (record the slot range, advance k) or
     nothing (advance 1).
  4. _build_segments() walks the slots once: a recorded range becomes
     one TaggedSegment, every other slot becomes literal text.

RULES:
- "".join(s.text for s in annotate(text, index)) == text, for every str
- Tagged segments never share a character position
- TaggedSegment.text is the exact concatenation of its covered slots
- Slots that are pure punctuation are not words and are never matched
  on their own, but may sit inside a multi-word hit
- merge_literals=True (default) coalesces adjacent literal pieces, so
  text with no hits comes back as a single LiteralSegment
- merge_literals=False keeps one literal per slot and splits edge
  punctuation off unmatched words, for per-word styling
- annotate("", index) == []; non-str text raises TypeError
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from kupu_transcript.config import HYPHEN_LIKE_CHARS
from kupu_transcript.core.ir import (
    AnnotatedCue,
    Cue,
    LiteralSegment,
    PhraseMatch,
    Segment,
    TaggedSegment,
)
from kupu_transcript.core.matcher import find_longest_match
from kupu_transcript.core.vocabulary import VocabularyIndex

# Splitting on a capturing group keeps the whitespace runs in the result.
_SLOT_SPLIT_RE = re.compile(r"(\s+)")

# Leading/trailing characters that are not letters, digits or hyphens.
_EDGE_PUNCTUATION_RE = re.compile(r"^(?:[^\w-]|_)+|(?:[^\w-]|_)+$")

# leading punctuation, word, trailing punctuation
_PUNCTUATION_SPLIT_RE = re.compile(r"^((?:\W|_)*)(.*?)((?:\W|_)*)$", re.DOTALL)

_HYPHEN_FOLD = str.maketrans({char: "-" for char in HYPHEN_LIKE_CHARS})


def tokenize(text: str) -> list[str]:
    """Split text into word and whitespace slots; joining them gives back text."""
    return [slot for slot in _SLOT_SPLIT_RE.split(text) if slot]


def match_form(slot: str) -> str:
    """Return the form of a word slot used for vocabulary lookup.

    Dash variants become "-" and edge punctuation is stripped; casing is
    kept (the index lookup lowercases). Returns "" for pure punctuation.
    """
    return _EDGE_PUNCTUATION_RE.sub("", slot.translate(_HYPHEN_FOLD))


def annotate(
    text: str,
    index: VocabularyIndex,
    *,
    merge_literals: bool = True,
) -> list[Segment]:
    """Segment ``text`` into literal and vocabulary-tagged spans.

    Args:
        text: Raw cue text.
        index: Vocabulary index built by build_index().
        merge_literals: Coalesce adjacent literal pieces (default). When
                        False, every slot is its own literal and unmatched
                        words have edge punctuation split off.

    Returns:
        Segments in text order whose texts concatenate to ``text``.

    Raises:
        TypeError: If text is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(
            "annotate() expects str, got {}".format(type(text).__name__)
        )

    slots = tokenize(text)
    words, word_to_slot = _word_map(slots)
    hits = _find_hits(words, word_to_slot, index)
    return _build_segments(slots, hits, merge_literals)


def annotate_cues(cues: Iterable[Cue], index: VocabularyIndex) -> list[AnnotatedCue]:
    """Annotate every cue of a transcript against one index."""
    return [
        AnnotatedCue(cue=cue, segments=tuple(annotate(cue.text, index)))
        for cue in cues
    ]


def segments_text(segments: Iterable[Segment]) -> str:
    """Reassemble the source text from segments."""
    return "".join(segment.text for segment in segments)


def _word_map(slots: Sequence[str]) -> tuple[list[str], list[int]]:
    """Return (match forms of the word slots, word index → slot index)."""
    words: list[str] = []
    word_to_slot: list[int] = []
    for slot_index, slot in enumerate(slots):
        if slot.isspace():
            continue
        form = match_form(slot)
        if form:
            words.append(form)
            word_to_slot.append(slot_index)
    return words, word_to_slot


def _find_hits(
    words: Sequence[str],
    word_to_slot: Sequence[int],
    index: VocabularyIndex,
) -> dict[int, tuple[int, PhraseMatch]]:
    """Run the matching cursor; map first slot of each hit → (last slot, match)."""
    hits: dict[int, tuple[int, PhraseMatch]] = {}
    if not index:
        return hits

    cursor = 0
    while cursor < len(words):
        match = find_longest_match(words, cursor, index)
        if match is None:
            cursor += 1
            continue
        first_slot = word_to_slot[cursor]
        last_slot = word_to_slot[cursor + match.word_count - 1]
        hits[first_slot] = (last_slot, match)
        cursor += match.word_count
    return hits


def _build_segments(
    slots: Sequence[str],
    hits: dict[int, tuple[int, PhraseMatch]],
    merge_literals: bool,
) -> list[Segment]:
    segments: list[Segment] = []
    slot_index = 0
    while slot_index < len(slots):
        hit = hits.get(slot_index)
        if hit is not None:
            last_slot, match = hit
            segments.append(TaggedSegment(
                text="".join(slots[slot_index:last_slot + 1]),
                matched_text=match.matched_text,
                entry=match.entry,
                vocab_id=match.entry.id,
            ))
            slot_index = last_slot + 1
            continue

        slot = slots[slot_index]
        if merge_literals or slot.isspace():
            segments.append(LiteralSegment(slot))
        else:
            segments.extend(LiteralSegment(piece) for piece in _split_punctuation(slot))
        slot_index += 1

    if merge_literals:
        return _merge_adjacent_literals(segments)
    return segments


def _split_punctuation(word: str) -> list[str]:
    """Split a word slot into [leading punctuation, word, trailing punctuation], minus empties."""
    match = _PUNCTUATION_SPLIT_RE.match(word)
    return [piece for piece in match.groups() if piece]


def _merge_adjacent_literals(segments: Sequence[Segment]) -> list[Segment]:
    merged: list[Segment] = []
    for segment in segments:
        if (
            isinstance(segment, LiteralSegment)
            and merged
            and isinstance(merged[-1], LiteralSegment)
        ):
            merged[-1] = LiteralSegment(merged[-1].text + segment.text)
        else:
            merged.append(segment)
    return merged

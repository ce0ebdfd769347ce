"""Longest-phrase vocabulary matching at a word position.

WHY: Vocabulary entries can be multi-word idioms ("ka pai", "kia ora
koutou"). When an idiom and one of its words are both in the
dictionary, learners should see the idiom, so the longest phrase at a
position must win.

HOW: For a cursor position, try phrase lengths from the cap down to 1.
Each candidate is the next L words joined by single spaces; it is looked
up normalized, then in its hyphenated form ("kia ora" → "kia-ora") for
headwords stored with hyphens. The first hit is the answer. The caller
owns the cursor: it advances by the matched word count, or by one word
when nothing matched.

RULES:
- Lengths are tried from min(max_words, remaining words) down to 1
- First hit wins (longest match); ties cannot occur
- matched_text keeps the words' original casing
- Out-of-range start_index → None
- Pure and deterministic; no backtracking
"""

from __future__ import annotations

import re
from typing import Sequence

from kupu_transcript.config import MAX_PHRASE_WORDS
from kupu_transcript.core.ir import PhraseMatch, VocabularyEntry
from kupu_transcript.core.vocabulary import VocabularyIndex, normalize_phrase

_WHITESPACE_RUN_RE = re.compile(r"\s+")


def find_longest_match(
    words: Sequence[str],
    start_index: int,
    index: VocabularyIndex,
    max_words: int = MAX_PHRASE_WORDS,
) -> PhraseMatch | None:
    """Find the longest vocabulary phrase starting at ``words[start_index]``.

    Args:
        words: Non-whitespace tokens of the text, in order.
        start_index: Cursor position in ``words``.
        index: Vocabulary index to look phrases up in.
        max_words: Longest phrase to try.

    Returns:
        PhraseMatch for the longest hit, or None when no length matches.
    """
    if start_index < 0 or start_index >= len(words):
        return None

    longest = min(max_words, len(words) - start_index)
    for length in range(longest, 0, -1):
        matched_text = " ".join(words[start_index:start_index + length])
        entry = _lookup_candidate(matched_text, index)
        if entry is not None:
            return PhraseMatch(entry=entry, word_count=length, matched_text=matched_text)
    return None


def _lookup_candidate(phrase: str, index: VocabularyIndex) -> VocabularyEntry | None:
    key = normalize_phrase(phrase)
    entry = index.get(key)
    if entry is None:
        entry = index.get(_WHITESPACE_RUN_RE.sub("-", key))
    return entry

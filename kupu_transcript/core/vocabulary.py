"""Vocabulary index: normalized phrase key → dictionary entry.

WHY: The matcher asks "is this run of words a headword?" up to five
times per word of every cue. That has to be a single dict lookup, keyed
the same way no matter how the headword was typed into the admin panel
(capitals, stray spaces, decomposed macrons).

HOW: normalize_phrase() applies NFC normalization, lowercases and trims.
build_index() walks the entries in order and stores each under its
normalized headword, so a later duplicate replaces an earlier one.
The resulting VocabularyIndex is a read-only Mapping.

RULES:
- Key = NFC(headword).lower().strip()
- Internal whitespace is preserved exactly: "kia  ora" != "kia ora"
- Duplicate keys: last entry in input order wins
- The index is never mutated after construction; rebuild to change it
- No module-level cache: callers own the index value they build
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable, Iterator

from kupu_transcript.core.ir import VocabularyEntry

logger = logging.getLogger(__name__)


def normalize_phrase(phrase: str) -> str:
    """Normalize a headword or a candidate phrase into an index key."""
    return unicodedata.normalize("NFC", phrase).lower().strip()


class VocabularyIndex(Mapping):
    """Immutable lookup from normalized phrase to VocabularyEntry.

    WHY: One index is shared read-only by every annotation call for a
    vocabulary snapshot. Making it a read-only Mapping means concurrent
    readers never observe a half-built or edited index.

    HOW: Wraps a private dict behind a MappingProxyType. Construct it with
    build_index() rather than directly.
    """

    def __init__(self, entries_by_key: Mapping[str, VocabularyEntry] | None = None) -> None:
        self._entries = MappingProxyType(dict(entries_by_key or {}))

    def __getitem__(self, key: str) -> VocabularyEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return "VocabularyIndex({} entries)".format(len(self._entries))

    def lookup(self, phrase: str) -> VocabularyEntry | None:
        """Find the entry for ``phrase`` after normalizing it."""
        return self._entries.get(normalize_phrase(phrase))


def build_index(entries: Iterable[VocabularyEntry]) -> VocabularyIndex:
    """Build a VocabularyIndex from entries in input order.

    Args:
        entries: Vocabulary entries; later duplicates win.

    Returns:
        A new, immutable index.
    """
    by_key: dict[str, VocabularyEntry] = {}
    for entry in entries:
        key = normalize_phrase(entry.headword)
        previous = by_key.get(key)
        if previous is not None:
            logger.debug(
                "Headword %r: entry %s replaces entry %s", key, entry.id, previous.id
            )
        by_key[key] = entry
    return VocabularyIndex(by_key)


def lookup(index: VocabularyIndex, phrase: str) -> VocabularyEntry | None:
    """Return the entry whose normalized headword equals ``phrase``, if any."""
    return index.lookup(phrase)

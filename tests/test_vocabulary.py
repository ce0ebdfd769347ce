"""Unit tests for the vocabulary index.

WHY: Every matcher lookup goes through the index key. If the key drifts
from how headwords are normalized, phrases silently stop matching.

HOW: Tests cover case and edge-whitespace folding, the strictness of
internal whitespace, Unicode composition, duplicate handling and the
read-only contract of VocabularyIndex.
"""

import unicodedata

import pytest

from kupu_transcript.core.ir import VocabularyEntry
from kupu_transcript.core.vocabulary import (
    VocabularyIndex,
    build_index,
    lookup,
    normalize_phrase,
)


class TestNormalizePhrase:
    """Keys are NFC, lowercase and trimmed."""

    def test_lowercase_and_trim(self):
        assert normalize_phrase("  Kia Ora ") == "kia ora"

    def test_internal_whitespace_kept(self):
        assert normalize_phrase("kia  ora") == "kia  ora"

    def test_decomposed_macron_composed(self):
        decomposed = unicodedata.normalize("NFD", "Tō")
        assert decomposed != "Tō"
        assert normalize_phrase(decomposed) == "tō"


class TestLookup:
    """lookup() normalizes the query the same way as the headwords."""

    def test_case_and_surrounding_space(self, sample_index):
        assert lookup(sample_index, "  KIA ORA ").id == "kia-ora"

    def test_method_form(self, sample_index):
        assert sample_index.lookup("Ka Pai").id == "ka-pai"

    def test_double_internal_space_does_not_match(self, sample_index):
        assert lookup(sample_index, "Kia  Ora") is None

    def test_missing_phrase(self, sample_index):
        assert lookup(sample_index, "whānau") is None

    def test_decomposed_query_finds_composed_headword(self, sample_index):
        assert lookup(sample_index, unicodedata.normalize("NFD", "tō")).id == "to"

    def test_empty_index(self, empty_index):
        assert lookup(empty_index, "anything") is None


class TestBuildIndex:
    """build_index() keys entries by normalized headword."""

    def test_one_key_per_entry(self, sample_entries, sample_index):
        assert len(sample_index) == len(sample_entries)
        assert "kia ora" in sample_index

    def test_last_duplicate_wins(self):
        first = VocabularyEntry(id="1", headword="Hoa", translation="friend")
        second = VocabularyEntry(id="2", headword=" hoa ", translation="mate")
        index = build_index([first, second])

        assert len(index) == 1
        assert lookup(index, "hoa") is second

    def test_rebuild_is_equivalent(self, sample_entries):
        first = build_index(sample_entries)
        second = build_index(sample_entries)
        assert dict(first) == dict(second)

    def test_accepts_generator(self, sample_entries):
        index = build_index(entry for entry in sample_entries)
        assert len(index) == len(sample_entries)

    def test_repr_mentions_size(self, sample_index):
        assert repr(sample_index) == "VocabularyIndex(6 entries)"


class TestIndexIsReadOnly:
    """The index cannot be edited after construction."""

    def test_item_assignment_rejected(self, sample_index, sample_entries):
        with pytest.raises(TypeError):
            sample_index["new"] = sample_entries[0]

    def test_source_dict_changes_not_visible(self, sample_entries):
        source = {"hoa": sample_entries[1]}
        index = VocabularyIndex(source)
        source["pai"] = sample_entries[3]
        assert "pai" not in index


class TestVocabularyEntry:
    """Entries reject blank headwords."""

    @pytest.mark.parametrize("headword", ["", "   "])
    def test_blank_headword(self, headword):
        with pytest.raises(ValueError):
            VocabularyEntry(id="x", headword=headword, translation="nothing")

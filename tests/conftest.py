"""Shared test fixtures for the kupu_transcript test suite.

WHY: Most test modules need the same small subtitle file and the same
vocabulary snapshot. Centralizing them here avoids duplication and keeps
every module testing against one authoritative example.

HOW: Pytest fixtures provide the raw WebVTT text, the vocabulary entries
and a prebuilt index. The module-level constants are importable for
tests that need them outside a fixture (parametrize lists, CLI files).

RULES:
- SAMPLE_VTT is the two-cue example from the player's subtitle format docs
- Entries include an idiom and one of its own words ("ka pai" / "pai")
  so longest-match behaviour is always exercised
- Entry ids are stable strings for assertion readability
"""

import copy
from typing import List

import pytest

from kupu_transcript.core.ir import VocabularyEntry
from kupu_transcript.core.vocabulary import build_index


SAMPLE_VTT = """WEBVTT

1
00:00:01.000 --> 00:00:04.500
Kia ora, e hoa.

2
00:00:05.000 --> 00:00:08.250
Ka pai tō mahi.
"""

SAMPLE_ENTRIES: List[VocabularyEntry] = [
    VocabularyEntry(id="kia-ora", headword="Kia ora", translation="hello", pronunciation="kee-ah or-ah"),
    VocabularyEntry(id="hoa", headword="hoa", translation="friend"),
    VocabularyEntry(id="ka-pai", headword="ka pai", translation="good, well done"),
    VocabularyEntry(id="pai", headword="pai", translation="good"),
    VocabularyEntry(id="to", headword="tō", translation="your (singular)"),
    VocabularyEntry(id="mahi", headword="mahi", translation="work", note="Also a verb: to work."),
]

SAMPLE_RECORDS = [
    {"id": "kia-ora", "maori": "Kia ora", "english": "hello",
     "pronunciation": "kee-ah or-ah", "description": "Common greeting."},
    {"id": "hoa", "maori": "hoa", "english": "friend"},
    {"maori": "ka pai", "english": "good, well done"},
]


@pytest.fixture
def sample_vtt():
    """The two-cue WebVTT document."""
    return SAMPLE_VTT


@pytest.fixture
def sample_entries():
    """Vocabulary entries in input order."""
    return list(SAMPLE_ENTRIES)


@pytest.fixture
def sample_index():
    """A VocabularyIndex built from SAMPLE_ENTRIES."""
    return build_index(SAMPLE_ENTRIES)


@pytest.fixture
def empty_index():
    """An index with no entries."""
    return build_index([])


@pytest.fixture
def sample_records():
    """Vocabulary API records; a fresh copy per test."""
    return copy.deepcopy(SAMPLE_RECORDS)

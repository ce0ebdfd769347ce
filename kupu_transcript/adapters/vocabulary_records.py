"""Adapter: vocabulary REST records to VocabularyEntry objects.

WHY: The vocabulary service returns records shaped for the admin panel
({"id", "maori", "english", "pronunciation", "description"}), while the
engine works with language-neutral VocabularyEntry objects. Records are
edited by hand and uploaded in batches, so some will be incomplete; one
bad record must not empty the learner's dictionary.

HOW: Each record is validated against RECORD_SCHEMA with jsonschema, then
mapped field by field:
  maori → headword (trimmed), english → translation,
  pronunciation → pronunciation, description → note.
Records without an id get one derived from the headword, the same way
the backend derives ids for new vocabulary.

RULES:
- Input records are never modified
- Invalid records are skipped with a WARNING (strict=False, default)
  or raise jsonschema.ValidationError (strict=True)
- Empty optional strings become None
- Output order follows input order, so last-write-wins in build_index()
  still means "last record wins"
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping

import jsonschema

from kupu_transcript.core.ir import VocabularyEntry

logger = logging.getLogger(__name__)

RECORD_SCHEMA: dict = {
    "type": "object",
    "required": ["maori", "english"],
    "properties": {
        "id": {"type": ["string", "integer", "null"]},
        "maori": {"type": "string", "pattern": r"\S"},
        "english": {"type": "string"},
        "pronunciation": {"type": ["string", "null"]},
        "description": {"type": ["string", "null"]},
    },
}

_ID_UNSAFE_RE = re.compile(r"[^A-Za-z0-9 ]")


def derive_vocab_id(headword: str) -> str:
    """Derive a URL-safe id from a headword.

    ASCII letters and digits are kept, spaces become hyphens, everything
    else is dropped ("Kia ora!" → "Kia-ora"). When nothing is left (a
    headword of only macron vowels, say), the trimmed headword is used.
    """
    derived = _ID_UNSAFE_RE.sub("", headword.strip()).replace(" ", "-")
    return derived or headword.strip()


def record_to_entry(record: Mapping[str, Any]) -> VocabularyEntry:
    """Validate and convert one vocabulary record.

    Raises:
        jsonschema.ValidationError: If the record does not match RECORD_SCHEMA.
    """
    jsonschema.validate(instance=record, schema=RECORD_SCHEMA)

    headword = record["maori"].strip()
    raw_id = record.get("id")
    vocab_id = str(raw_id) if raw_id not in (None, "") else derive_vocab_id(headword)

    return VocabularyEntry(
        id=vocab_id,
        headword=headword,
        translation=record["english"].strip(),
        pronunciation=record.get("pronunciation") or None,
        note=record.get("description") or None,
    )


def records_to_entries(
    records: Iterable[Mapping[str, Any]],
    strict: bool = False,
) -> List[VocabularyEntry]:
    """Convert vocabulary records, skipping (or rejecting) invalid ones.

    Args:
        records: Records as returned by the vocabulary API.
        strict: Raise on the first invalid record instead of skipping it.

    Returns:
        Entries in input order.
    """
    entries: List[VocabularyEntry] = []
    for position, record in enumerate(records):
        try:
            entries.append(record_to_entry(record))
        except jsonschema.ValidationError as exc:
            if strict:
                raise
            logger.warning("Skipping vocabulary record %d: %s", position, exc.message)
    return entries

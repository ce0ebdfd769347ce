"""Annotated JSON formatter — cues with their segments for the web player.

WHY: The player renders the transcript from JSON: one object per cue
with its timing and the ordered segments to draw, vocabulary hits
carrying the entry the tooltip shows. Emitting a file the player cannot
read is worse than failing loudly, so the document is schema-checked.

HOW: Each AnnotatedCue becomes {"id", "start", "end", "text",
"segments"}; a LiteralSegment becomes {"type": "literal", "text"} and a
TaggedSegment becomes {"type": "vocab", "text", "matchedText",
"vocabId", "entry"}. The whole document is validated against
annotated_transcript_schema.json before it is serialized.

RULES:
- Cue and segment order are preserved exactly
- Joining a cue's segment texts gives back the cue text
- Output suffix: "-annotated.json", media type "application/json"
- Non-ASCII text (macrons) is written as-is, not \\u-escaped
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import jsonschema

from kupu_transcript.core.ir import AnnotatedCue, Segment, TaggedSegment, VocabularyEntry
from kupu_transcript.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_PATH = Path(__file__).resolve().parent / "annotated_transcript_schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the annotated transcript JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _entry_dict(entry: VocabularyEntry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "headword": entry.headword,
        "translation": entry.translation,
        "pronunciation": entry.pronunciation,
        "note": entry.note,
    }


def _segment_dict(segment: Segment) -> Dict[str, Any]:
    if isinstance(segment, TaggedSegment):
        return {
            "type": "vocab",
            "text": segment.text,
            "matchedText": segment.matched_text,
            "vocabId": segment.vocab_id,
            "entry": _entry_dict(segment.entry),
        }
    return {"type": "literal", "text": segment.text}


def annotated_to_dict(annotated: Sequence[AnnotatedCue]) -> Dict[str, Any]:
    """Build the JSON-ready document for a list of annotated cues."""
    return {
        "cues": [
            {
                "id": item.cue.id,
                "start": item.cue.start_s,
                "end": item.cue.end_s,
                "text": item.cue.text,
                "segments": [_segment_dict(s) for s in item.segments],
            }
            for item in annotated
        ]
    }


class AnnotatedJSONFormatter(BaseFormatter):
    """Formatter that produces the player's annotated transcript JSON."""

    @property
    def name(self) -> str:
        return "Annotated JSON"

    def format(self, annotated: Sequence[AnnotatedCue]) -> List[FormatterOutput]:
        """Convert annotated cues into one validated JSON document.

        Raises:
            jsonschema.ValidationError: If the document does not conform
                to annotated_transcript_schema.json.
        """
        document = annotated_to_dict(annotated)
        jsonschema.validate(instance=document, schema=_get_schema())

        return [
            FormatterOutput(
                suffix="-annotated.json",
                content=json.dumps(document, indent=2, ensure_ascii=False),
                media_type="application/json",
            )
        ]

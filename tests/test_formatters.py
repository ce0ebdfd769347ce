"""Unit tests for all formatter modules.

WHY: Each formatter turns annotated cues into a file someone else reads.
Invalid JSON stops the player from drawing the transcript; a wrong
marker in the review text hides a missing gloss from the curator.

HOW: Tests run each formatter over the annotated sample transcript:
  - Annotated JSON: schema validation, segment shapes, reconstruction
  - Plain text: clock labels and [[text|translation]] markers
  - Registry: every key maps to a BaseFormatter subclass

RULES:
- Schema validation uses annotated_transcript_schema.json via SCHEMA_PATH.
- All tests use the sample_vtt and sample_index fixtures from conftest.py.
"""

import json

import jsonschema
import pytest

from kupu_transcript.core.annotator import annotate_cues
from kupu_transcript.core.ir import AnnotatedCue, Cue, LiteralSegment
from kupu_transcript.core.vtt import parse_vtt
from kupu_transcript.formatters import FORMATTERS
from kupu_transcript.formatters.base import BaseFormatter, FormatterOutput
from kupu_transcript.formatters.json_segments import (
    SCHEMA_PATH,
    AnnotatedJSONFormatter,
    annotated_to_dict,
)
from kupu_transcript.formatters.plain_text import PlainTextFormatter


def _load_schema():
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def annotated(sample_vtt, sample_index):
    return annotate_cues(parse_vtt(sample_vtt), sample_index)


class TestAnnotatedJSONFormatter:
    """JSON output for the web player."""

    def test_single_output(self, annotated):
        outputs = AnnotatedJSONFormatter().format(annotated)
        assert len(outputs) == 1
        assert isinstance(outputs[0], FormatterOutput)
        assert outputs[0].suffix == "-annotated.json"
        assert outputs[0].media_type == "application/json"

    def test_output_matches_schema(self, annotated):
        content = AnnotatedJSONFormatter().format(annotated)[0].content
        jsonschema.validate(instance=json.loads(content), schema=_load_schema())

    def test_cue_fields(self, annotated):
        document = json.loads(AnnotatedJSONFormatter().format(annotated)[0].content)
        first = document["cues"][0]
        assert first["id"] == "1"
        assert first["start"] == pytest.approx(1.0)
        assert first["end"] == pytest.approx(4.5)
        assert first["text"] == "Kia ora, e hoa."

    def test_segment_shapes(self, annotated):
        document = annotated_to_dict(annotated)
        segments = document["cues"][0]["segments"]

        assert [s["type"] for s in segments] == ["vocab", "literal", "vocab"]
        assert segments[0]["text"] == "Kia ora,"
        assert segments[0]["matchedText"] == "Kia ora"
        assert segments[0]["vocabId"] == "kia-ora"
        assert segments[0]["entry"]["translation"] == "hello"
        assert segments[0]["entry"]["pronunciation"] == "kee-ah or-ah"
        assert segments[1] == {"type": "literal", "text": " e "}

    def test_segments_reconstruct_cue_text(self, annotated):
        document = annotated_to_dict(annotated)
        for cue in document["cues"]:
            assert "".join(s["text"] for s in cue["segments"]) == cue["text"]

    def test_macrons_not_escaped(self, annotated):
        content = AnnotatedJSONFormatter().format(annotated)[0].content
        assert "tō" in content
        assert "\\u014d" not in content

    def test_empty_transcript(self):
        content = AnnotatedJSONFormatter().format([])[0].content
        assert json.loads(content) == {"cues": []}

    def test_invalid_document_rejected(self):
        broken = AnnotatedCue(
            cue=Cue(id="1", start_s=-1.0, end_s=1.0, text="x"),
            segments=(LiteralSegment("x"),),
        )
        with pytest.raises(jsonschema.ValidationError):
            AnnotatedJSONFormatter().format([broken])


class TestPlainTextFormatter:
    """Review text with inline vocabulary markers."""

    def test_sample_output(self, annotated):
        output = PlainTextFormatter().format(annotated)[0]
        assert output.content == (
            "[0:01] [[Kia ora,|hello]] e [[hoa.|friend]]\n"
            "[0:05] [[Ka pai|good, well done]] [[tō|your (singular)]] [[mahi.|work]]\n"
        )

    def test_suffix_and_media_type(self, annotated):
        output = PlainTextFormatter().format(annotated)[0]
        assert output.suffix == "-annotated.txt"
        assert output.media_type == "text/plain"

    def test_unannotated_cue_written_verbatim(self, empty_index):
        cues = [Cue(id="1", start_s=65.0, end_s=66.0, text="Kia ora, e hoa.")]
        content = PlainTextFormatter().format(annotate_cues(cues, empty_index))[0].content
        assert content == "[1:05] Kia ora, e hoa.\n"

    def test_empty_transcript(self):
        assert PlainTextFormatter().format([])[0].content == ""


class TestRegistry:
    """FORMATTERS lists formatter classes by CLI key."""

    def test_keys(self):
        assert set(FORMATTERS) == {"json", "plain_text"}

    @pytest.mark.parametrize("key", sorted(FORMATTERS))
    def test_entries_are_formatter_classes(self, key):
        formatter_cls = FORMATTERS[key]
        assert issubclass(formatter_cls, BaseFormatter)
        assert formatter_cls().name

"""Plain text review formatter with inline vocabulary markers.

WHY: Whoever curates the vocabulary list needs to see, at a glance, which
words of a video are covered and how each hit was glossed. A readable
line-per-cue dump answers that without opening the player.

HOW: One line per cue: the cue's clock label, then its segments in
order. Literal text is written as-is; a vocabulary hit is written as
``[[text|translation]]``. Line breaks inside cue text cannot occur (the
parser joins visual lines with spaces).

RULES:
- Line format: "[M:SS] " + segments
- Hit format: "[[" + segment text + "|" + entry translation + "]]"
- One trailing newline when there is at least one cue
- Output suffix: "-annotated.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List, Sequence

from kupu_transcript.core.ir import AnnotatedCue, TaggedSegment
from kupu_transcript.core.timecode import format_clock
from kupu_transcript.formatters.base import BaseFormatter, FormatterOutput


def _render_line(item: AnnotatedCue) -> str:
    parts: List[str] = ["[{}] ".format(format_clock(item.cue.start_s))]
    for segment in item.segments:
        if isinstance(segment, TaggedSegment):
            parts.append("[[{}|{}]]".format(segment.text, segment.entry.translation))
        else:
            parts.append(segment.text)
    return "".join(parts)


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces one marked-up line per cue."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, annotated: Sequence[AnnotatedCue]) -> List[FormatterOutput]:
        """Convert annotated cues into a plain text review file.

        Returns:
            A single-element list containing the plain text output.
        """
        content = "\n".join(_render_line(item) for item in annotated)
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix="-annotated.txt",
                content=content,
                media_type="text/plain",
            )
        ]

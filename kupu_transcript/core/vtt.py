"""WebVTT parsing into timed cues.

WHY: Subtitle tracks arrive as WebVTT text. The transcript view, the
cue resolver and the annotator all want an ordered list of Cue objects
with float-second timing and single-line text. One malformed cue in an
uploaded file must not cost the viewer the whole transcript.

HOW: The document is split into blocks at blank lines. The first block
is the header when it starts with "WEBVTT" (its metadata lines go with
it); NOTE, STYLE and REGION blocks are dropped whole. Inside every other
block a line containing "-->" opens a cue (after flushing the previous
one) and the lines that follow are its text. The line directly before a
timing line is that cue's identifier when it opens the block, or when it
is a bare integer.

RULES:
- Cues are emitted in file order; no sorting, no de-duplication
- A blank line ends the open cue; text never crosses a block boundary
- Text lines of a cue are joined with a single space
- A cue with no text lines is dropped silently
- A cue whose timing line fails to parse (or ends before it starts) is
  skipped with a WARNING; parsing continues with the next cue
- A cue without an identifier line gets its 1-based position in the
  result as its id
- Cue settings after the end timestamp (align:, position:, ...) are ignored
- Any str input parses without raising; non-str input raises TypeError
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from kupu_transcript.config import VTT_HEADER, VTT_TIMING_ARROW
from kupu_transcript.core.ir import Cue
from kupu_transcript.core.timecode import TimestampError, parse_timestamp

logger = logging.getLogger(__name__)

_CUE_ID_RE = re.compile(r"^\d+$")

_SKIPPED_BLOCK_KEYWORDS = ("NOTE", "STYLE", "REGION")

Block = list[tuple[int, str]]


@dataclass
class _OpenCue:
    """A cue whose timing line has been read and whose text is still accumulating."""

    cue_id: str | None
    start_s: float
    end_s: float
    lines: list[str] = field(default_factory=list)


def parse_vtt(vtt_text: str) -> list[Cue]:
    """Parse the full text of a WebVTT resource into cues.

    Args:
        vtt_text: The WebVTT document, header included.

    Returns:
        Cues in source order. Empty if the document has no usable cues.

    Raises:
        TypeError: If vtt_text is not a string.
    """
    if not isinstance(vtt_text, str):
        raise TypeError(
            "parse_vtt() expects str, got {}".format(type(vtt_text).__name__)
        )

    cues: list[Cue] = []
    for block_no, block in enumerate(_blocks(vtt_text)):
        if block_no == 0 and _is_header(block[0][1]):
            block = _after_header(block)
        if not block:
            continue
        if _is_skipped_block(block):
            logger.debug("Skipping %s block at line %d", block[0][1].split()[0], block[0][0])
            continue
        _parse_block(block, cues)

    logger.debug("Parsed %d cues", len(cues))
    return cues


def _blocks(vtt_text: str) -> list[Block]:
    """Split the document into blocks of (1-based line number, stripped line).

    Blank lines separate blocks and are not part of any block.
    """
    text = vtt_text.lstrip("\ufeff")
    raw_lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    blocks: list[Block] = []
    block: Block = []
    for line_no, raw in enumerate(raw_lines, start=1):
        line = raw.strip()
        if line:
            block.append((line_no, line))
        elif block:
            blocks.append(block)
            block = []
    if block:
        blocks.append(block)
    return blocks


def _is_header(line: str) -> bool:
    # "WEBVTT", "WEBVTT - Title", but not "WEBVTTX"
    if line == VTT_HEADER:
        return True
    return line.startswith(VTT_HEADER) and line[len(VTT_HEADER)] in " \t-"


def _after_header(block: Block) -> Block:
    """Drop the header line and its metadata from the first block.

    A file that omits the blank line after the header still has its
    first cue in this block; that cue (and its id line) is kept.
    """
    for position, (_, line) in enumerate(block):
        if VTT_TIMING_ARROW in line:
            if position > 1 and _CUE_ID_RE.match(block[position - 1][1]):
                position -= 1
            return block[position:]
    return []


def _is_skipped_block(block: Block) -> bool:
    # NOTE, STYLE and REGION blocks can never contain "-->".
    keyword = block[0][1].split(None, 1)[0]
    if keyword not in _SKIPPED_BLOCK_KEYWORDS:
        return False
    return not any(VTT_TIMING_ARROW in line for _, line in block)


def _parse_block(block: Block, cues: list[Cue]) -> None:
    """Read the cue (or cues, when blank lines are missing) of one block."""
    pending_id: str | None = None
    current: _OpenCue | None = None

    for position, (line_no, line) in enumerate(block):
        if VTT_TIMING_ARROW in line:
            _flush(current, cues)
            current = None
            cue_id, pending_id = pending_id, None
            try:
                start_s, end_s = _parse_timing(line)
            except TimestampError as exc:
                logger.warning("Skipping cue at line %d: %s", line_no, exc)
                continue
            current = _OpenCue(cue_id=cue_id, start_s=start_s, end_s=end_s)
            continue

        if _is_identifier(block, position):
            pending_id = line
            continue

        # Text before any timing line, and the text of a skipped cue, have
        # no open cue to land in.
        if current is not None:
            current.lines.append(line)

    _flush(current, cues)


def _is_identifier(block: Block, position: int) -> bool:
    following = position + 1
    if following >= len(block) or VTT_TIMING_ARROW not in block[following][1]:
        return False
    return position == 0 or bool(_CUE_ID_RE.match(block[position][1]))


def _parse_timing(line: str) -> tuple[float, float]:
    """Parse ``start --> end [settings]`` into (start_s, end_s).

    Raises:
        TimestampError: If either side is missing or malformed, or the cue
                        would end before it starts.
    """
    left, _, right = line.partition(VTT_TIMING_ARROW)
    start_s = parse_timestamp(left)

    right_parts = right.split()
    if not right_parts:
        raise TimestampError("Missing end timestamp in {!r}".format(line))
    end_s = parse_timestamp(right_parts[0])

    if end_s < start_s:
        raise TimestampError("Cue ends before it starts: {!r}".format(line))
    return start_s, end_s


def _flush(current: _OpenCue | None, cues: list[Cue]) -> None:
    """Emit the open cue, if it collected any text."""
    if current is None:
        return
    if not current.lines:
        logger.debug("Dropping cue with no text at %.3fs", current.start_s)
        return

    cue_id = current.cue_id if current.cue_id is not None else str(len(cues) + 1)
    cues.append(Cue(
        id=cue_id,
        start_s=current.start_s,
        end_s=current.end_s,
        text=" ".join(current.lines),
    ))

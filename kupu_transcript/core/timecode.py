"""Timestamp parsing and display formatting.

WHY: WebVTT timing lines carry timestamps as text ("00:01:04.500") while
every other stage works in float seconds. The transcript view also shows
a short clock label next to each cue. Both conversions live here so the
parser stays a pure line scanner.

HOW: parse_timestamp() matches one regex covering the full
(HH:MM:SS.mmm) and short (MM:SS.mmm) WebVTT forms, accepting a comma as
the fraction separator as SRT-derived files often do. format_clock()
renders whole minutes and seconds.

RULES:
- Result = hours*3600 + minutes*60 + seconds
- Minutes and seconds fields must be < 60
- Anything else raises TimestampError (a ValueError)
- format_clock never wraps minutes into hours: 3725s → "62:05"
"""

from __future__ import annotations

import math
import re

_TIMESTAMP_RE = re.compile(
    r"^(?:(?P<hours>\d+):)?(?P<minutes>\d{1,2}):(?P<seconds>\d{1,2}(?:[.,]\d+)?)$"
)


class TimestampError(ValueError):
    """Raised when a WebVTT timestamp cannot be parsed.

    WHY: The VTT parser recovers from bad timing lines by skipping the
    cue; a dedicated subclass lets it catch exactly this failure and
    nothing else.
    """


def parse_timestamp(value: str) -> float:
    """Parse a WebVTT timestamp into float seconds.

    Args:
        value: Text such as ``"00:00:04.500"``, ``"00:00:04,500"`` or
               ``"01:04.5"``. Surrounding whitespace is ignored.

    Returns:
        The timestamp in seconds.

    Raises:
        TimestampError: If the text is not a valid timestamp.
    """
    match = _TIMESTAMP_RE.match(value.strip())
    if match is None:
        raise TimestampError("Invalid timestamp: {!r}".format(value))

    hours = int(match.group("hours") or 0)
    minutes = int(match.group("minutes"))
    seconds = float(match.group("seconds").replace(",", "."))

    if minutes >= 60 or seconds >= 60:
        raise TimestampError("Timestamp field out of range: {!r}".format(value))

    return hours * 3600 + minutes * 60 + seconds


def format_clock(seconds: float) -> str:
    """Format seconds as the ``M:SS`` label shown beside each cue.

    Negative and non-finite values render as ``"0:00"``.
    """
    if not math.isfinite(seconds) or seconds < 0:
        seconds = 0.0
    minutes = int(seconds // 60)
    remainder = int(seconds % 60)
    return "{}:{:02d}".format(minutes, remainder)

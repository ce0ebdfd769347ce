"""Active-cue resolution for a playback timestamp.

WHY: The transcript view highlights (and scrolls to) the cue being
spoken. Subtitle authors sometimes let cues overlap; when they do, the
cue listed later in the file is the one viewers should see.

HOW: Walk the cue list from the end towards the start and return the
first cue whose inclusive interval contains t. The reverse walk is the
tie-break rule, written out explicitly so it stays auditable.

RULES:
- Active = last cue in source order with start_s <= t <= end_s
- No containing cue (gap, before first, after last) → None
- Total for any float t, including negatives, inf and nan
"""

from __future__ import annotations

from typing import Sequence

from kupu_transcript.core.ir import Cue


def active_index(cues: Sequence[Cue], t: float) -> int | None:
    """Return the position of the active cue at time ``t``, or None.

    The position is what the transcript view needs for auto-scrolling.
    """
    for position in range(len(cues) - 1, -1, -1):
        if cues[position].contains(t):
            return position
    return None


def resolve_active(cues: Sequence[Cue], t: float) -> Cue | None:
    """Return the cue displayed at playback time ``t``, or None.

    Args:
        cues: Cues in source order, as returned by parse_vtt().
        t: Playback position in seconds.

    Returns:
        The last cue in source order whose interval contains ``t``.
    """
    position = active_index(cues, t)
    if position is None:
        return None
    return cues[position]

"""Configuration constants, matching limits, and .env loading.

WHY: Centralizes the values the engine and the CLI depend on so they are
easy to find and override. The matching limits are plain data, not buried
in the matcher, so both humans and tools can see what the annotator does.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values. Settings that only affect the CLI (log level,
default output formats) can be overridden via environment variables.

RULES:
- MAX_PHRASE_WORDS is the lookahead cap of the phrase matcher (5 words)
- HYPHEN_LIKE_CHARS are folded to "-" before matching, never in output
- The engine itself reads no environment variables; only the CLI does
- All environment defaults can be overridden via .env
"""

from __future__ import annotations

import os
from typing import List, Optional

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Matching limits
# ---------------------------------------------------------------------------

MAX_PHRASE_WORDS = 5
"""Longest vocabulary phrase, in words, that the matcher will try."""

HYPHEN_LIKE_CHARS = "\u2010\u2011\u2012\u2013\u2014\u2015\u2212"
"""Dash variants treated as a plain hyphen when comparing words."""

# ---------------------------------------------------------------------------
# WebVTT
# ---------------------------------------------------------------------------

VTT_HEADER = "WEBVTT"
VTT_TIMING_ARROW = "-->"

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("KUPU_LOG_LEVEL", "WARNING").upper()
DEFAULT_FORMATS = os.getenv("KUPU_DEFAULT_FORMATS", "plain_text")


def parse_format_list(value: Optional[str]) -> List[str]:
    """Split a comma-separated list of formatter keys.

    RULES:
    - Whitespace around keys is ignored
    - Empty items are dropped ("json,,plain_text" → two keys)
    - None or an empty string yields an empty list
    """
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]

"""Unit tests for timestamp parsing and clock formatting.

WHY: Every cue's interval comes from parse_timestamp(); an off-by-a-field
error shifts the whole transcript against the video.

HOW: Tests cover the full and short WebVTT forms, the comma separator,
rejection of malformed input, and the M:SS display label.

RULES:
- Floating-point comparisons use pytest.approx with default tolerance.
"""

import pytest

from kupu_transcript.core.timecode import TimestampError, format_clock, parse_timestamp


class TestParseTimestamp:
    """HH:MM:SS.mmm, HH:MM:SS,mmm and MM:SS.mmm all parse to seconds."""

    def test_full_form(self):
        assert parse_timestamp("00:00:04.500") == pytest.approx(4.5)

    def test_hours_and_minutes_add_up(self):
        assert parse_timestamp("01:02:03.250") == pytest.approx(3723.25)

    def test_comma_fraction_separator(self):
        assert parse_timestamp("00:00:08,250") == pytest.approx(8.25)

    def test_short_form_without_hours(self):
        assert parse_timestamp("01:04.500") == pytest.approx(64.5)

    def test_surrounding_whitespace_ignored(self):
        assert parse_timestamp("  00:00:02.000 ") == pytest.approx(2.0)

    def test_no_fraction(self):
        assert parse_timestamp("00:00:02") == pytest.approx(2.0)

    def test_hours_beyond_two_digits(self):
        assert parse_timestamp("100:00:00.000") == pytest.approx(360000.0)


class TestParseTimestampErrors:
    """Malformed timestamps raise TimestampError, which is a ValueError."""

    @pytest.mark.parametrize("value", [
        "",
        "abc",
        "4.5",
        "00:00:xx.000",
        "00:61:00.000",
        "00:00:60.000",
        "-00:00:01.000",
    ])
    def test_rejects(self, value):
        with pytest.raises(TimestampError):
            parse_timestamp(value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_timestamp("nope")


class TestFormatClock:
    """format_clock renders the M:SS label shown beside each cue."""

    def test_under_a_minute(self):
        assert format_clock(4.5) == "0:04"

    def test_pads_seconds(self):
        assert format_clock(65) == "1:05"

    def test_minutes_not_wrapped_into_hours(self):
        assert format_clock(3725) == "62:05"

    def test_negative_clamps_to_zero(self):
        assert format_clock(-3) == "0:00"

    def test_non_finite_clamps_to_zero(self):
        assert format_clock(float("nan")) == "0:00"
        assert format_clock(float("inf")) == "0:00"

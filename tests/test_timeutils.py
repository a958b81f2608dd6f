"""
Tests for minute-of-day parsing and formatting.
"""

from datetime import datetime, time

import pytest

from busfinder.timeutils import format_minutes, minutes_since_midnight, parse_hhmm, parse_time_of_day


@pytest.mark.parametrize("value, expected", [
    ("0:04", 4),
    ("6:03", 363),
    ("07:10", 430),
    ("23:47", 1427),
])
def test_parse_time_of_day(value, expected):
    assert parse_time_of_day(value) == expected


def test_parse_time_of_day_degrades_to_zero():
    """Unparsable components count as zero instead of raising."""
    assert parse_time_of_day("xx:15") == 15
    assert parse_time_of_day("7:yy") == 420
    assert parse_time_of_day("") == 0
    assert parse_time_of_day("8") == 480


def test_format_minutes_inverts_parse():
    for value in ("0:04", "6:03", "13:30", "23:59"):
        assert format_minutes(parse_time_of_day(value)) == value


def test_format_minutes_wraps_past_midnight():
    assert format_minutes(24 * 60 + 4) == "0:04"


def test_minutes_since_midnight_accepts_datetime_and_time():
    assert minutes_since_midnight(datetime(2025, 10, 15, 22, 50, 59)) == 1370
    assert minutes_since_midnight(time(0, 13)) == 13


def test_parse_hhmm_is_strict():
    assert parse_hhmm("8:30") == time(8, 30)
    assert parse_hhmm(" 23:06 ") == time(23, 6)
    for bad in ("8", "8:3", "25:00", "8:61", "ab:cd", "08:30:00"):
        with pytest.raises(ValueError):
            parse_hhmm(bad)

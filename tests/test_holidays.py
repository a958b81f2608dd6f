"""
Tests for the service-suspension calendar.
"""

from datetime import datetime, timedelta

from busfinder.holidays import (
    HOLIDAY_MESSAGE, HOLIDAYS, WEEKEND_MESSAGE, is_service_suspended, suspension_message,
)
from tests.helpers import SATURDAY, SPORTS_DAY, SUNDAY, WEDNESDAY


def test_weekdays_run():
    assert not is_service_suspended(WEDNESDAY)
    assert suspension_message(WEDNESDAY) is None


def test_weekends_suspended_regardless_of_holiday_set():
    for offset in range(0, 52 * 7, 7):
        assert is_service_suspended(SATURDAY + timedelta(days=offset), frozenset())
        assert is_service_suspended(SUNDAY + timedelta(days=offset), frozenset())
    assert suspension_message(SUNDAY) == WEEKEND_MESSAGE


def test_listed_holiday_suspended():
    assert SPORTS_DAY.isoformat() in HOLIDAYS
    assert is_service_suspended(SPORTS_DAY)
    assert suspension_message(SPORTS_DAY) == HOLIDAY_MESSAGE


def test_custom_holiday_set():
    assert is_service_suspended(WEDNESDAY, frozenset({WEDNESDAY.isoformat()}))
    assert not is_service_suspended(SPORTS_DAY, frozenset())


def test_datetime_is_checked_by_calendar_day():
    assert is_service_suspended(datetime(2025, 10, 13, 9, 30))
    assert not is_service_suspended(datetime(2025, 10, 15, 9, 30))

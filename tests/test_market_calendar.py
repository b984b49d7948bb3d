# Copyright 2026 ChakraOps
# SPDX-License-Identifier: MIT
"""US equity market calendar: closures, half days, collisions, year range."""

from __future__ import annotations

from datetime import date, time

import pytest

from tradingdays.core.calendar import (
    EARLY_CLOSE,
    MAX_YEAR,
    MIN_YEAR,
    HolidayEvent,
    HolidayKind,
    InvalidDateError,
    YearCalendar,
    build_holiday_calendar,
)


def _dates(events) -> list:
    return [e.date for e in events]


def test_2026_full_closures() -> None:
    cal = build_holiday_calendar(2026)
    assert [(e.date, e.name) for e in cal.full_closures()] == [
        (date(2026, 1, 1), "New Year's Day"),
        (date(2026, 1, 19), "Martin Luther King Jr. Day"),
        (date(2026, 2, 16), "Presidents' Day"),
        (date(2026, 4, 3), "Good Friday"),
        (date(2026, 5, 25), "Memorial Day"),
        (date(2026, 6, 19), "Juneteenth National Independence Day"),
        (date(2026, 7, 3), "Independence Day"),
        (date(2026, 9, 7), "Labor Day"),
        (date(2026, 11, 26), "Thanksgiving Day"),
        (date(2026, 12, 25), "Christmas Day"),
    ]


def test_2026_july_3_half_day_suppressed_by_observed_independence_day() -> None:
    cal = build_holiday_calendar(2026)
    assert cal.get(date(2026, 7, 3)).kind is HolidayKind.FULL_CLOSURE
    assert _dates(cal.half_days()) == [date(2026, 11, 27), date(2026, 12, 24)]


def test_2024_has_all_three_half_days_at_1pm() -> None:
    cal = build_holiday_calendar(2024)
    half = cal.half_days()
    assert [(e.date, e.name) for e in half] == [
        (date(2024, 7, 3), "Day Before Independence Day (early close)"),
        (date(2024, 11, 29), "Day After Thanksgiving (early close)"),
        (date(2024, 12, 24), "Christmas Eve (early close)"),
    ]
    assert all(e.is_half_day and e.close_time == time(13, 0) == EARLY_CLOSE for e in half)
    assert not any(e.is_half_day for e in cal.full_closures())


def test_christmas_eve_on_weekend_is_excluded() -> None:
    # Dec 24 2022 is a Saturday, Dec 24 2023 a Sunday
    assert date(2022, 12, 24) not in build_holiday_calendar(2022)
    assert date(2023, 12, 24) not in build_holiday_calendar(2023)


def test_christmas_eve_suppressed_when_christmas_observed_on_it() -> None:
    # Dec 25 2021 is a Saturday, so the closure is observed Friday Dec 24
    cal = build_holiday_calendar(2021)
    event = cal.get(date(2021, 12, 24))
    assert event.name == "Christmas Day"
    assert event.kind is HolidayKind.FULL_CLOSURE
    assert event.close_time is None


def test_new_years_on_saturday_leaves_nine_closures() -> None:
    cal = build_holiday_calendar(2022)
    assert len(cal.full_closures()) == 9
    assert all(e.name != "New Year's Day" for e in cal)
    assert date(2022, 12, 26) in cal  # Christmas observed Monday
    assert _dates(cal.half_days()) == [date(2022, 11, 25)]


def test_2023_observed_new_years_monday() -> None:
    cal = build_holiday_calendar(2023)
    assert cal.get(date(2023, 1, 2)).name == "New Year's Day"
    assert _dates(cal.half_days()) == [date(2023, 7, 3), date(2023, 11, 24)]


def test_every_year_in_range_has_consistent_calendar() -> None:
    for year in range(MIN_YEAR, MAX_YEAR + 1):
        cal = build_holiday_calendar(year)
        closures = cal.full_closures()
        half = cal.half_days()
        expected_closures = 9 if date(year, 1, 1).weekday() == 5 else 10
        assert len(closures) == expected_closures, year
        assert len(half) <= 3, year
        assert len(cal) == len(closures) + len(half), year
        assert all(e.date.year == year for e in cal), year
        assert all(e.date.weekday() < 5 for e in cal), year


def test_day_after_thanksgiving_always_friday_half_day() -> None:
    for year in (2024, 2025, 2026, 2027):
        cal = build_holiday_calendar(year)
        event = next(e for e in cal.half_days() if e.name.startswith("Day After Thanksgiving"))
        assert event.date.weekday() == 4


def test_build_is_deterministic() -> None:
    assert build_holiday_calendar(2025) == build_holiday_calendar(2025)


def test_custom_early_close() -> None:
    cal = build_holiday_calendar(2024, early_close=time(12, 30))
    assert {e.close_time for e in cal.half_days()} == {time(12, 30)}


@pytest.mark.parametrize("year", [MIN_YEAR - 1, MAX_YEAR + 1, "2026", True, 2026.5])
def test_invalid_year_raises(year) -> None:
    with pytest.raises(InvalidDateError):
        build_holiday_calendar(year)


def test_calendar_is_read_only() -> None:
    cal = build_holiday_calendar(2026)
    with pytest.raises(TypeError):
        cal.events[date(2026, 3, 2)] = HolidayEvent(date(2026, 3, 2), "x", HolidayKind.FULL_CLOSURE)


def test_half_day_event_requires_close_time() -> None:
    with pytest.raises(ValueError):
        HolidayEvent(date(2026, 12, 24), "Christmas Eve", HolidayKind.HALF_DAY)
    with pytest.raises(ValueError):
        HolidayEvent(date(2026, 12, 25), "Christmas Day", HolidayKind.FULL_CLOSURE, close_time=time(13, 0))


def test_year_calendar_rejects_event_from_other_year() -> None:
    event = HolidayEvent(date(2025, 12, 25), "Christmas Day", HolidayKind.FULL_CLOSURE)
    with pytest.raises(ValueError):
        YearCalendar(year=2026, events={event.date: event})


def test_to_dict() -> None:
    data = build_holiday_calendar(2026).to_dict()
    assert data["year"] == 2026
    assert data["full_closure_count"] == 10
    assert data["half_day_count"] == 2
    assert data["events"][0] == {
        "date": "2026-01-01",
        "name": "New Year's Day",
        "kind": "closed",
        "close_time": None,
    }
    assert data["events"][-2] == {
        "date": "2026-12-24",
        "name": "Christmas Eve (early close)",
        "kind": "half-day",
        "close_time": "13:00",
    }

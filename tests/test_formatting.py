from datetime import date, time

import pytest

from src.timetable.formatting import (
    end_date_text,
    frequency_text,
    long_date,
    tables_text,
    time_pretty,
    time_range_pretty,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("10:00", "10am"),
        ("11:30", "11:30am"),
        ("13:45", "1:45pm"),
        ("09:05", "9:05am"),
        ("00:00", "12am"),
        ("00:30", "12:30am"),
        ("12:00", "12pm"),
        ("12:15", "12:15pm"),
        ("23:59", "11:59pm"),
        ("13:45:00", "1:45pm"),
    ],
)
def test_time_pretty(value, expected):
    assert time_pretty(value) == expected


def test_time_range_keeps_suffix_on_both_sides():
    assert time_range_pretty("10:00", "11:30") == "10am to 11:30am"
    assert time_range_pretty("13:45", "15:45") == "1:45pm to 3:45pm"
    assert time_range_pretty("11:00", "13:00") == "11am to 1pm"


@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2025, 5, 5), "5 May 2025"),
        (date(2023, 12, 25), "25 December 2023"),
        (date(2024, 2, 29), "29 February 2024"),
    ],
)
def test_long_date(value, expected):
    assert long_date(value) == expected


def test_tables_text():
    assert tables_text(20) == "20 tables"


def test_frequency_one_off_when_dates_match():
    day = date(2025, 5, 5)
    assert frequency_text(day, day, 1) == "One off"
    assert frequency_text(day, day, 3) == "One off"


def test_frequency_repeating():
    start = date(2025, 5, 5)
    assert frequency_text(start, None, 1) == "Every week"
    assert frequency_text(start, date(2025, 6, 1), 1) == "Every week"
    assert frequency_text(start, None, 4) == "Every 4 weeks"


def test_end_date_text():
    assert end_date_text(None) == "Not entered"
    assert end_date_text(date(2025, 5, 5)) == "5 May 2025"


def test_time_pretty_accepts_time_objects():
    assert time_pretty(time(13, 45)) == "1:45pm"
    assert time_range_pretty(time(10), time(11, 30)) == "10am to 11:30am"

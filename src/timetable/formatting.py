"""Display formatting for timetable values."""

from datetime import date, time

NOT_ENTERED = "Not entered"
ONE_OFF = "One off"


def time_pretty(value: time | str) -> str:
    """Format a time of day as "10am" or "1:45pm".

    Args:
        value: Time of day, or a string in HH:MM (or HH:MM:SS) format.

    Returns:
        12-hour clock time without leading zero, minutes dropped on the hour.
    """
    parsed = time.fromisoformat(value) if isinstance(value, str) else value
    hour = parsed.hour % 12 or 12
    suffix = "am" if parsed.hour < 12 else "pm"
    if parsed.minute == 0:
        return f"{hour}{suffix}"
    return f"{hour}:{parsed.minute:02d}{suffix}"


def time_range_pretty(start: time | str, end: time | str) -> str:
    """Format a session time slot, e.g. "10am to 11:30am"."""
    return f"{time_pretty(start)} to {time_pretty(end)}"


def long_date(value: date) -> str:
    """Format a date as "5 May 2025"."""
    return f"{value.day} {value.strftime('%B %Y')}"


def tables_text(count: int) -> str:
    return f"{count} tables"


def frequency_text(
    valid_from_date: date, valid_to_date: date | None, weekly_frequency: int
) -> str:
    """Describe how often a session repeats."""
    if valid_from_date == valid_to_date:
        return ONE_OFF
    if weekly_frequency == 1:
        return "Every week"
    return f"Every {weekly_frequency} weeks"


def end_date_text(valid_to_date: date | None) -> str:
    if valid_to_date is None:
        return NOT_ENTERED
    return long_date(valid_to_date)

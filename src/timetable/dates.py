"""Selected-date parsing and week navigation for the timetable page."""

from datetime import date, timedelta

from pydantic import BaseModel


class TimetableWeek(BaseModel):
    """The Monday-to-Sunday week around a selected date."""

    week_of_dates: list[date]
    previous_week: date  # Monday of the week before
    next_week: date  # Monday of the week after


def parse_date_param(value: str | None, default: date) -> date:
    """Parse a YYYY-MM-DD query value, falling back to default.

    Args:
        value: Raw `date` query string value (may be empty or invalid).
        default: Date to use when value is missing or not a valid date.
    """
    if not value:
        return default
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return default


def week_of_dates_starting_monday(selected: date) -> TimetableWeek:
    """Compute the seven dates of the week containing selected.

    Returns:
        TimetableWeek with Mon-Sun dates and the Mondays of the weeks either side.
    """
    # weekday() returns 0 for Monday
    monday = selected - timedelta(days=selected.weekday())
    return TimetableWeek(
        week_of_dates=[monday + timedelta(days=offset) for offset in range(7)],
        previous_week=monday - timedelta(weeks=1),
        next_week=monday + timedelta(weeks=1),
    )

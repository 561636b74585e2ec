"""Build visits timetable rows from session schedules.

Each schedule active on the selected date becomes one row per visit
restriction with tables available: an Open row when open capacity is
non-zero, then a Closed row when closed capacity is non-zero. Rows keep
the order of the schedules they came from.
"""

from collections.abc import Iterable
from datetime import date

from src.timetable.formatting import (
    end_date_text,
    frequency_text,
    tables_text,
    time_range_pretty,
)
from src.timetable.groups import describe_attendees
from src.timetable.logging import get_logger
from src.timetable.models import SessionSchedule, TimetableRow

log = get_logger(__name__)


def build_timetable(
    schedules: Iterable[SessionSchedule], selected_date: date | str
) -> list[TimetableRow]:
    """Build timetable rows for the schedules running on selected_date.

    Args:
        schedules: Session schedules returned for the selected date.
        selected_date: The day being shown (date or YYYY-MM-DD).

    Returns:
        Rows in schedule order, open before closed within a schedule.
    """
    if isinstance(selected_date, str):
        selected_date = date.fromisoformat(selected_date)

    rows: list[TimetableRow] = []
    for schedule in schedules:
        slot = schedule.session_time_slot
        date_range = schedule.session_date_range

        shared = {
            "time": time_range_pretty(slot.start_time, slot.end_time),
            "attendees": describe_attendees(schedule),
            "frequency": frequency_text(
                date_range.valid_from_date,
                date_range.valid_to_date,
                schedule.weekly_frequency,
            ),
            "end_date": end_date_text(date_range.valid_to_date),
        }

        if schedule.capacity.open > 0:
            rows.append(
                TimetableRow(
                    type="Open", capacity=tables_text(schedule.capacity.open), **shared
                )
            )
        if schedule.capacity.closed > 0:
            rows.append(
                TimetableRow(
                    type="Closed",
                    capacity=tables_text(schedule.capacity.closed),
                    **shared,
                )
            )

    log.debug("timetable_built", selected_date=selected_date.isoformat(), rows=len(rows))
    return rows

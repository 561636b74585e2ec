"""Visit sessions service and the timetable page controller."""

from datetime import date

from src.timetable.builder import build_timetable
from src.timetable.client import OrchestrationApiClient
from src.timetable.dates import parse_date_param, week_of_dates_starting_monday
from src.timetable.errors import NetworkError, NotFoundError
from src.timetable.logging import get_logger
from src.timetable.models import ApiModel, SessionSchedule, TimetableRow

log = get_logger(__name__)

EMPTY_SCHEDULE_MESSAGE = "No visit sessions on this day."


class TimetablePage(ApiModel):
    """Everything the timetable view needs to render one day."""

    prison_id: str
    selected_date: date
    week_of_dates: list[date]
    previous_week: date
    next_week: date
    rows: list[TimetableRow]
    empty_message: str | None = None


class VisitSessionsService:
    def __init__(self, client: OrchestrationApiClient) -> None:
        self.client = client

    def get_session_schedule(
        self, prison_id: str, session_date: date
    ) -> list[SessionSchedule]:
        log.debug(
            "session_schedule_requested",
            prison_id=prison_id,
            date=session_date.isoformat(),
        )
        return self.client.get_session_schedule(prison_id, session_date.isoformat())


class TimetableController:
    """Builds the visits timetable page for a prison and selected date."""

    def __init__(self, visit_sessions_service: VisitSessionsService) -> None:
        self.visit_sessions_service = visit_sessions_service

    def view(
        self, prison_id: str, date_param: str | None = None, today: date | None = None
    ) -> TimetablePage:
        """Assemble the timetable page.

        An invalid or missing date_param selects today. A schedule that
        cannot be fetched (network failure or unknown prison) is shown as
        an empty day rather than an error page.

        Args:
            prison_id: Prison code of the selected establishment.
            date_param: Raw `date` query value, expected as YYYY-MM-DD.
            today: Override for the current date (defaults to date.today()).
        """
        selected_date = parse_date_param(date_param, today or date.today())
        week = week_of_dates_starting_monday(selected_date)

        try:
            schedules = self.visit_sessions_service.get_session_schedule(
                prison_id, selected_date
            )
        except (NetworkError, NotFoundError) as e:
            log.warning(
                "session_schedule_unavailable",
                prison_id=prison_id,
                date=selected_date.isoformat(),
                error=str(e),
                type=type(e).__name__,
            )
            schedules = []

        rows = build_timetable(schedules, selected_date)

        return TimetablePage(
            prison_id=prison_id,
            selected_date=selected_date,
            week_of_dates=week.week_of_dates,
            previous_week=week.previous_week,
            next_week=week.next_week,
            rows=rows,
            empty_message=None if rows else EMPTY_SCHEDULE_MESSAGE,
        )

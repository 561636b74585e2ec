"""Visits timetable for prison social visit sessions.

Turns the session schedules returned by the visits orchestration API into
display-ready timetable rows (time, visit type, tables, who can attend,
frequency and end date).
"""

from src.timetable.builder import build_timetable
from src.timetable.client import OrchestrationApiClient
from src.timetable.models import SessionSchedule, TimetableRow
from src.timetable.service import TimetableController, TimetablePage, VisitSessionsService

__all__ = [
    "build_timetable",
    "OrchestrationApiClient",
    "SessionSchedule",
    "TimetableRow",
    "TimetableController",
    "TimetablePage",
    "VisitSessionsService",
]

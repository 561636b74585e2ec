import pytest

from src.timetable.models import SessionSchedule


def make_session_schedule(
    *,
    session_template_reference: str = "-afe.dcc.0f",
    start_time: str = "13:45",
    end_time: str = "15:45",
    valid_from_date: str = "2023-02-01",
    valid_to_date: str | None = None,
    open_tables: int = 40,
    closed_tables: int = 0,
    category_groups: list[str] | None = None,
    incentive_groups: list[str] | None = None,
    location_groups: list[str] | None = None,
    category_inclusive: bool = True,
    incentive_inclusive: bool = True,
    location_inclusive: bool = True,
    weekly_frequency: int = 1,
) -> SessionSchedule:
    """Build a SessionSchedule with every field defaulted."""
    return SessionSchedule.model_validate(
        {
            "sessionTemplateReference": session_template_reference,
            "sessionTimeSlot": {"startTime": start_time, "endTime": end_time},
            "sessionDateRange": {
                "validFromDate": valid_from_date,
                "validToDate": valid_to_date,
            },
            "capacity": {"open": open_tables, "closed": closed_tables},
            "prisonerCategoryGroupNames": category_groups or [],
            "prisonerIncentiveLevelGroupNames": incentive_groups or [],
            "prisonerLocationGroupNames": location_groups or [],
            "areCategoryGroupsInclusive": category_inclusive,
            "areIncentiveGroupsInclusive": incentive_inclusive,
            "areLocationGroupsInclusive": location_inclusive,
            "weeklyFrequency": weekly_frequency,
            "visitType": "SOCIAL",
            "visitRoom": "Visits hall",
        }
    )


def session_schedule_payload(**overrides) -> dict:
    """Camel-case API payload for one schedule, as the orchestration API sends it."""
    return make_session_schedule(**overrides).model_dump(mode="json", by_alias=True)


@pytest.fixture
def session_schedule():
    return make_session_schedule


@pytest.fixture
def schedule_payload():
    return session_schedule_payload

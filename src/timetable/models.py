"""Pydantic models for visit session schedules and timetable rows.

All data structures use Pydantic v2 for validation, serialization, and type safety.
Payloads from the orchestration API are camelCase; attributes are snake_case.
"""

from datetime import date, time
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError
from pydantic.alias_generators import to_camel

from src.timetable.errors import DataIntegrityError

TableCount = Annotated[StrictInt, Field(ge=0)]


class ApiModel(BaseModel):
    """Base for models exchanged with the orchestration API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SessionTimeSlot(ApiModel):
    start_time: time  # "13:45" in payloads
    end_time: time  # "15:45" in payloads


class SessionCapacity(ApiModel):
    """Number of tables for each visit restriction.

    Strict integers: a bool, float, NaN or numeric string is rejected
    rather than coerced.
    """

    open: TableCount
    closed: TableCount


class SessionDateRange(ApiModel):
    valid_from_date: date
    valid_to_date: date | None = None  # None = runs until further notice


class SessionSchedule(ApiModel):
    """One recurring visit session definition active on the selected date.

    Group name lists are eligibility constraints; the matching
    are_*_inclusive flag says whether the named groups are the only ones
    who may attend (True) or the ones excluded (False).
    """

    session_template_reference: str | None = None
    session_time_slot: SessionTimeSlot
    session_date_range: SessionDateRange
    capacity: SessionCapacity
    prisoner_category_group_names: list[str] = Field(default_factory=list)
    prisoner_incentive_level_group_names: list[str] = Field(default_factory=list)
    prisoner_location_group_names: list[str] = Field(default_factory=list)
    are_category_groups_inclusive: bool = True
    are_incentive_groups_inclusive: bool = True
    are_location_groups_inclusive: bool = True
    weekly_frequency: Annotated[StrictInt, Field(ge=1)] = 1
    visit_type: str | None = None  # "SOCIAL"
    visit_room: str | None = None  # "Visits hall"


class TimetableRow(ApiModel):
    """A display-ready row of the visits timetable."""

    time: str  # "1:45pm to 3:45pm"
    type: Literal["Open", "Closed"]
    capacity: str  # "40 tables"
    attendees: str  # "All prisoners"
    frequency: str  # "Every week"
    end_date: str  # "5 May 2025" or "Not entered"


def parse_session_schedules(payload: object) -> list[SessionSchedule]:
    """Validate a raw API payload into SessionSchedule models.

    Args:
        payload: Decoded JSON body of the schedule endpoint (a list of objects).

    Returns:
        Validated schedules, in payload order.

    Raises:
        DataIntegrityError: If the payload is not a list or any entry fails
            validation (e.g. negative or non-numeric capacity).
    """
    if not isinstance(payload, list):
        raise DataIntegrityError(
            f"Expected a list of session schedules, got {type(payload).__name__}"
        )

    schedules: list[SessionSchedule] = []
    for index, raw in enumerate(payload):
        try:
            schedules.append(SessionSchedule.model_validate(raw))
        except ValidationError as e:
            raise DataIntegrityError(
                f"Invalid session schedule at index {index}: "
                f"{e.error_count()} validation error(s)",
                errors=e.errors(include_url=False),
            ) from e
    return schedules

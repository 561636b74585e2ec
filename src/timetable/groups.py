"""Describe which prisoners may attend a visit session.

A session can be limited by up to three kinds of prisoner group: category,
incentive level and location. Each kind is either inclusive (only these
groups may attend) or exclusive (everyone except these groups). The
phrase is built from the inclusive groups first, then an "except" clause
listing the exclusive ones:

    Category A prisoners on Enhanced except prisoners in Wing C
"""

from dataclasses import dataclass
from enum import Enum

from src.timetable.models import SessionSchedule

ALL_PRISONERS = "All prisoners"


class GroupKind(Enum):
    """Kinds of prisoner group, in the order they appear in a phrase."""

    CATEGORY = "category"
    INCENTIVE = "incentive"
    LOCATION = "location"


@dataclass(frozen=True)
class GroupConstraint:
    kind: GroupKind
    inclusive: bool
    names: tuple[str, ...]

    @property
    def merged_names(self) -> str:
        return merge_group_names(self.names)

    def subject(self) -> str:
        """Phrase used when this group leads the description."""
        if self.kind is GroupKind.CATEGORY:
            return f"{self.merged_names} prisoners"
        return f"Prisoners {self._preposition()} {self.merged_names}"

    def qualifier(self) -> str:
        """Phrase appended to narrow an earlier inclusive group."""
        return f" {self._preposition()} {self.merged_names}"

    def excluded(self) -> str:
        """Phrase listing this group inside an "except" clause."""
        if self.kind is GroupKind.CATEGORY:
            return f"{self.merged_names} prisoners"
        return f"prisoners {self._preposition()} {self.merged_names}"

    def _preposition(self) -> str:
        # Category always leads, so it never needs a preposition
        return "on" if self.kind is GroupKind.INCENTIVE else "in"


def merge_group_names(names: list[str] | tuple[str, ...]) -> str:
    """Join names as "A", "A and B" or "A, B and C"."""
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} and {names[-1]}"


def group_constraints(schedule: SessionSchedule) -> list[GroupConstraint]:
    """Return the group constraints present on a schedule, in phrase order.

    Blank names are dropped; a kind with no names left is no constraint.
    """
    candidates = [
        (
            GroupKind.CATEGORY,
            schedule.are_category_groups_inclusive,
            schedule.prisoner_category_group_names,
        ),
        (
            GroupKind.INCENTIVE,
            schedule.are_incentive_groups_inclusive,
            schedule.prisoner_incentive_level_group_names,
        ),
        (
            GroupKind.LOCATION,
            schedule.are_location_groups_inclusive,
            schedule.prisoner_location_group_names,
        ),
    ]

    constraints: list[GroupConstraint] = []
    for kind, inclusive, names in candidates:
        present = tuple(name for name in names if name and name.strip())
        if present:
            constraints.append(GroupConstraint(kind, inclusive, present))
    return constraints


def describe_constraints(constraints: list[GroupConstraint]) -> str:
    """Compose the attendee phrase from constraints given in phrase order."""
    included = [c for c in constraints if c.inclusive]
    excluded = [c for c in constraints if not c.inclusive]

    if included:
        head = included[0].subject() + "".join(c.qualifier() for c in included[1:])
    else:
        head = ALL_PRISONERS

    if not excluded:
        return head
    return f"{head} except {merge_group_names([c.excluded() for c in excluded])}"


def describe_attendees(schedule: SessionSchedule) -> str:
    """Describe who can attend a session, e.g. "All prisoners except Category A prisoners"."""
    return describe_constraints(group_constraints(schedule))

"""Value types exchanged between detection, catalog, transforms and the coordinator.

Everything here is transient: created for one validation call and discarded once a
decision is applied or the change is abandoned.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from roadmapper.domain.model import DEFAULT_PERCENT_ALLOCATION

if TYPE_CHECKING:
    from uuid import UUID

    from roadmapper.domain.date_ranges import DateRange
    from roadmapper.domain.model import ProjectAssignment

UNKNOWN_MEMBER_NAME = "Unknown Member"


class ConflictKind(StrEnum):
    PROJECT_DATE_CHANGE = "project_date_change"
    # Reserved: never produced by the detector.
    ASSIGNMENT_DATE_CHANGE = "assignment_date_change"
    ASSIGNMENT_OUTSIDE_PROJECT = "assignment_outside_project"


class ActionId(StrEnum):
    UPDATE_ASSIGNMENTS = "update_assignments"
    KEEP_CUSTOM = "keep_custom"
    EXTEND_PROJECT = "extend_project"
    CONSTRAIN_ASSIGNMENT = "constrain_assignment"


class Severity(StrEnum):
    """Presentation hint for the confirmation surface."""

    DEFAULT = "default"
    OUTLINE = "outline"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True, slots=True, kw_only=True)
class AssignmentSnapshot:
    """Current state of one assignment, with its member name already resolved."""

    assignment_id: UUID
    project_id: UUID
    team_member_id: UUID
    member_name: str = UNKNOWN_MEMBER_NAME
    percent_allocation: int = DEFAULT_PERCENT_ALLOCATION
    dates: DateRange | None = None

    @classmethod
    def of(cls, assignment: ProjectAssignment, member_name: str | None) -> AssignmentSnapshot:
        return cls(
            assignment_id=assignment.id,
            project_id=assignment.project_id,
            team_member_id=assignment.team_member_id,
            member_name=member_name or UNKNOWN_MEMBER_NAME,
            percent_allocation=assignment.percent_allocation,
            dates=assignment.dates,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class AffectedAssignment:
    assignment_id: UUID
    member_name: str
    current_range: DateRange


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictDescriptor:
    """Why a proposed date change cannot be applied silently.

    ``project_range`` is the proposed range for ``project_date_change`` and the
    project's current range for ``assignment_outside_project``.
    """

    kind: ConflictKind
    project_id: UUID
    project_name: str
    project_range: DateRange
    assignment_range: DateRange | None = None
    assignment_id: UUID | None = None
    affected_assignments: tuple[AffectedAssignment, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolutionAction:
    id: ActionId
    label: str
    description: str
    severity: Severity


@dataclass(frozen=True, slots=True, kw_only=True)
class RangeUpdate:
    assignment_id: UUID
    team_member_id: UUID
    percent_allocation: int
    dates: DateRange


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolutionPlan:
    """Final ranges to persist; ``project_range`` is ``None`` when the project is untouched."""

    project_id: UUID
    project_range: DateRange | None = None
    assignment_updates: tuple[RangeUpdate, ...] = ()

    @property
    def changes_project(self) -> bool:
        return self.project_range is not None

    @property
    def changes_assignments(self) -> bool:
        return bool(self.assignment_updates)

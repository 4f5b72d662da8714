"""Pure conflict detection for project and assignment date changes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roadmapper.domain.conflicts.contracts import (
    AffectedAssignment,
    ConflictDescriptor,
    ConflictKind,
)
from roadmapper.domain.date_ranges import within

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

    from roadmapper.domain.conflicts.contracts import AssignmentSnapshot
    from roadmapper.domain.date_ranges import DateRange
    from roadmapper.domain.model import Project

log = logging.getLogger(__name__)


def is_auto_synced(assignment: AssignmentSnapshot, project_range: DateRange) -> bool:
    """An assignment mirroring its project's range was never customised."""

    return assignment.dates is not None and assignment.dates == project_range


def detect_project_range_conflict(
    project: Project,
    new_range: DateRange,
    assignments: Iterable[AssignmentSnapshot],
) -> ConflictDescriptor | None:
    """Describe the assignments a project range change would affect, if any.

    An assignment is affected when it is auto-synced to the current project range or
    when its own range would no longer fit inside ``new_range``. Assignments without
    a range of their own are never affected. Input order is preserved.
    """

    current_range = project.dates
    affected: list[AffectedAssignment] = []
    for assignment in assignments:
        if assignment.project_id != project.id or assignment.dates is None:
            continue
        if is_auto_synced(assignment, current_range) or not within(assignment.dates, new_range):
            affected.append(
                AffectedAssignment(
                    assignment_id=assignment.assignment_id,
                    member_name=assignment.member_name,
                    current_range=assignment.dates,
                )
            )

    if not affected:
        return None

    log.debug(
        "Project %s change %s -> %s affects %d assignment(s)",
        project.id,
        current_range,
        new_range,
        len(affected),
    )
    return ConflictDescriptor(
        kind=ConflictKind.PROJECT_DATE_CHANGE,
        project_id=project.id,
        project_name=project.name,
        project_range=new_range,
        affected_assignments=tuple(affected),
    )


def detect_assignment_range_conflict(
    project: Project,
    proposed_range: DateRange,
    *,
    assignment_id: UUID | None = None,
) -> ConflictDescriptor | None:
    """Describe an assignment range that falls outside its project, if it does."""

    if within(proposed_range, project.dates):
        return None

    log.debug(
        "Assignment range %s falls outside project %s (%s)",
        proposed_range,
        project.id,
        project.dates,
    )
    return ConflictDescriptor(
        kind=ConflictKind.ASSIGNMENT_OUTSIDE_PROJECT,
        project_id=project.id,
        project_name=project.name,
        project_range=project.dates,
        assignment_range=proposed_range,
        assignment_id=assignment_id,
    )

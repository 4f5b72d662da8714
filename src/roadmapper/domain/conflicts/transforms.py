"""Date-rewriting transforms applied once a resolution action is chosen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roadmapper.domain.conflicts.catalog import action_ids_for
from roadmapper.domain.conflicts.contracts import (
    ActionId,
    RangeUpdate,
    ResolutionPlan,
)
from roadmapper.domain.conflicts.errors import UnknownActionError
from roadmapper.domain.date_ranges import DateRange, clamp, union

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from uuid import UUID

    from roadmapper.domain.conflicts.contracts import AssignmentSnapshot, ConflictDescriptor


def extended_project_range(
    project_range: DateRange,
    proposed_assignment_range: DateRange,
    existing_ranges: Iterable[DateRange | None] = (),
) -> DateRange:
    """Grow a project so it covers the proposal and every existing assignment range."""

    ranges = [project_range, proposed_assignment_range]
    ranges.extend(item for item in existing_ranges if item is not None)
    return union(ranges)


def constrained_assignment_range(proposed: DateRange, project_range: DateRange) -> DateRange:
    """Clamp ``proposed`` into ``project_range``.

    A proposal disjoint from the project collapses onto the project's boundary day
    nearest to it, so the result is always a valid single-day or longer range.
    """

    clamped = clamp(proposed, project_range)
    if not clamped.is_empty:
        return clamped
    if proposed.start > project_range.end:
        return DateRange(start=project_range.end, end=project_range.end)
    return DateRange(start=project_range.start, end=project_range.start)


def _snapshot_index(assignments: Iterable[AssignmentSnapshot]) -> dict[UUID, AssignmentSnapshot]:
    return {snapshot.assignment_id: snapshot for snapshot in assignments}


def _require(index: dict[UUID, AssignmentSnapshot], assignment_id: UUID) -> AssignmentSnapshot:
    snapshot = index.get(assignment_id)
    if snapshot is None:
        raise LookupError(f"No snapshot supplied for assignment {assignment_id}")
    return snapshot


def _update_for(snapshot: AssignmentSnapshot, dates: DateRange) -> RangeUpdate:
    return RangeUpdate(
        assignment_id=snapshot.assignment_id,
        team_member_id=snapshot.team_member_id,
        percent_allocation=snapshot.percent_allocation,
        dates=dates,
    )


def _subject_updates(
    conflict: ConflictDescriptor,
    dates: DateRange,
    index: dict[UUID, AssignmentSnapshot],
) -> tuple[RangeUpdate, ...]:
    if conflict.assignment_id is None:
        return ()
    return (_update_for(_require(index, conflict.assignment_id), dates),)


def plan_resolution(
    conflict: ConflictDescriptor,
    action_id: ActionId | str,
    *,
    assignments: Sequence[AssignmentSnapshot] = (),
) -> ResolutionPlan:
    """Compute the ranges implied by ``action_id`` for ``conflict``.

    ``assignments`` is the current state of the project's assignments; it supplies
    the allocation details carried into each update and, for ``extend_project``, the
    existing ranges the extended project must keep covering.
    """

    offered = action_ids_for(conflict.kind)
    if action_id not in offered:
        raise UnknownActionError(str(action_id), offered)
    action = ActionId(action_id)
    index = _snapshot_index(assignments)

    if action is ActionId.UPDATE_ASSIGNMENTS:
        updates = tuple(
            _update_for(_require(index, affected.assignment_id), conflict.project_range)
            for affected in conflict.affected_assignments
        )
        return ResolutionPlan(
            project_id=conflict.project_id,
            project_range=conflict.project_range,
            assignment_updates=updates,
        )

    if action is ActionId.KEEP_CUSTOM:
        return ResolutionPlan(project_id=conflict.project_id, project_range=conflict.project_range)

    proposed = conflict.assignment_range
    if proposed is None:
        raise ValueError(f"{conflict.kind} conflict carries no assignment range")

    if action is ActionId.EXTEND_PROJECT:
        existing = (
            snapshot.dates for snapshot in assignments if snapshot.project_id == conflict.project_id
        )
        return ResolutionPlan(
            project_id=conflict.project_id,
            project_range=extended_project_range(conflict.project_range, proposed, existing),
            assignment_updates=_subject_updates(conflict, proposed, index),
        )

    constrained = constrained_assignment_range(proposed, conflict.project_range)
    return ResolutionPlan(
        project_id=conflict.project_id,
        assignment_updates=_subject_updates(conflict, constrained, index),
    )

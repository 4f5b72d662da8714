"""Interactive coordination of date changes that may need a human decision.

A change request runs the detector synchronously. Without a conflict the proposed
range is persisted straight away. With a conflict the request is parked on a
``PendingDecision`` handed to the confirmation surface; once exactly one action is
chosen the matching transform runs and its ranges are persisted. Dismissing the
surface abandons the change without persisting anything.

Only one decision can be pending at a time. Further requests are rejected with
``ConflictPendingError`` until the coordinator is idle again.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from roadmapper.domain.conflicts.catalog import actions_for
from roadmapper.domain.conflicts.contracts import (
    ActionId,
    ConflictDescriptor,
    RangeUpdate,
    ResolutionAction,
    ResolutionPlan,
)
from roadmapper.domain.conflicts.detect import (
    detect_assignment_range_conflict,
    detect_project_range_conflict,
)
from roadmapper.domain.conflicts.errors import (
    ConflictPendingError,
    DateConflictError,
    DecisionAlreadyMadeError,
    PersistenceFailureError,
    UnknownActionError,
)
from roadmapper.domain.conflicts.transforms import plan_resolution
from roadmapper.domain.ports.persistence import AssignmentDatesPayload, ProjectDatesPayload

if TYPE_CHECKING:
    from collections.abc import Sequence

    from roadmapper.domain.conflicts.contracts import AssignmentSnapshot
    from roadmapper.domain.date_ranges import DateRange
    from roadmapper.domain.model import Project
    from roadmapper.domain.ports.confirmation import ConfirmationSurface
    from roadmapper.domain.ports.persistence import UpdateProject, UpdateProjectAssignments

log = logging.getLogger(__name__)


class CoordinatorState(StrEnum):
    IDLE = "idle"
    DETECTING = "detecting"
    AWAITING_DECISION = "awaiting_decision"
    APPLYING = "applying"


class OutcomeStatus(StrEnum):
    APPLIED = "applied"  # no conflict, proposed range persisted as-is
    RESOLVED = "resolved"  # conflict settled by a chosen action
    CANCELLED = "cancelled"  # surface dismissed, nothing persisted


@dataclass(frozen=True, slots=True, kw_only=True)
class ChangeOutcome:
    status: OutcomeStatus
    plan: ResolutionPlan | None = None
    conflict: ConflictDescriptor | None = None
    action: ActionId | None = None

    @property
    def persisted(self) -> bool:
        return self.status is not OutcomeStatus.CANCELLED


class PendingDecision:
    """One outstanding conflict, completed by exactly one ``choose`` or ``dismiss``."""

    def __init__(
        self,
        conflict: ConflictDescriptor,
        actions: tuple[ResolutionAction, ...],
        future: asyncio.Future[ActionId | None],
    ) -> None:
        self._conflict = conflict
        self._actions = actions
        self._future = future

    @property
    def conflict(self) -> ConflictDescriptor:
        return self._conflict

    @property
    def actions(self) -> tuple[ResolutionAction, ...]:
        return self._actions

    @property
    def done(self) -> bool:
        return self._future.done()

    def choose(self, action_id: ActionId | str) -> None:
        if self.done:
            raise DecisionAlreadyMadeError("This conflict has already been decided")
        offered = tuple(action.id for action in self._actions)
        if action_id not in offered:
            raise UnknownActionError(str(action_id), offered)
        self._future.set_result(ActionId(action_id))

    def dismiss(self) -> None:
        if self.done:
            raise DecisionAlreadyMadeError("This conflict has already been decided")
        self._future.set_result(None)

    async def wait(self) -> ActionId | None:
        return await self._future


def project_payload(dates: DateRange) -> ProjectDatesPayload:
    start, end = dates.as_strings()
    return ProjectDatesPayload(start_date=start, end_date=end)


def assignment_payload(update: RangeUpdate) -> AssignmentDatesPayload:
    start, end = update.dates.as_strings()
    return AssignmentDatesPayload(
        team_member_id=update.team_member_id,
        percent_allocation=update.percent_allocation,
        start_date=start,
        end_date=end,
    )


class DateConflictCoordinator:
    """Keeps project and assignment ranges consistent across interactive edits."""

    def __init__(
        self,
        *,
        update_project: UpdateProject,
        update_project_assignments: UpdateProjectAssignments,
        surface: ConfirmationSurface,
    ) -> None:
        self._update_project = update_project
        self._update_project_assignments = update_project_assignments
        self._surface = surface
        self._state = CoordinatorState.IDLE
        self._pending: PendingDecision | None = None

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def pending(self) -> PendingDecision | None:
        return self._pending

    def choose(self, action_id: ActionId | str) -> None:
        self._require_pending().choose(action_id)

    def dismiss(self) -> None:
        self._require_pending().dismiss()

    async def request_project_change(
        self,
        project: Project,
        new_range: DateRange,
        assignments: Sequence[AssignmentSnapshot] = (),
    ) -> ChangeOutcome:
        """Change a project's range, settling any effect on its assignments."""

        self._begin()
        try:
            conflict = detect_project_range_conflict(project, new_range, assignments)
            if conflict is None:
                plan = ResolutionPlan(project_id=project.id, project_range=new_range)
                await self._apply(plan)
                return ChangeOutcome(status=OutcomeStatus.APPLIED, plan=plan)
            return await self._settle(conflict, assignments)
        finally:
            self._finish()

    async def request_assignment_change(
        self,
        project: Project,
        assignment: AssignmentSnapshot,
        new_range: DateRange,
        assignments: Sequence[AssignmentSnapshot] = (),
    ) -> ChangeOutcome:
        """Change one assignment's range, settling a clash with its project's range."""

        self._begin()
        try:
            conflict = detect_assignment_range_conflict(
                project,
                new_range,
                assignment_id=assignment.assignment_id,
            )
            if conflict is None:
                update = RangeUpdate(
                    assignment_id=assignment.assignment_id,
                    team_member_id=assignment.team_member_id,
                    percent_allocation=assignment.percent_allocation,
                    dates=new_range,
                )
                plan = ResolutionPlan(project_id=project.id, assignment_updates=(update,))
                await self._apply(plan)
                return ChangeOutcome(status=OutcomeStatus.APPLIED, plan=plan)
            snapshots = (
                assignment,
                *(item for item in assignments if item.assignment_id != assignment.assignment_id),
            )
            return await self._settle(conflict, snapshots)
        finally:
            self._finish()

    def _require_pending(self) -> PendingDecision:
        if self._pending is None:
            raise DateConflictError("No date conflict is awaiting a decision")
        return self._pending

    def _begin(self) -> None:
        if self._state is not CoordinatorState.IDLE:
            raise ConflictPendingError(
                f"A date change is already in progress (state: {self._state})"
            )
        self._state = CoordinatorState.DETECTING

    def _finish(self) -> None:
        self._pending = None
        self._state = CoordinatorState.IDLE

    async def _settle(
        self,
        conflict: ConflictDescriptor,
        assignments: Sequence[AssignmentSnapshot],
    ) -> ChangeOutcome:
        future: asyncio.Future[ActionId | None] = asyncio.get_running_loop().create_future()
        decision = PendingDecision(conflict, actions_for(conflict.kind), future)
        self._pending = decision
        self._state = CoordinatorState.AWAITING_DECISION
        log.info(
            "Date conflict on project %r (%s); awaiting decision",
            conflict.project_name,
            conflict.kind,
        )

        self._surface.present(decision)
        action = await decision.wait()
        self._pending = None

        if action is None:
            log.info("Date change on project %r cancelled by user", conflict.project_name)
            return ChangeOutcome(status=OutcomeStatus.CANCELLED, conflict=conflict)

        plan = plan_resolution(conflict, action, assignments=assignments)
        await self._apply(plan)
        return ChangeOutcome(
            status=OutcomeStatus.RESOLVED,
            plan=plan,
            conflict=conflict,
            action=action,
        )

    async def _apply(self, plan: ResolutionPlan) -> None:
        self._state = CoordinatorState.APPLYING
        try:
            if plan.project_range is not None:
                await self._update_project(plan.project_id, project_payload(plan.project_range))
            if plan.changes_assignments:
                await self._update_project_assignments(
                    plan.project_id,
                    [assignment_payload(update) for update in plan.assignment_updates],
                )
        except Exception as exc:
            log.warning("Persisting dates for project %s failed: %s", plan.project_id, exc)
            raise PersistenceFailureError from exc
        log.info(
            "Persisted dates for project %s: project=%s, assignments=%d",
            plan.project_id,
            plan.project_range,
            len(plan.assignment_updates),
        )

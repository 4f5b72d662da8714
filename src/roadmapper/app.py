"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from roadmapper.adapters.snapshot import (
    ImportResult,
    RoadmapSnapshot,
    dump_snapshot,
    export_snapshot,
    import_snapshot,
    load_snapshot,
)
from roadmapper.adapters.sqlalchemy import SqlAlchemyDateWriter, SqlAlchemyUnitOfWork, startup
from roadmapper.adapters.sqlalchemy.unit_of_work import is_started
from roadmapper.domain.conflicts import (
    AssignmentSnapshot,
    ChangeOutcome,
    DateConflictCoordinator,
    OutcomeStatus,
    ResolutionPlan,
)
from roadmapper.domain.ports.unit_of_work import RoadmapUnitOfWork
from roadmapper.domain.scheduling import move_range, offset_between

if TYPE_CHECKING:
    from datetime import date
    from pathlib import Path
    from uuid import UUID

    from roadmapper.domain.date_ranges import DateRange
    from roadmapper.domain.model import Project
    from roadmapper.domain.ports.confirmation import ConfirmationSurface
    from roadmapper.domain.scheduling import Timeline

UnitOfWorkFactory = Callable[[], RoadmapUnitOfWork]


log = getLogger(__name__)


@dataclass(slots=True)
class ProjectState:
    """A project together with its assignments, member names resolved."""

    project: Project
    assignments: tuple[AssignmentSnapshot, ...]

    def assignment_for(self, team_member_id: UUID) -> AssignmentSnapshot:
        for assignment in self.assignments:
            if assignment.team_member_id == team_member_id:
                return assignment
        raise LookupError(
            f"Team member {team_member_id} is not assigned to project {self.project.name!r}"
        )


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    if not is_started():
        startup()
    return SqlAlchemyUnitOfWork


def load_project_state(
    project_id: UUID,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
) -> ProjectState:
    with unit_of_work_factory() as uow:
        repositories = uow.repositories
        project = repositories.projects.get(project_id)
        if project is None:
            raise LookupError(f"Unknown project: {project_id}")
        member_names = {member.id: member.name for member in repositories.team_members.list()}
        assignments = tuple(
            AssignmentSnapshot.of(assignment, member_names.get(assignment.team_member_id))
            for assignment in repositories.assignments.for_project(project_id)
        )
    return ProjectState(project=project, assignments=assignments)


def build_coordinator(
    surface: ConfirmationSurface,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
) -> DateConflictCoordinator:
    writer = SqlAlchemyDateWriter(unit_of_work_factory)
    return DateConflictCoordinator(
        update_project=writer.update_project,
        update_project_assignments=writer.update_project_assignments,
        surface=surface,
    )


def _request_project_change(
    state: ProjectState,
    new_range: DateRange,
    *,
    surface: ConfirmationSurface,
    unit_of_work_factory: UnitOfWorkFactory,
) -> ChangeOutcome:
    if new_range == state.project.dates:
        log.info("Project %r already spans %s; nothing to do", state.project.name, new_range)
        return ChangeOutcome(
            status=OutcomeStatus.APPLIED,
            plan=ResolutionPlan(project_id=state.project.id),
        )
    coordinator = build_coordinator(surface, unit_of_work_factory=unit_of_work_factory)
    return asyncio.run(
        coordinator.request_project_change(state.project, new_range, state.assignments)
    )


def change_project_dates(
    project_id: UUID,
    new_range: DateRange,
    *,
    surface: ConfirmationSurface,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ChangeOutcome:
    """Edit a project's dates, asking ``surface`` how to treat affected assignments."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    state = load_project_state(project_id, unit_of_work_factory=effective_uow)
    log.info(
        "Changing project %r from %s to %s",
        state.project.name,
        state.project.dates,
        new_range,
    )
    return _request_project_change(
        state,
        new_range,
        surface=surface,
        unit_of_work_factory=effective_uow,
    )


def move_project(
    project_id: UUID,
    offset_days: int | None = None,
    *,
    surface: ConfirmationSurface,
    new_start: date | None = None,
    timeline: Timeline | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ChangeOutcome:
    """Drag a project bar, keeping its duration and the timeline bounds.

    The move is given either as a whole-day ``offset_days`` or as the bar's ``new_start``.
    """

    if (offset_days is None) == (new_start is None):
        raise ValueError("Give exactly one of offset_days or new_start")
    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    state = load_project_state(project_id, unit_of_work_factory=effective_uow)
    if new_start is not None:
        offset_days = offset_between(state.project.start_date, new_start)
    new_range = move_range(state.project.dates, offset_days, timeline)
    log.info(
        "Moving project %r by %+d day(s): %s -> %s",
        state.project.name,
        offset_days,
        state.project.dates,
        new_range,
    )
    return _request_project_change(
        state,
        new_range,
        surface=surface,
        unit_of_work_factory=effective_uow,
    )


def change_assignment_dates(
    project_id: UUID,
    team_member_id: UUID,
    new_range: DateRange,
    *,
    surface: ConfirmationSurface,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ChangeOutcome:
    """Edit one member's assignment dates, asking ``surface`` when they leave the project."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    state = load_project_state(project_id, unit_of_work_factory=effective_uow)
    subject = state.assignment_for(team_member_id)
    log.info(
        "Changing assignment of %s on project %r to %s",
        subject.member_name,
        state.project.name,
        new_range,
    )
    coordinator = build_coordinator(surface, unit_of_work_factory=effective_uow)
    return asyncio.run(
        coordinator.request_assignment_change(
            state.project,
            subject,
            new_range,
            state.assignments,
        )
    )


def import_roadmap(
    path: Path,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ImportResult:
    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    return import_snapshot(load_snapshot(path), unit_of_work_factory=effective_uow)


def export_roadmap(
    path: Path,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> RoadmapSnapshot:
    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    snapshot = export_snapshot(unit_of_work_factory=effective_uow)
    dump_snapshot(snapshot, path)
    log.info("Exported %d project(s) to %s", len(snapshot.projects), path)
    return snapshot

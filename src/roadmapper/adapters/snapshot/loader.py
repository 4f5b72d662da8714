"""Import and export roadmap snapshots through a unit of work."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from roadmapper.adapters.snapshot.schema import (
    ProjectAssigneeRecord,
    ProjectRecord,
    RoadmapSnapshot,
    TeamMemberRecord,
)
from roadmapper.domain.date_ranges import DateRange
from roadmapper.domain.model import Project, ProjectAssignment, TeamMember

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from roadmapper.domain.ports.unit_of_work import RoadmapRepositories, RoadmapUnitOfWork

log = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be read or does not describe a consistent roadmap."""


@dataclass(slots=True)
class ImportResult:
    team_members: int = 0
    projects: int = 0
    assignments: int = 0


def load_snapshot(path: Path) -> RoadmapSnapshot:
    """Read and validate a JSON snapshot file."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc
    try:
        return RoadmapSnapshot.model_validate_json(raw)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot {path}:\n{exc}") from exc


def dump_snapshot(snapshot: RoadmapSnapshot, path: Path) -> None:
    path.write_text(snapshot.model_dump_json(indent=2, exclude_none=True) + "\n", encoding="utf-8")


def _upsert_member(repositories: RoadmapRepositories, record: TeamMemberRecord) -> None:
    member = repositories.team_members.get(record.id)
    if member is None:
        repositories.team_members.add(TeamMember(id=record.id, name=record.name, role=record.role))
        return
    member.name = record.name
    member.role = record.role


def _upsert_project(repositories: RoadmapRepositories, record: ProjectRecord) -> None:
    dates = DateRange(start=record.start_date, end=record.end_date)
    project = repositories.projects.get(record.id)
    if project is None:
        repositories.projects.add(
            Project(
                id=record.id,
                name=record.name,
                start_date=dates.start,
                end_date=dates.end,
                description=record.description,
            )
        )
        return
    project.name = record.name
    project.description = record.description
    project.reschedule(dates)


def _upsert_assignment(repositories: RoadmapRepositories, record: ProjectAssigneeRecord) -> None:
    if repositories.projects.get(record.project_id) is None:
        raise SnapshotError(f"Assignment references unknown project {record.project_id}")
    if repositories.team_members.get(record.team_member_id) is None:
        raise SnapshotError(f"Assignment references unknown team member {record.team_member_id}")

    assignment = repositories.assignments.find(record.project_id, record.team_member_id)
    if assignment is None:
        assignment = ProjectAssignment(
            project_id=record.project_id,
            team_member_id=record.team_member_id,
        )
        if record.id is not None:
            assignment.id = record.id
        repositories.assignments.add(assignment)
    assignment.percent_allocation = record.percent_allocation
    assignment.start_date = record.start_date
    assignment.end_date = record.end_date


def import_snapshot(
    snapshot: RoadmapSnapshot,
    *,
    unit_of_work_factory: Callable[[], RoadmapUnitOfWork],
) -> ImportResult:
    """Upsert every record of ``snapshot`` in one transaction."""

    result = ImportResult()
    with unit_of_work_factory() as uow:
        repositories = uow.repositories
        for member in snapshot.team_members:
            _upsert_member(repositories, member)
            result.team_members += 1
        for project in snapshot.projects:
            _upsert_project(repositories, project)
            result.projects += 1
        for assignment in snapshot.project_assignees:
            _upsert_assignment(repositories, assignment)
            result.assignments += 1
        uow.commit()

    log.info(
        "Imported snapshot: team_members=%s, projects=%s, assignments=%s",
        result.team_members,
        result.projects,
        result.assignments,
    )
    return result


def export_snapshot(*, unit_of_work_factory: Callable[[], RoadmapUnitOfWork]) -> RoadmapSnapshot:
    with unit_of_work_factory() as uow:
        repositories = uow.repositories
        return RoadmapSnapshot(
            team_members=[
                TeamMemberRecord(id=member.id, name=member.name, role=member.role)
                for member in repositories.team_members.list()
            ],
            projects=[
                ProjectRecord(
                    id=project.id,
                    name=project.name,
                    start_date=project.start_date,
                    end_date=project.end_date,
                    description=project.description,
                )
                for project in repositories.projects.list()
            ],
            project_assignees=[
                ProjectAssigneeRecord(
                    id=assignment.id,
                    project_id=assignment.project_id,
                    team_member_id=assignment.team_member_id,
                    percent_allocation=assignment.percent_allocation,
                    start_date=assignment.start_date,
                    end_date=assignment.end_date,
                )
                for assignment in repositories.assignments.list()
            ],
        )

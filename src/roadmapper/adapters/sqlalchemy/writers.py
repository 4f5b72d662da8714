"""Persistence callbacks that write corrected date ranges through a unit of work."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roadmapper.domain.date_ranges import DateRange
from roadmapper.domain.model import ProjectAssignment

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from uuid import UUID

    from roadmapper.domain.ports.persistence import AssignmentDatesPayload, ProjectDatesPayload
    from roadmapper.domain.ports.unit_of_work import RoadmapUnitOfWork

log = logging.getLogger(__name__)


class SqlAlchemyDateWriter:
    """Implements ``UpdateProject`` and ``UpdateProjectAssignments``.

    Each call commits its own transaction. The work runs inline on the event loop;
    sessions are short-lived and SQLite connections are bound to their thread.
    """

    def __init__(self, unit_of_work_factory: Callable[[], RoadmapUnitOfWork]) -> None:
        self._unit_of_work_factory = unit_of_work_factory

    async def update_project(self, project_id: UUID, changes: ProjectDatesPayload) -> None:
        dates = DateRange.parse(changes["start_date"], changes["end_date"])
        with self._unit_of_work_factory() as uow:
            project = uow.repositories.projects.get(project_id)
            if project is None:
                raise LookupError(f"Unknown project: {project_id}")
            project.reschedule(dates)
            uow.commit()
        log.debug("Project %s rescheduled to %s", project_id, dates)

    async def update_project_assignments(
        self,
        project_id: UUID,
        assignments: Sequence[AssignmentDatesPayload],
    ) -> None:
        with self._unit_of_work_factory() as uow:
            if uow.repositories.projects.get(project_id) is None:
                raise LookupError(f"Unknown project: {project_id}")
            repository = uow.repositories.assignments
            for payload in assignments:
                dates = DateRange.parse(payload["start_date"], payload["end_date"])
                assignment = repository.find(project_id, payload["team_member_id"])
                if assignment is None:
                    assignment = ProjectAssignment(
                        project_id=project_id,
                        team_member_id=payload["team_member_id"],
                    )
                    repository.add(assignment)
                assignment.percent_allocation = payload["percent_allocation"]
                assignment.reschedule(dates)
            uow.commit()
        log.debug("Updated %d assignment(s) on project %s", len(assignments), project_id)

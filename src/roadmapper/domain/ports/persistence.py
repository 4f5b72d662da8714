"""Ports for loading roadmap state and persisting corrected date ranges."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypedDict, runtime_checkable

from roadmapper.domain.model import Project, ProjectAssignment, TeamMember

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID


class ProjectDatesPayload(TypedDict):
    start_date: str
    end_date: str


class AssignmentDatesPayload(TypedDict):
    team_member_id: UUID
    percent_allocation: int
    start_date: str
    end_date: str


@runtime_checkable
class UpdateProject(Protocol):
    """Persist a project's new date range (idempotent upsert by project id)."""

    async def __call__(self, project_id: UUID, changes: ProjectDatesPayload) -> None: ...


@runtime_checkable
class UpdateProjectAssignments(Protocol):
    """Persist a batch of assignment ranges (upsert by project and team member)."""

    async def __call__(
        self,
        project_id: UUID,
        assignments: Sequence[AssignmentDatesPayload],
    ) -> None: ...


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent entity store."""

    def add(self, entity: TEntity) -> None: ...

    def get(self, entity_id: UUID) -> TEntity | None: ...


@runtime_checkable
class TeamMemberRepository(Repository[TeamMember], Protocol):
    def list(self) -> Sequence[TeamMember]: ...


@runtime_checkable
class ProjectRepository(Repository[Project], Protocol):
    def list(self) -> Sequence[Project]: ...


@runtime_checkable
class AssignmentRepository(Repository[ProjectAssignment], Protocol):
    def for_project(self, project_id: UUID) -> Sequence[ProjectAssignment]: ...

    def find(self, project_id: UUID, team_member_id: UUID) -> ProjectAssignment | None: ...

    def list(self) -> Sequence[ProjectAssignment]: ...

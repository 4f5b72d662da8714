"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from roadmapper.adapters.sqlalchemy.mappings import (
    project_assignment_table,
    project_table,
    team_member_table,
)
from roadmapper.domain.model import Entity, Project, ProjectAssignment, TeamMember

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from sqlalchemy.orm import Session


class SqlAlchemyRepository[TEntity: Entity]:
    """Shared session-backed helpers for roadmap entities."""

    def __init__(self, session: Session, entity_cls: type[TEntity]) -> None:
        self.session = session
        self._entity_cls = entity_cls

    def add(self, entity: TEntity) -> None:
        self.session.add(entity)

    def get(self, entity_id: UUID) -> TEntity | None:
        return self.session.get(self._entity_cls, entity_id)


class SqlAlchemyTeamMemberRepository(SqlAlchemyRepository[TeamMember]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, TeamMember)

    def list(self) -> Sequence[TeamMember]:
        stmt = select(TeamMember).order_by(team_member_table.c.name)
        return self.session.execute(stmt).scalars().all()


class SqlAlchemyProjectRepository(SqlAlchemyRepository[Project]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Project)

    def list(self) -> Sequence[Project]:
        stmt = select(Project).order_by(project_table.c.start_date, project_table.c.name)
        return self.session.execute(stmt).scalars().all()


class SqlAlchemyAssignmentRepository(SqlAlchemyRepository[ProjectAssignment]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, ProjectAssignment)

    def for_project(self, project_id: UUID) -> Sequence[ProjectAssignment]:
        stmt = (
            select(ProjectAssignment)
            .where(project_assignment_table.c.project_id == project_id)
            .order_by(project_assignment_table.c.start_date)
        )
        return self.session.execute(stmt).scalars().all()

    def find(self, project_id: UUID, team_member_id: UUID) -> ProjectAssignment | None:
        stmt = (
            select(ProjectAssignment)
            .where(project_assignment_table.c.project_id == project_id)
            .where(project_assignment_table.c.team_member_id == team_member_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def list(self) -> Sequence[ProjectAssignment]:
        stmt = select(ProjectAssignment).order_by(
            project_assignment_table.c.project_id,
            project_assignment_table.c.start_date,
        )
        return self.session.execute(stmt).scalars().all()

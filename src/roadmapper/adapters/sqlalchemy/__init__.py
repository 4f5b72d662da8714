"""SQLAlchemy adapter package for roadmapper."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyAssignmentRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyTeamMemberRepository,
)
from .unit_of_work import SqlAlchemyUnitOfWork, StartupError, shutdown, startup
from .writers import SqlAlchemyDateWriter

__all__ = [
    "SqlAlchemyAssignmentRepository",
    "SqlAlchemyDateWriter",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyTeamMemberRepository",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "create_all_tables",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]

"""SQLAlchemy mapping metadata for the roadmap domain model."""

from __future__ import annotations

import logging
import uuid
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Integer,
    String,
    Table,
    UniqueConstraint,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers

from roadmapper.domain.model import (
    DEFAULT_PERCENT_ALLOCATION,
    Project,
    ProjectAssignment,
    TeamMember,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

team_member_table = Table(
    "team_member",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("role", String, nullable=True),
)

project_table = Table(
    "project",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("description", String, nullable=True),
    CheckConstraint("start_date <= end_date", name="date_order"),
)

project_assignment_table = Table(
    "project_assignment",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("project_id", UUIDColumnType, ForeignKey("project.id"), nullable=False, index=True),
    Column("team_member_id", UUIDColumnType, ForeignKey("team_member.id"), nullable=False),
    Column(
        "percent_allocation",
        Integer,
        nullable=False,
        default=DEFAULT_PERCENT_ALLOCATION,
    ),
    Column("start_date", Date, nullable=True),
    Column("end_date", Date, nullable=True),
    UniqueConstraint("project_id", "team_member_id"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(TeamMember, team_member_table)
    mapper_registry.map_imperatively(Project, project_table)
    mapper_registry.map_imperatively(ProjectAssignment, project_assignment_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)

"""Domain port definitions for adapters."""

from __future__ import annotations

from .confirmation import ConfirmationSurface
from .persistence import (
    AssignmentDatesPayload,
    AssignmentRepository,
    ProjectDatesPayload,
    ProjectRepository,
    Repository,
    TeamMemberRepository,
    UpdateProject,
    UpdateProjectAssignments,
)
from .unit_of_work import (
    RepositoryCollection,
    RoadmapRepositories,
    RoadmapUnitOfWork,
    UnitOfWork,
)

__all__ = [
    "AssignmentDatesPayload",
    "AssignmentRepository",
    "ConfirmationSurface",
    "ProjectDatesPayload",
    "ProjectRepository",
    "Repository",
    "RepositoryCollection",
    "RoadmapRepositories",
    "RoadmapUnitOfWork",
    "TeamMemberRepository",
    "UnitOfWork",
    "UpdateProject",
    "UpdateProjectAssignments",
]

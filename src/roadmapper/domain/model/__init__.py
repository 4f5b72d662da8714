"""Roadmap domain model."""

from __future__ import annotations

from .base import Entity, new_id
from .roadmap import DEFAULT_PERCENT_ALLOCATION, Project, ProjectAssignment, TeamMember

__all__ = [
    "DEFAULT_PERCENT_ALLOCATION",
    "Entity",
    "Project",
    "ProjectAssignment",
    "TeamMember",
    "new_id",
]

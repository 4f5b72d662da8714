"""Pydantic schema for JSON roadmap snapshots.

The layout mirrors the planner's tables: ``team_members``, ``projects`` and
``project_assignees``. Dates are ``YYYY-MM-DD`` strings.
"""

from __future__ import annotations

import logging
from datetime import date  # noqa: TC003
from typing import ClassVar, Self
from uuid import UUID  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from roadmapper.domain.model import DEFAULT_PERCENT_ALLOCATION

log = logging.getLogger(__name__)


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow")
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "Snapshot %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class TeamMemberRecord(SnapshotBaseModel):
    id: UUID
    name: str
    role: str | None = None


class ProjectRecord(SnapshotBaseModel):
    id: UUID
    name: str
    start_date: date
    end_date: date
    description: str | None = None

    @model_validator(mode="after")
    def _check_order(self) -> Self:
        if self.start_date > self.end_date:
            raise ValueError(f"project {self.name!r} ends before it starts")
        return self


class ProjectAssigneeRecord(SnapshotBaseModel):
    project_id: UUID
    team_member_id: UUID
    id: UUID | None = None
    percent_allocation: int = Field(default=DEFAULT_PERCENT_ALLOCATION, ge=0, le=100)
    start_date: date | None = None
    end_date: date | None = None

    @field_validator("percent_allocation", mode="before")
    @classmethod
    def _default_allocation(cls, value: object) -> object:
        return DEFAULT_PERCENT_ALLOCATION if value is None else value

    @model_validator(mode="after")
    def _check_dates(self) -> Self:
        if (self.start_date is None) != (self.end_date is None):
            raise ValueError("assignment dates must be given together or not at all")
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("assignment ends before it starts")
        return self


class RoadmapSnapshot(SnapshotBaseModel):
    team_members: list[TeamMemberRecord] = Field(default_factory=list)
    projects: list[ProjectRecord] = Field(default_factory=list)
    project_assignees: list[ProjectAssigneeRecord] = Field(default_factory=list)

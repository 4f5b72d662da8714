"""Roadmap entities: team members, projects and their time-bounded assignments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from roadmapper.domain.date_ranges import DateRange
from roadmapper.domain.model.base import Entity

if TYPE_CHECKING:
    from datetime import date
    from uuid import UUID

DEFAULT_PERCENT_ALLOCATION = 100


@dataclass(eq=False, kw_only=True)
class TeamMember(Entity):
    name: str
    role: str | None = None


@dataclass(eq=False, kw_only=True)
class Project(Entity):
    """A project owns the canonical date range its assignments should respect."""

    name: str
    start_date: date
    end_date: date
    description: str | None = None

    @property
    def dates(self) -> DateRange:
        return DateRange(start=self.start_date, end=self.end_date)

    def reschedule(self, dates: DateRange) -> None:
        if dates.is_empty:
            raise ValueError(f"Project {self.name!r} cannot end before it starts: {dates}")
        self.start_date = dates.start
        self.end_date = dates.end


@dataclass(eq=False, kw_only=True)
class ProjectAssignment(Entity):
    """Allocation of a team member to a project, optionally for a custom date range."""

    project_id: UUID
    team_member_id: UUID
    percent_allocation: int = DEFAULT_PERCENT_ALLOCATION
    start_date: date | None = None
    end_date: date | None = None

    @property
    def dates(self) -> DateRange | None:
        if self.start_date is None or self.end_date is None:
            return None
        return DateRange(start=self.start_date, end=self.end_date)

    def reschedule(self, dates: DateRange) -> None:
        if dates.is_empty:
            raise ValueError(f"Assignment cannot end before it starts: {dates}")
        self.start_date = dates.start
        self.end_date = dates.end

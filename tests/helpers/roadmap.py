"""Reusable builders and fakes for roadmap tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from roadmapper.domain.conflicts import AssignmentSnapshot
from roadmapper.domain.date_ranges import DateRange
from roadmapper.domain.model import Project, ProjectAssignment, TeamMember, new_id

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from uuid import UUID

    from roadmapper.adapters.sqlalchemy import SqlAlchemyUnitOfWork
    from roadmapper.domain.conflicts import ActionId, PendingDecision
    from roadmapper.domain.ports import AssignmentDatesPayload, ProjectDatesPayload


def dr(start: str, end: str) -> DateRange:
    """Shorthand for a range from two ``YYYY-MM-DD`` strings."""

    return DateRange(start=date.fromisoformat(start), end=date.fromisoformat(end))


def make_project(name: str = "Atlas", dates: DateRange | None = None) -> Project:
    effective = dates or dr("2024-01-01", "2024-03-31")
    return Project(name=name, start_date=effective.start, end_date=effective.end)


def make_snapshot(
    project: Project,
    dates: DateRange | None,
    *,
    member_name: str = "Ada",
    percent_allocation: int = 100,
) -> AssignmentSnapshot:
    return AssignmentSnapshot(
        assignment_id=new_id(),
        project_id=project.id,
        team_member_id=new_id(),
        member_name=member_name,
        percent_allocation=percent_allocation,
        dates=dates,
    )


def seed_roadmap(
    unit_of_work_factory: Callable[[], SqlAlchemyUnitOfWork],
    *,
    project_dates: DateRange,
    assignment_dates: Sequence[DateRange | None],
) -> tuple[Project, list[TeamMember], list[ProjectAssignment]]:
    """Persist one project with one member per entry of ``assignment_dates``."""

    project = make_project(dates=project_dates)
    members = [TeamMember(name=f"Member {index}") for index in range(len(assignment_dates))]
    assignments = [
        ProjectAssignment(
            project_id=project.id,
            team_member_id=member.id,
            start_date=dates.start if dates else None,
            end_date=dates.end if dates else None,
        )
        for member, dates in zip(members, assignment_dates, strict=True)
    ]
    with unit_of_work_factory() as uow:
        uow.repositories.projects.add(project)
        for member in members:
            uow.repositories.team_members.add(member)
        uow.session.flush()
        for assignment in assignments:
            uow.repositories.assignments.add(assignment)
        uow.commit()
    return project, members, assignments


@dataclass
class RecordingWriter:
    """Async persistence callbacks that record every call."""

    project_calls: list[tuple[UUID, ProjectDatesPayload]] = field(default_factory=list)
    assignment_calls: list[tuple[UUID, list[AssignmentDatesPayload]]] = field(
        default_factory=list
    )
    fail_on: str | None = None

    async def update_project(self, project_id: UUID, changes: ProjectDatesPayload) -> None:
        if self.fail_on == "project":
            raise RuntimeError("project store unavailable")
        self.project_calls.append((project_id, changes))

    async def update_project_assignments(
        self,
        project_id: UUID,
        assignments: Sequence[AssignmentDatesPayload],
    ) -> None:
        if self.fail_on == "assignments":
            raise RuntimeError("assignment store unavailable")
        self.assignment_calls.append((project_id, list(assignments)))


@dataclass
class ScriptedSurface:
    """Confirmation surface that answers immediately with a scripted choice.

    ``None`` dismisses the conflict. ``defer=True`` only records the decision so the
    test can complete it later.
    """

    answer: ActionId | str | None = None
    defer: bool = False
    presented: list[PendingDecision] = field(default_factory=list)

    def present(self, decision: PendingDecision) -> None:
        self.presented.append(decision)
        if self.defer:
            return
        if self.answer is None:
            decision.dismiss()
        else:
            decision.choose(self.answer)

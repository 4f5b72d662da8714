from __future__ import annotations

from typing import TYPE_CHECKING

from roadmapper.adapters.sqlalchemy import (
    SqlAlchemyAssignmentRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyTeamMemberRepository,
)
from roadmapper.domain.model import ProjectAssignment, TeamMember
from tests.helpers.roadmap import dr, make_project

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


def test_project_repository_round_trips_dates(sqlite_session: Session) -> None:
    repository = SqlAlchemyProjectRepository(sqlite_session)
    project = make_project(dates=dr("2024-01-01", "2024-02-29"))

    repository.add(project)
    sqlite_session.commit()
    sqlite_session.expunge_all()

    loaded = repository.get(project.id)
    assert loaded is not None
    assert loaded.name == "Atlas"
    assert loaded.dates == dr("2024-01-01", "2024-02-29")


def test_project_repository_lists_by_start_date(sqlite_session: Session) -> None:
    repository = SqlAlchemyProjectRepository(sqlite_session)
    repository.add(make_project(name="Later", dates=dr("2024-05-01", "2024-06-30")))
    repository.add(make_project(name="Sooner", dates=dr("2024-01-01", "2024-03-31")))
    sqlite_session.commit()

    assert [project.name for project in repository.list()] == ["Sooner", "Later"]


def test_team_member_repository_lists_by_name(sqlite_session: Session) -> None:
    repository = SqlAlchemyTeamMemberRepository(sqlite_session)
    repository.add(TeamMember(name="Linus"))
    repository.add(TeamMember(name="Ada", role="Engineer"))
    sqlite_session.commit()

    members = repository.list()

    assert [member.name for member in members] == ["Ada", "Linus"]
    assert members[0].role == "Engineer"


def test_assignment_repository_finds_by_project_and_member(sqlite_session: Session) -> None:
    projects = SqlAlchemyProjectRepository(sqlite_session)
    members = SqlAlchemyTeamMemberRepository(sqlite_session)
    assignments = SqlAlchemyAssignmentRepository(sqlite_session)
    atlas = make_project(name="Atlas")
    borealis = make_project(name="Borealis")
    ada = TeamMember(name="Ada")
    projects.add(atlas)
    projects.add(borealis)
    members.add(ada)
    sqlite_session.flush()
    assignments.add(
        ProjectAssignment(
            project_id=atlas.id,
            team_member_id=ada.id,
            percent_allocation=60,
            start_date=dr("2024-01-15", "2024-01-15").start,
            end_date=dr("2024-02-15", "2024-02-15").end,
        )
    )
    assignments.add(ProjectAssignment(project_id=borealis.id, team_member_id=ada.id))
    sqlite_session.commit()

    found = assignments.find(atlas.id, ada.id)

    assert found is not None
    assert found.percent_allocation == 60
    assert found.dates == dr("2024-01-15", "2024-02-15")
    assert [item.project_id for item in assignments.for_project(borealis.id)] == [borealis.id]
    assert assignments.for_project(borealis.id)[0].dates is None
    assert assignments.find(atlas.id, borealis.id) is None
    assert len(assignments.list()) == 2

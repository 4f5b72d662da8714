from __future__ import annotations

from roadmapper.domain.conflicts import (
    ConflictKind,
    detect_assignment_range_conflict,
    detect_project_range_conflict,
    is_auto_synced,
)
from tests.helpers.roadmap import dr, make_project, make_snapshot


def test_auto_synced_assignment_is_affected_by_any_change() -> None:
    project = make_project(dates=dr("2024-01-01", "2024-03-31"))
    synced = make_snapshot(project, dr("2024-01-01", "2024-03-31"), member_name="Ada")

    conflict = detect_project_range_conflict(project, dr("2024-02-01", "2024-04-30"), [synced])

    assert conflict is not None
    assert conflict.kind is ConflictKind.PROJECT_DATE_CHANGE
    assert conflict.project_range == dr("2024-02-01", "2024-04-30")
    assert [item.assignment_id for item in conflict.affected_assignments] == [
        synced.assignment_id
    ]
    assert conflict.affected_assignments[0].member_name == "Ada"
    assert conflict.affected_assignments[0].current_range == dr("2024-01-01", "2024-03-31")


def test_auto_synced_assignment_is_affected_even_when_range_grows() -> None:
    project = make_project(dates=dr("2024-01-01", "2024-03-31"))
    synced = make_snapshot(project, dr("2024-01-01", "2024-03-31"))

    conflict = detect_project_range_conflict(project, dr("2023-12-01", "2024-06-30"), [synced])

    assert conflict is not None
    assert len(conflict.affected_assignments) == 1


def test_custom_assignment_inside_new_range_is_not_affected() -> None:
    project = make_project(dates=dr("2024-01-01", "2024-03-31"))
    custom = make_snapshot(project, dr("2024-02-01", "2024-02-15"))

    assert detect_project_range_conflict(project, dr("2024-01-15", "2024-04-30"), [custom]) is None
    assert not is_auto_synced(custom, project.dates)


def test_custom_assignment_leaving_new_range_is_affected() -> None:
    project = make_project(dates=dr("2024-01-01", "2024-03-31"))
    custom = make_snapshot(project, dr("2024-01-05", "2024-01-20"))

    conflict = detect_project_range_conflict(project, dr("2024-01-10", "2024-03-31"), [custom])

    assert conflict is not None
    assert conflict.affected_assignments[0].assignment_id == custom.assignment_id


def test_affected_assignments_keep_input_order() -> None:
    project = make_project(dates=dr("2024-01-01", "2024-03-31"))
    first = make_snapshot(project, dr("2024-03-01", "2024-03-31"), member_name="Ada")
    untouched = make_snapshot(project, dr("2024-02-10", "2024-02-20"), member_name="Grace")
    last = make_snapshot(project, dr("2024-01-01", "2024-03-31"), member_name="Linus")

    conflict = detect_project_range_conflict(
        project,
        dr("2024-02-01", "2024-02-28"),
        [first, untouched, last],
    )

    assert conflict is not None
    assert [item.member_name for item in conflict.affected_assignments] == ["Ada", "Linus"]


def test_rangeless_and_foreign_assignments_are_ignored() -> None:
    project = make_project(dates=dr("2024-01-01", "2024-03-31"))
    other = make_project(name="Borealis", dates=dr("2024-01-01", "2024-03-31"))
    rangeless = make_snapshot(project, None)
    foreign = make_snapshot(other, dr("2024-01-01", "2024-03-31"))

    assert (
        detect_project_range_conflict(project, dr("2024-05-01", "2024-05-31"), [rangeless, foreign])
        is None
    )


def test_assignment_inside_project_has_no_conflict() -> None:
    project = make_project(dates=dr("2024-01-01", "2024-03-31"))

    assert detect_assignment_range_conflict(project, dr("2024-01-01", "2024-03-31")) is None
    assert detect_assignment_range_conflict(project, dr("2024-02-01", "2024-02-01")) is None


def test_assignment_outside_project_is_reported() -> None:
    project = make_project(dates=dr("2024-01-01", "2024-03-31"))
    subject = make_snapshot(project, dr("2024-01-01", "2024-03-31"))

    conflict = detect_assignment_range_conflict(
        project,
        dr("2024-03-15", "2024-04-15"),
        assignment_id=subject.assignment_id,
    )

    assert conflict is not None
    assert conflict.kind is ConflictKind.ASSIGNMENT_OUTSIDE_PROJECT
    assert conflict.project_range == dr("2024-01-01", "2024-03-31")
    assert conflict.assignment_range == dr("2024-03-15", "2024-04-15")
    assert conflict.assignment_id == subject.assignment_id
    assert conflict.affected_assignments == ()

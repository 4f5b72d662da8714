from __future__ import annotations

import json
from datetime import date
from typing import TYPE_CHECKING
from uuid import uuid4

import pytest
from pydantic import ValidationError

from roadmapper.adapters.snapshot import (
    ProjectAssigneeRecord,
    RoadmapSnapshot,
    SnapshotError,
    dump_snapshot,
    export_snapshot,
    import_snapshot,
    load_snapshot,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from roadmapper.adapters.sqlalchemy import SqlAlchemyUnitOfWork

ATLAS_ID = "6f1c1a52-3d35-4c55-9f57-3a6e2b1a0001"
ADA_ID = "6f1c1a52-3d35-4c55-9f57-3a6e2b1a0002"
GRACE_ID = "6f1c1a52-3d35-4c55-9f57-3a6e2b1a0003"


def _snapshot_payload() -> dict[str, object]:
    return {
        "team_members": [
            {"id": ADA_ID, "name": "Ada", "role": "Engineer"},
            {"id": GRACE_ID, "name": "Grace"},
        ],
        "projects": [
            {
                "id": ATLAS_ID,
                "name": "Atlas",
                "start_date": "2024-01-01",
                "end_date": "2024-03-31",
                "description": "Mapping service",
            }
        ],
        "project_assignees": [
            {
                "project_id": ATLAS_ID,
                "team_member_id": ADA_ID,
                "percent_allocation": 50,
                "start_date": "2024-01-01",
                "end_date": "2024-03-31",
            },
            {"project_id": ATLAS_ID, "team_member_id": GRACE_ID, "percent_allocation": None},
        ],
    }


def test_assignee_record_defaults_allocation_to_full_time() -> None:
    record = ProjectAssigneeRecord.model_validate(
        {"project_id": ATLAS_ID, "team_member_id": ADA_ID, "percent_allocation": None}
    )

    assert record.percent_allocation == 100
    assert record.start_date is None


def test_assignee_record_requires_both_dates() -> None:
    with pytest.raises(ValidationError, match="given together"):
        ProjectAssigneeRecord.model_validate(
            {"project_id": ATLAS_ID, "team_member_id": ADA_ID, "start_date": "2024-01-01"}
        )


def test_snapshot_rejects_inverted_project_dates() -> None:
    payload = _snapshot_payload()
    payload["projects"] = [
        {"id": ATLAS_ID, "name": "Atlas", "start_date": "2024-04-01", "end_date": "2024-03-01"}
    ]

    with pytest.raises(ValidationError, match="ends before it starts"):
        RoadmapSnapshot.model_validate(payload)


def test_load_snapshot_wraps_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SnapshotError, match="Invalid snapshot"):
        load_snapshot(path)


def test_load_snapshot_wraps_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SnapshotError, match="Cannot read snapshot"):
        load_snapshot(tmp_path / "missing.json")


def test_import_then_export_preserves_roadmap(
    tmp_path: Path,
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    source = tmp_path / "roadmap.json"
    source.write_text(json.dumps(_snapshot_payload()), encoding="utf-8")

    result = import_snapshot(load_snapshot(source), unit_of_work_factory=sqlite_unit_of_work)

    assert (result.team_members, result.projects, result.assignments) == (2, 1, 2)

    exported = export_snapshot(unit_of_work_factory=sqlite_unit_of_work)
    assert [member.name for member in exported.team_members] == ["Ada", "Grace"]
    assert exported.projects[0].description == "Mapping service"
    by_member = {str(item.team_member_id): item for item in exported.project_assignees}
    assert by_member[ADA_ID].percent_allocation == 50
    assert by_member[GRACE_ID].percent_allocation == 100
    assert by_member[GRACE_ID].start_date is None

    target = tmp_path / "export.json"
    dump_snapshot(exported, target)
    reloaded = load_snapshot(target)
    assert len(reloaded.project_assignees) == 2
    written = {
        item["team_member_id"]: item
        for item in json.loads(target.read_text(encoding="utf-8"))["project_assignees"]
    }
    assert "start_date" not in written[GRACE_ID]
    assert written[ADA_ID]["start_date"] == "2024-01-01"


def test_reimport_updates_existing_records(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    snapshot = RoadmapSnapshot.model_validate(_snapshot_payload())
    import_snapshot(snapshot, unit_of_work_factory=sqlite_unit_of_work)

    payload = _snapshot_payload()
    payload["projects"] = [
        {"id": ATLAS_ID, "name": "Atlas", "start_date": "2024-02-01", "end_date": "2024-04-30"}
    ]
    import_snapshot(
        RoadmapSnapshot.model_validate(payload),
        unit_of_work_factory=sqlite_unit_of_work,
    )

    exported = export_snapshot(unit_of_work_factory=sqlite_unit_of_work)
    assert len(exported.projects) == 1
    project = exported.projects[0]
    assert (project.start_date, project.end_date) == (date(2024, 2, 1), date(2024, 4, 30))
    assert len(exported.project_assignees) == 2


def test_import_rejects_unknown_member_reference(
    sqlite_unit_of_work: Callable[[], SqlAlchemyUnitOfWork],
) -> None:
    payload = _snapshot_payload()
    payload["project_assignees"] = [{"project_id": ATLAS_ID, "team_member_id": str(uuid4())}]

    with pytest.raises(SnapshotError, match="unknown team member"):
        import_snapshot(
            RoadmapSnapshot.model_validate(payload),
            unit_of_work_factory=sqlite_unit_of_work,
        )

    exported = export_snapshot(unit_of_work_factory=sqlite_unit_of_work)
    assert exported.projects == []

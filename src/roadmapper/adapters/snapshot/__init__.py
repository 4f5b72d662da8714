"""JSON roadmap snapshots: validation, import and export."""

from __future__ import annotations

from .loader import (
    ImportResult,
    SnapshotError,
    dump_snapshot,
    export_snapshot,
    import_snapshot,
    load_snapshot,
)
from .schema import ProjectAssigneeRecord, ProjectRecord, RoadmapSnapshot, TeamMemberRecord

__all__ = [
    "ImportResult",
    "ProjectAssigneeRecord",
    "ProjectRecord",
    "RoadmapSnapshot",
    "SnapshotError",
    "TeamMemberRecord",
    "dump_snapshot",
    "export_snapshot",
    "import_snapshot",
    "load_snapshot",
]

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING
from uuid import UUID

from dotenv import load_dotenv

from roadmapper.app import (
    change_assignment_dates,
    change_project_dates,
    export_roadmap,
    import_roadmap,
    move_project,
)
from roadmapper.config import ConfigurationError, configure_logging, get_timeline_config
from roadmapper.domain.date_ranges import DateRange, parse_date
from roadmapper.domain.scheduling import Timeline
from roadmapper.ui.prompt import TerminalConfirmationSurface

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date
    from types import FrameType

    from roadmapper.domain.conflicts import ChangeOutcome

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plan project and assignment dates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_cmd = subparsers.add_parser("import", help="Import a JSON roadmap snapshot")
    import_cmd.add_argument("path", type=Path, help="Snapshot file to read")

    export_cmd = subparsers.add_parser("export", help="Export the roadmap as a JSON snapshot")
    export_cmd.add_argument("path", type=Path, help="Snapshot file to write")

    project = subparsers.add_parser("project-dates", help="Change a project's date range")
    project.add_argument("--project", type=str, required=True, help="Project id")
    project.add_argument("--start", type=str, required=True, help="New start (YYYY-MM-DD)")
    project.add_argument("--end", type=str, required=True, help="New end (YYYY-MM-DD)")

    move = subparsers.add_parser("move-project", help="Drag a project along the timeline")
    move.add_argument("--project", type=str, required=True, help="Project id")
    target = move.add_mutually_exclusive_group(required=True)
    target.add_argument("--days", type=int, help="Whole days to move (negative moves back)")
    target.add_argument("--to", type=str, help="New start date (YYYY-MM-DD)")
    move.add_argument(
        "--timeline-start",
        type=str,
        help="First visible day of the timeline (defaults to ROADMAPPER_TIMELINE_START)",
    )
    move.add_argument(
        "--timeline-end",
        type=str,
        help="Last visible day of the timeline (defaults to ROADMAPPER_TIMELINE_END)",
    )

    assignment = subparsers.add_parser(
        "assignment-dates",
        help="Change one team member's assignment dates",
    )
    assignment.add_argument("--project", type=str, required=True, help="Project id")
    assignment.add_argument("--member", type=str, required=True, help="Team member id")
    assignment.add_argument("--start", type=str, required=True, help="New start (YYYY-MM-DD)")
    assignment.add_argument("--end", type=str, required=True, help="New end (YYYY-MM-DD)")

    return parser.parse_args(list(argv))


def _parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as exc:
        raise ValueError(f"Invalid UUID: {value}") from exc


def _parse_range(start: str, end: str) -> DateRange:
    dates = DateRange.parse(start, end)
    if dates.is_empty:
        raise ValueError(f"Start {start} must not be after end {end}")
    return dates


def _resolve_timeline(args: argparse.Namespace) -> Timeline | None:
    if args.timeline_start is None and args.timeline_end is None:
        return get_timeline_config()
    if args.timeline_start is None or args.timeline_end is None:
        raise ValueError("--timeline-start and --timeline-end must be given together")
    return Timeline(start=parse_date(args.timeline_start), end=parse_date(args.timeline_end))


def _report(outcome: ChangeOutcome) -> None:
    if not outcome.persisted:
        log.info("Change cancelled; nothing was saved")
        return
    plan = outcome.plan
    if plan is None:
        return
    if plan.project_range is not None:
        log.info("Project dates saved: %s", plan.project_range)
    for update in plan.assignment_updates:
        log.info("Assignment %s dates saved: %s", update.assignment_id, update.dates)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    project_id: UUID | None = None
    member_id: UUID | None = None
    new_range: DateRange | None = None
    new_start: date | None = None
    timeline: Timeline | None = None
    try:
        parsed_args = _parse_args(args_list)
        command = parsed_args.command
        if command in {"project-dates", "move-project", "assignment-dates"}:
            project_id = _parse_uuid(parsed_args.project)
        if command in {"project-dates", "assignment-dates"}:
            new_range = _parse_range(parsed_args.start, parsed_args.end)
        if command == "assignment-dates":
            member_id = _parse_uuid(parsed_args.member)
        if command == "move-project":
            timeline = _resolve_timeline(parsed_args)
            if parsed_args.to is not None:
                new_start = parse_date(parsed_args.to)
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    surface = TerminalConfirmationSurface()
    try:
        if command == "import":
            result = import_roadmap(parsed_args.path)
            log.info(
                "Import finished: team_members=%s, projects=%s, assignments=%s",
                result.team_members,
                result.projects,
                result.assignments,
            )
        elif command == "export":
            export_roadmap(parsed_args.path)
        elif command == "project-dates" and project_id and new_range:
            _report(change_project_dates(project_id, new_range, surface=surface))
        elif command == "move-project" and project_id:
            outcome = move_project(
                project_id,
                parsed_args.days,
                new_start=new_start,
                surface=surface,
                timeline=timeline,
            )
            _report(outcome)
        elif command == "assignment-dates" and project_id and member_id and new_range:
            _report(change_assignment_dates(project_id, member_id, new_range, surface=surface))
        else:
            raise ValueError(f"Unsupported command: {command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error while updating the roadmap")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

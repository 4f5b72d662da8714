"""Terminal confirmation surface for date conflicts."""

# ruff: noqa: T201

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from roadmapper.domain.conflicts import ConflictKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from roadmapper.domain.conflicts import ConflictDescriptor, PendingDecision

_TITLES = {
    ConflictKind.PROJECT_DATE_CHANGE: "Project Date Change Detected",
    ConflictKind.ASSIGNMENT_DATE_CHANGE: "Assignment Date Conflict",
    ConflictKind.ASSIGNMENT_OUTSIDE_PROJECT: "Assignment Outside Project Timeline",
}

_SUMMARIES = {
    ConflictKind.PROJECT_DATE_CHANGE: (
        "Changing the project dates will affect existing assignments. "
        "How would you like to handle this?"
    ),
    ConflictKind.ASSIGNMENT_DATE_CHANGE: (
        "The assignment dates extend beyond the current project timeline."
    ),
    ConflictKind.ASSIGNMENT_OUTSIDE_PROJECT: (
        "The assignment dates are outside the project date range."
    ),
}

CANCEL_ANSWERS = frozenset({"", "c", "cancel", "q", "quit"})


def describe_conflict(conflict: ConflictDescriptor) -> list[str]:
    """Render a conflict as plain text lines."""

    lines = [
        _TITLES[conflict.kind],
        _SUMMARIES[conflict.kind],
        f"Project: {conflict.project_name} ({conflict.project_range})",
    ]
    if conflict.assignment_range is not None:
        lines.append(f"Assignment: {conflict.assignment_range}")
    if conflict.affected_assignments:
        lines.append("Affected assignments:")
        lines.extend(
            f"  - {affected.member_name}: {affected.current_range}"
            for affected in conflict.affected_assignments
        )
    return lines


class TerminalConfirmationSurface:
    """Blocking prompt: lists the actions, reads one choice, or cancels on blank/EOF."""

    def __init__(
        self,
        *,
        read: Callable[[str], str] = input,
        out: TextIO | None = None,
    ) -> None:
        self._read = read
        self._out = out

    def present(self, decision: PendingDecision) -> None:
        out = self._out or sys.stdout
        for line in describe_conflict(decision.conflict):
            print(line, file=out)
        for index, action in enumerate(decision.actions, start=1):
            print(f"  [{index}] {action.label}: {action.description}", file=out)
        print("  [c] Cancel", file=out)

        while True:
            try:
                answer = self._read("Choose an option: ").strip().lower()
            except EOFError:
                answer = ""
            if answer in CANCEL_ANSWERS:
                decision.dismiss()
                return
            action = self._match(decision, answer)
            if action is not None:
                decision.choose(action)
                return
            print(f"Unrecognised option: {answer}", file=out)

    @staticmethod
    def _match(decision: PendingDecision, answer: str) -> str | None:
        for index, action in enumerate(decision.actions, start=1):
            if answer in {str(index), action.id}:
                return action.id
        return None

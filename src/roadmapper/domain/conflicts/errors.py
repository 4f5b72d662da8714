"""Errors raised while detecting and resolving date conflicts."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class DateConflictError(RuntimeError):
    """Base class for conflict-resolution failures."""


class UnknownActionError(DateConflictError, ValueError):
    """Raised when an action id is not offered for the conflict at hand."""

    def __init__(self, action_id: str, offered: Iterable[str]) -> None:
        offered_list = ", ".join(offered)
        super().__init__(f"Unknown action {action_id!r}; expected one of: {offered_list}")
        self.action_id = action_id


class ConflictPendingError(DateConflictError):
    """Raised when a change is requested while another conflict awaits a decision."""


class DecisionAlreadyMadeError(DateConflictError):
    """Raised when a pending decision is completed a second time."""


class PersistenceFailureError(DateConflictError):
    """Raised when a persistence callback rejects the final dates."""

    def __init__(self, message: str = "Failed to update dates") -> None:
        super().__init__(message)

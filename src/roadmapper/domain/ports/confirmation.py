"""Port for the human-facing surface that settles date conflicts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from roadmapper.domain.conflicts.coordinator import PendingDecision


@runtime_checkable
class ConfirmationSurface(Protocol):
    """Shows a conflict and its actions, then completes the decision exactly once.

    ``present`` may complete ``decision`` before returning (a blocking prompt) or
    later from another callback (a dialog); either ``choose`` or ``dismiss`` must
    eventually be called.
    """

    def present(self, decision: PendingDecision) -> None: ...

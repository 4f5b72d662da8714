"""Fixed resolution actions offered for each conflict kind."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from roadmapper.domain.conflicts.contracts import (
    ActionId,
    ConflictKind,
    ResolutionAction,
    Severity,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

_PROJECT_DATE_CHANGE_ACTIONS: Final = (
    ResolutionAction(
        id=ActionId.UPDATE_ASSIGNMENTS,
        label="Update All Assignments",
        description="Change assignment dates to match the new project timeline",
        severity=Severity.DEFAULT,
    ),
    ResolutionAction(
        id=ActionId.KEEP_CUSTOM,
        label="Keep Custom Dates",
        description="Maintain existing assignment dates (they may extend outside project)",
        severity=Severity.OUTLINE,
    ),
)

_ASSIGNMENT_OUTSIDE_PROJECT_ACTIONS: Final = (
    ResolutionAction(
        id=ActionId.EXTEND_PROJECT,
        label="Extend Project Timeline",
        description="Update project dates to include this assignment",
        severity=Severity.DEFAULT,
    ),
    ResolutionAction(
        id=ActionId.CONSTRAIN_ASSIGNMENT,
        label="Constrain Assignment",
        description="Change assignment dates to fit within project timeline",
        severity=Severity.OUTLINE,
    ),
)

ACTION_CATALOG: Final[Mapping[ConflictKind, tuple[ResolutionAction, ...]]] = MappingProxyType(
    {
        ConflictKind.PROJECT_DATE_CHANGE: _PROJECT_DATE_CHANGE_ACTIONS,
        ConflictKind.ASSIGNMENT_DATE_CHANGE: _ASSIGNMENT_OUTSIDE_PROJECT_ACTIONS,
        ConflictKind.ASSIGNMENT_OUTSIDE_PROJECT: _ASSIGNMENT_OUTSIDE_PROJECT_ACTIONS,
    }
)


def actions_for(kind: ConflictKind) -> tuple[ResolutionAction, ...]:
    return ACTION_CATALOG[kind]


def action_ids_for(kind: ConflictKind) -> tuple[ActionId, ...]:
    return tuple(action.id for action in ACTION_CATALOG[kind])

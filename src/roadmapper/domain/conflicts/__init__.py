"""Date-conflict detection and resolution for projects and their assignments."""

from __future__ import annotations

from .catalog import ACTION_CATALOG, action_ids_for, actions_for
from .contracts import (
    UNKNOWN_MEMBER_NAME,
    ActionId,
    AffectedAssignment,
    AssignmentSnapshot,
    ConflictDescriptor,
    ConflictKind,
    RangeUpdate,
    ResolutionAction,
    ResolutionPlan,
    Severity,
)
from .coordinator import (
    ChangeOutcome,
    CoordinatorState,
    DateConflictCoordinator,
    OutcomeStatus,
    PendingDecision,
)
from .detect import (
    detect_assignment_range_conflict,
    detect_project_range_conflict,
    is_auto_synced,
)
from .errors import (
    ConflictPendingError,
    DateConflictError,
    DecisionAlreadyMadeError,
    PersistenceFailureError,
    UnknownActionError,
)
from .transforms import constrained_assignment_range, extended_project_range, plan_resolution

__all__ = [
    "ACTION_CATALOG",
    "UNKNOWN_MEMBER_NAME",
    "ActionId",
    "AffectedAssignment",
    "AssignmentSnapshot",
    "ChangeOutcome",
    "ConflictDescriptor",
    "ConflictKind",
    "ConflictPendingError",
    "CoordinatorState",
    "DateConflictCoordinator",
    "DateConflictError",
    "DecisionAlreadyMadeError",
    "OutcomeStatus",
    "PendingDecision",
    "PersistenceFailureError",
    "RangeUpdate",
    "ResolutionAction",
    "ResolutionPlan",
    "Severity",
    "UnknownActionError",
    "action_ids_for",
    "actions_for",
    "constrained_assignment_range",
    "detect_assignment_range_conflict",
    "detect_project_range_conflict",
    "extended_project_range",
    "is_auto_synced",
    "plan_resolution",
]

"""Default timeline window used when dragging projects from the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from roadmapper.domain.date_ranges import parse_date
from roadmapper.domain.scheduling import Timeline

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError

if TYPE_CHECKING:
    from datetime import date

TIMELINE_START_VAR: Final[str] = "ROADMAPPER_TIMELINE_START"
TIMELINE_END_VAR: Final[str] = "ROADMAPPER_TIMELINE_END"


def get_timeline_config() -> Timeline | None:
    """Build the visible timeline from the environment.

    Both variables must be set together; without either, moves are unbounded.
    """

    if optional_env_var(TIMELINE_START_VAR) is None and optional_env_var(TIMELINE_END_VAR) is None:
        return None
    values = require_env_vars((TIMELINE_START_VAR, TIMELINE_END_VAR))
    bounds: dict[str, date] = {}
    for name in (TIMELINE_START_VAR, TIMELINE_END_VAR):
        try:
            bounds[name] = parse_date(values[name])
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid timeline configuration: {exc}", variable=name
            ) from exc
    try:
        return Timeline(start=bounds[TIMELINE_START_VAR], end=bounds[TIMELINE_END_VAR])
    except ValueError as exc:
        raise ConfigurationError(f"Invalid timeline configuration: {exc}") from exc

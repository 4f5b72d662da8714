"""Timeline drag helpers: turn a whole-day drag offset into a proposed date range."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from roadmapper.domain.date_ranges import DateRange, shift


@dataclass(frozen=True, slots=True)
class Timeline:
    """Visible window of the roadmap; dragged bars may not leave it."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError("Timeline start must be before end")

    @property
    def dates(self) -> DateRange:
        return DateRange(start=self.start, end=self.end)


def move_range(value: DateRange, offset_days: int, timeline: Timeline | None = None) -> DateRange:
    """Shift ``value`` by ``offset_days`` keeping its duration.

    With a ``timeline`` the moved range slides back inside it: a bar pushed past the
    start is pinned to the timeline start, one pushed past the end is pinned to the
    timeline end.
    """

    moved = shift(value, offset_days)
    if timeline is None:
        return moved
    if moved.start < timeline.start:
        return shift(moved, (timeline.start - moved.start).days)
    if moved.end > timeline.end:
        return shift(moved, -(moved.end - timeline.end).days)
    return moved


def offset_between(original: date, target: date) -> int:
    """Whole-day offset that moves ``original`` onto ``target``."""

    return (target - original) // timedelta(days=1)


__all__ = ["Timeline", "move_range", "offset_between"]

"""Closed calendar-date intervals and the comparisons the planner needs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

DATE_FORMAT_HINT = "YYYY-MM-DD"


class EmptyRangeUnionError(ValueError):
    """Raised when ``union`` is called without any ranges."""


def parse_date(value: str) -> date:
    """Parse a boundary ``YYYY-MM-DD`` string into a calendar date."""

    normalized = value.strip()
    message = f"Invalid date {value!r}, expected {DATE_FORMAT_HINT}"
    # fromisoformat also accepts compact forms such as 20240101
    if len(normalized) != len("YYYY-MM-DD"):
        raise ValueError(message)
    try:
        return date.fromisoformat(normalized)
    except ValueError as exc:
        raise ValueError(message) from exc


def format_date(value: date) -> str:
    return value.isoformat()


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive ``start``..``end`` interval of calendar dates.

    Ordering is not validated on construction: ``clamp`` may legitimately produce an
    inverted range, which ``is_empty`` reports.
    """

    start: date
    end: date

    @classmethod
    def parse(cls, start: str, end: str) -> DateRange:
        return cls(start=parse_date(start), end=parse_date(end))

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    @property
    def days(self) -> int:
        """Number of calendar days covered, both ends included."""
        if self.is_empty:
            return 0
        return (self.end - self.start).days + 1

    def as_strings(self) -> tuple[str, str]:
        return format_date(self.start), format_date(self.end)

    def __str__(self) -> str:
        start, end = self.as_strings()
        return f"{start}..{end}"


def within(inner: DateRange, outer: DateRange) -> bool:
    """Return whether ``inner`` lies entirely inside ``outer``."""

    return inner.start >= outer.start and inner.end <= outer.end


def clamp(value: DateRange, bounds: DateRange) -> DateRange:
    """Narrow ``value`` to ``bounds``.

    When the two ranges are disjoint the result is inverted (``start > end``); it is
    returned unchanged so callers can decide how to treat it.
    """

    return DateRange(start=max(value.start, bounds.start), end=min(value.end, bounds.end))


def union(ranges: Iterable[DateRange]) -> DateRange:
    """Return the smallest range covering every given range."""

    materialized = tuple(ranges)
    if not materialized:
        raise EmptyRangeUnionError("Cannot build the union of zero date ranges")
    return DateRange(
        start=min(item.start for item in materialized),
        end=max(item.end for item in materialized),
    )


def shift(value: DateRange, days: int) -> DateRange:
    """Move both ends of ``value`` by ``days`` (negative moves backwards)."""

    offset = timedelta(days=days)
    return DateRange(start=value.start + offset, end=value.end + offset)


__all__ = [
    "DateRange",
    "EmptyRangeUnionError",
    "clamp",
    "format_date",
    "parse_date",
    "shift",
    "union",
    "within",
]

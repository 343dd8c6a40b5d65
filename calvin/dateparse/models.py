"""Date expression data models.

Defines the result and error types for the resolver pipeline:
    tokens -> ResolutionResult | DateExpressionError
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Any


class ExpressionKind(str, Enum):
    """Which expression branch produced a result."""

    # Single days
    TODAY = "today"
    TOMORROW = "tomorrow"
    YESTERDAY = "yesterday"
    NEXT_WEEKDAY = "next_weekday"
    EXPLICIT = "explicit"
    FALLBACK = "fallback"

    # Weeks
    WEEK = "week"
    NEXT_WEEK = "next_week"


class DateExpressionError(ValueError):
    """A relative date expression is malformed and cannot be resolved."""

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token


class MissingWeekdayError(DateExpressionError):
    """'next' was given without a day of week or 'week' after it."""

    def __init__(self) -> None:
        super().__init__("missing day of week or 'week'")


class InvalidWeekdayError(DateExpressionError):
    """The word after 'next' is not an English weekday name."""

    def __init__(self, token: str):
        super().__init__(f"invalid day of week: {token}", token=token)


@dataclass(frozen=True)
class ResolutionResult:
    """A resolved date expression.

    Exactly one shape is populated: ``date`` for a single day, or
    ``week_days`` (Monday through Sunday) for week mode.
    """

    date: date | None = None
    week_days: tuple[date, ...] = ()
    kind: ExpressionKind = ExpressionKind.TODAY
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if (self.date is None) == (not self.week_days):
            raise ValueError("exactly one of date or week_days must be set")

        if self.week_days:
            if len(self.week_days) != 7:
                raise ValueError(f"a week has 7 days, got {len(self.week_days)}")
            if self.week_days[0].weekday() != 0:
                raise ValueError(f"week must start on a Monday, got {self.week_days[0]}")
            for prev, cur in zip(self.week_days, self.week_days[1:]):
                if cur - prev != timedelta(days=1):
                    raise ValueError("week days must be consecutive")

    @property
    def is_week(self) -> bool:
        return bool(self.week_days)

    @property
    def dates(self) -> list[date]:
        """Days a caller should list events for, in order."""
        if self.week_days:
            return list(self.week_days)
        return [self.date]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "is_week": self.is_week,
            "date": self.date.isoformat() if self.date else None,
            "week_days": [d.isoformat() for d in self.week_days],
            "warnings": list(self.warnings),
        }

    @classmethod
    def single(
        cls,
        day: date,
        kind: ExpressionKind,
        warnings: tuple[str, ...] = (),
    ) -> ResolutionResult:
        return cls(date=day, kind=kind, warnings=warnings)

    @classmethod
    def week(cls, days: tuple[date, ...], kind: ExpressionKind) -> ResolutionResult:
        return cls(week_days=tuple(days), kind=kind)

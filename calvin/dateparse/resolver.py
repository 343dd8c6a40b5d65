"""Relative date expression resolver.

Turns the argument list of a calvin invocation into the day (or week)
to show. ``tokens[0]`` is the username and is not looked at here.

    alice                  -> today
    alice tomorrow         -> today + 1
    alice yesterday        -> today - 1
    alice week             -> Monday..Sunday of this week
    alice next week        -> Monday..Sunday of the following week
    alice next friday      -> first Friday from today on (today included)
    alice 2025-12-25       -> that date
    alice <anything else>  -> today, with a warning
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from datetime import date, datetime, timedelta

from calvin.dateparse.models import (
    ExpressionKind,
    InvalidWeekdayError,
    MissingWeekdayError,
    ResolutionResult,
)

logger = logging.getLogger(__name__)

NowProvider = Callable[[], date]

# Indexed by date.weekday(): 0 = Monday .. 6 = Sunday
WEEKDAY_NAMES: tuple[str, ...] = (
    "monday", "tuesday", "wednesday", "thursday",
    "friday", "saturday", "sunday",
)

MONDAY = 0
DAYS_IN_WEEK = 7

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def default_now() -> date:
    """Today's date from the local wall clock."""
    return date.today()


def week_of(base: date, day_offset: int = 0) -> tuple[date, ...]:
    """Return the Monday..Sunday week containing ``base + day_offset`` days."""
    shifted = base + timedelta(days=day_offset)

    days_until_monday = MONDAY - shifted.weekday()
    if days_until_monday > 0:
        days_until_monday -= DAYS_IN_WEEK

    monday = shifted + timedelta(days=days_until_monday)
    return tuple(monday + timedelta(days=i) for i in range(DAYS_IN_WEEK))


def parse_iso_date(text: str) -> date | None:
    """Parse a strict YYYY-MM-DD date, or return None."""
    if not ISO_DATE_RE.match(text):
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None


def _as_date(value: date) -> date:
    # datetime is a date subclass; drop the time of day
    if isinstance(value, datetime):
        return value.date()
    return value


class DateResolver:
    """Resolves token lists against an injected clock."""

    def __init__(self, now_provider: NowProvider | None = None):
        self.now_provider = now_provider or default_now

    def resolve(self, tokens: Sequence[str]) -> ResolutionResult:
        """Resolve ``tokens`` to a single date or a week.

        Raises:
            MissingWeekdayError: "next" with nothing after it
            InvalidWeekdayError: "next" followed by an unknown weekday
        """
        today = _as_date(self.now_provider())

        if len(tokens) <= 1:
            return ResolutionResult.single(today, ExpressionKind.TODAY)

        word = tokens[1]

        if word in ("", "today"):
            return ResolutionResult.single(today, ExpressionKind.TODAY)
        if word == "tomorrow":
            return ResolutionResult.single(today + timedelta(days=1), ExpressionKind.TOMORROW)
        if word == "yesterday":
            return ResolutionResult.single(today - timedelta(days=1), ExpressionKind.YESTERDAY)
        if word == "week":
            return ResolutionResult.week(week_of(today, 0), ExpressionKind.WEEK)
        if word == "next":
            return self._resolve_next(today, tokens[2:])

        return self._resolve_explicit(today, word)

    def _resolve_next(self, today: date, rest: Sequence[str]) -> ResolutionResult:
        if not rest:
            raise MissingWeekdayError()

        target = rest[0].lower()
        if target == "week":
            return ResolutionResult.week(week_of(today, DAYS_IN_WEEK), ExpressionKind.NEXT_WEEK)

        # Today counts: "next monday" said on a Monday is today.
        for step in range(DAYS_IN_WEEK):
            candidate = today + timedelta(days=step)
            if WEEKDAY_NAMES[candidate.weekday()] == target:
                return ResolutionResult.single(candidate, ExpressionKind.NEXT_WEEKDAY)

        raise InvalidWeekdayError(rest[0])

    def _resolve_explicit(self, today: date, text: str) -> ResolutionResult:
        parsed = parse_iso_date(text)
        if parsed is not None:
            return ResolutionResult.single(parsed, ExpressionKind.EXPLICIT)

        message = f"could not parse date {text!r}, using today"
        logger.warning(message)
        return ResolutionResult.single(today, ExpressionKind.FALLBACK, warnings=(message,))


def resolve(
    tokens: Sequence[str],
    now_provider: NowProvider | None = None,
) -> ResolutionResult:
    """Resolve ``tokens`` with a one-off DateResolver."""
    return DateResolver(now_provider).resolve(tokens)

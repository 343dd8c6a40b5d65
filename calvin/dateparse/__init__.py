"""Date expression parsing: relative days, weeks, explicit ISO dates."""

from calvin.dateparse.models import (
    DateExpressionError,
    ExpressionKind,
    InvalidWeekdayError,
    MissingWeekdayError,
    ResolutionResult,
)
from calvin.dateparse.resolver import (
    WEEKDAY_NAMES,
    DateResolver,
    default_now,
    parse_iso_date,
    resolve,
    week_of,
)

__all__ = [
    "WEEKDAY_NAMES",
    "DateExpressionError",
    "DateResolver",
    "ExpressionKind",
    "InvalidWeekdayError",
    "MissingWeekdayError",
    "ResolutionResult",
    "default_now",
    "parse_iso_date",
    "resolve",
    "week_of",
]

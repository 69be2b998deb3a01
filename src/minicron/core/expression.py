"""Five-field cron expressions and the time-matching predicate.

Format: "minute hour day_of_month month day_of_week", or one of the
``@`` shortcuts in :data:`minicron.core.fields.SHORTCUTS`.

Day matching follows Unix cron: when both day fields are restricted (neither
is ``*``) the job runs when *either* matches, e.g. ``30 4 1,15 * 5`` runs at
04:30 on the 1st and 15th plus every Friday. Otherwise both must match, which
reduces to whichever field is restricted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from minicron.core.bits import is_set
from minicron.core.errors import CronParseError
from minicron.core.fields import DAY_KEYWORDS, MONTH_KEYWORDS, SHORTCUTS, parse_field

# (name, min, max, keywords) in expression order
_FIELDS: tuple[tuple[str, int, int, tuple[str, ...] | None], ...] = (
    ("minute", 0, 59, None),
    ("hour", 0, 23, None),
    ("dayOfMonth", 1, 31, None),
    ("month", 1, 12, MONTH_KEYWORDS),
    ("dayOfWeek", 0, 7, DAY_KEYWORDS),
)

_SUNDAY_ALIAS = 7


@dataclass(frozen=True)
class ParsedExpression:
    """Bitmask form of a cron expression. Immutable and safe to share."""

    minute: int = 0
    hour: int = 0
    day_of_month: int = 0
    month: int = 0
    day_of_week: int = 0
    day_match_or: bool = False

    def __str__(self) -> str:
        return (
            f"minute={self.minute:b} hour={self.hour:b} "
            f"dayOfMonth={self.day_of_month:b} month={self.month:b} "
            f"dayOfWeek={self.day_of_week:b}"
        )

    def trigger(self, now: datetime) -> bool:
        """Whether the schedule fires at ``now`` (second resolution is ignored)."""
        return self.matches_time_fields(now) and self.matches_day_fields(now)

    def matches_time_fields(self, now: datetime) -> bool:
        return (
            is_set(self.minute, now.minute)
            and is_set(self.hour, now.hour)
            and is_set(self.month, now.month)
        )

    def matches_day_fields(self, now: datetime) -> bool:
        weekday = now.isoweekday() % 7  # 0=Sun .. 6=Sat
        day_match = is_set(self.day_of_month, now.day)
        week_match = is_set(self.day_of_week, weekday) or (
            weekday == 0 and is_set(self.day_of_week, _SUNDAY_ALIAS)
        )
        if self.day_match_or:
            return day_match or week_match
        return day_match and week_match


def parse(text: str) -> ParsedExpression:
    """Parse a cron expression or ``@`` shortcut.

    Example: "*/15 9-17 * * mon,fri"

    Raises:
        CronParseError: If the expression does not have exactly 5 fields.
        FieldParseError: For the first field containing invalid tokens.
    """
    spec = text.strip()
    spec = SHORTCUTS.get(spec, spec)

    parts = spec.split(" ")
    if len(parts) != len(_FIELDS):
        msg = f"cron expression must have {len(_FIELDS)} fields, got {len(parts)}"
        raise CronParseError(text, message=msg)

    day_match_or = parts[2] != "*" and parts[4] != "*"
    masks = [
        parse_field(name, part, minimum, maximum, keywords)
        for (name, minimum, maximum, keywords), part in zip(_FIELDS, parts)
    ]

    return ParsedExpression(*masks, day_match_or=day_match_or)


def trigger(expression: ParsedExpression, now: datetime) -> bool:
    """Function form of :meth:`ParsedExpression.trigger`."""
    return expression.trigger(now)

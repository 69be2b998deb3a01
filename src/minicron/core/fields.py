"""Single-field parser — turns one comma-separated cron field into a bitmask.

Supported token forms, checked in this order:

    *        every value in the field's range
    */N      every N-th value starting at the field minimum
    A-B      inclusive range (A < B)
    N        a single value
    name     a keyword (month and day-of-week fields only)
"""

from __future__ import annotations

import re
from types import MappingProxyType

from minicron.core.bits import set_bit
from minicron.core.errors import (
    CronParseError,
    FieldParseError,
    KeywordError,
    NumberError,
    RangeError,
    StepError,
)

# Position in the tuple is the bit index; the leading "" keeps jan == 1 and mon == 1.
MONTH_KEYWORDS: tuple[str, ...] = (
    "",
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)
DAY_KEYWORDS: tuple[str, ...] = ("", "mon", "tue", "wed", "thu", "fri", "sat", "sun")

SHORTCUTS = MappingProxyType(
    {
        "@yearly": "0 0 1 1 *",
        "@annually": "0 0 1 1 *",
        "@monthly": "0 0 1 * *",
        "@weekly": "0 0 * * 0",
        "@daily": "0 0 * * *",
        "@midnight": "0 0 * * *",
        "@hourly": "0 * * * *",
    }
)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DIGIT = re.compile(r"[0-9]")


def _to_int(text: str) -> int | None:
    """Parse a signed decimal integer, or return None."""
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def _fill(minimum: int, maximum: int, step: int = 1) -> int:
    bits = 0
    for pos in range(minimum, maximum + 1, step):
        bits = set_bit(bits, pos)
    return bits


def _parse_step(token: str, minimum: int, maximum: int) -> int:
    step = _to_int(token[2:])
    if step is None or step == 0 or step < minimum or step > maximum:
        raise StepError(token)
    return _fill(minimum, maximum, step)


def _parse_range(token: str, minimum: int, maximum: int) -> int:
    parts = token.split("-")
    if len(parts) != 2:
        raise RangeError(token)
    start, end = _to_int(parts[0]), _to_int(parts[1])
    if start is None or end is None or start < minimum or end > maximum or start >= end:
        raise RangeError(token)
    return _fill(start, end)


def _parse_number(token: str, minimum: int, maximum: int) -> int:
    value = _to_int(token)
    if value is None or value < minimum or value > maximum:
        raise NumberError(token)
    return set_bit(0, value)


def _parse_keyword(token: str, keywords: tuple[str, ...]) -> int:
    name = token.lower()
    # Index 0 is a placeholder, not a keyword
    if not name or name not in keywords:
        raise KeywordError(token)
    return set_bit(0, keywords.index(name))


def parse_token(
    token: str,
    minimum: int,
    maximum: int,
    keywords: tuple[str, ...] | None = None,
) -> int:
    """Parse a single comma-free token into a bitmask.

    Raises:
        CronParseError: The matching subclass for the token form that failed.
    """
    if token == "*":
        return _fill(minimum, maximum)
    if token.startswith("*/"):
        return _parse_step(token, minimum, maximum)
    if "-" in token:
        return _parse_range(token, minimum, maximum)
    if _DIGIT.search(token):
        return _parse_number(token, minimum, maximum)
    if keywords is not None:
        return _parse_keyword(token, keywords)
    raise CronParseError(token)


def parse_field(
    name: str,
    text: str,
    minimum: int,
    maximum: int,
    keywords: tuple[str, ...] | None = None,
) -> int:
    """Parse a comma-separated field and OR the token masks together.

    Every token is tried even after a failure so the error reports all
    invalid tokens in the field.

    Args:
        name: Field name used in error messages (e.g. "minute").
        text: Raw field text, e.g. "1-5,*/15".
        minimum: Smallest allowed value.
        maximum: Largest allowed value.
        keywords: Ordered keyword table for named values, if the field has one.

    Raises:
        FieldParseError: If any token is invalid.
    """
    bits = 0
    errors: list[CronParseError] = []
    for token in text.split(","):
        try:
            bits |= parse_token(token, minimum, maximum, keywords)
        except CronParseError as exc:
            errors.append(exc)

    if errors:
        raise FieldParseError(name, errors)
    return bits

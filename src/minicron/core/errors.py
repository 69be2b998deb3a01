"""Parse errors raised for invalid cron expressions.

Every error is a ``ValueError`` so callers that only care about "bad input"
can catch that; the subclasses say which token form failed.
"""

from __future__ import annotations

from collections.abc import Sequence


class CronParseError(ValueError):
    """Invalid cron specification (wrong field count or unparseable token)."""

    default_message = "cron specification error"

    def __init__(self, token: str | None = None, message: str | None = None) -> None:
        self.token = token
        msg = message or self.default_message
        if token is not None:
            msg = f"{msg}: {token!r}"
        super().__init__(msg)


class StepError(CronParseError):
    default_message = "invalid step value"


class RangeError(CronParseError):
    default_message = "invalid range value"


class NumberError(CronParseError):
    default_message = "invalid numeric value"


class KeywordError(CronParseError):
    default_message = "invalid keyword value"


class FieldParseError(CronParseError):
    """All token errors found in a single field, in token order."""

    def __init__(self, field: str, errors: Sequence[CronParseError]) -> None:
        self.field = field
        self.errors: tuple[CronParseError, ...] = tuple(errors)
        message = "; ".join(f"error parsing {field} field: {err}" for err in self.errors)
        super().__init__(message=message)

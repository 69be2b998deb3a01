"""Core package — cron expression parsing and time matching."""

from minicron.core.errors import (
    CronParseError,
    FieldParseError,
    KeywordError,
    NumberError,
    RangeError,
    StepError,
)
from minicron.core.expression import ParsedExpression, parse, trigger

__all__ = [
    "CronParseError",
    "FieldParseError",
    "KeywordError",
    "NumberError",
    "ParsedExpression",
    "RangeError",
    "StepError",
    "parse",
    "trigger",
]

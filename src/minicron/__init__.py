"""minicron — a minimal cron-style scheduler.

Usage::

    import minicron

    job = minicron.run("*/5 * * * *", lambda: print("tick"))
    ...
    job.stop()
"""

from minicron.core import CronParseError, FieldParseError, ParsedExpression, parse, trigger
from minicron.scheduler import Job, run

__all__ = [
    "CronParseError",
    "FieldParseError",
    "Job",
    "ParsedExpression",
    "parse",
    "run",
    "trigger",
]

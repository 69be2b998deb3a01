"""Minute-aligned background loop that fires a callback on a cron schedule."""

from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timedelta
from typing import Callable

from minicron.core.expression import ParsedExpression, parse

logger = logging.getLogger(__name__)

# Seconds added past each minute boundary so sleep jitter never wakes us early
DEFAULT_PADDING = 0.101

JobFunc = Callable[[], None]


def _now() -> datetime:
    """Local wall-clock time. Patched in tests."""
    return datetime.now()


def next_minute(now: datetime, padding: float = DEFAULT_PADDING) -> datetime:
    """Start of the minute after ``now``, plus ``padding`` seconds."""
    return now.replace(second=0, microsecond=0) + timedelta(minutes=1, seconds=padding)


class Job:
    """A running cron schedule bound to one background thread.

    The ``running`` flag is only checked once per cycle: :meth:`stop` never
    interrupts a sleeping loop or an in-flight callback, so the callback may
    still fire once if the loop is already evaluating when stop is called.
    """

    def __init__(
        self,
        expression: ParsedExpression,
        func: JobFunc,
        padding: float = DEFAULT_PADDING,
        schedule: str = "",
    ) -> None:
        self.expression = expression
        self.func = func
        self.schedule = schedule or str(expression)
        self._padding = padding
        self._running = threading.Event()
        self._thread: threading.Thread | None = None

    def __repr__(self) -> str:
        return f"<Job schedule={self.schedule!r} running={self.running}>"

    def start(self) -> None:
        """Start the background loop. A job can only be started once."""
        if self._thread is not None:
            raise RuntimeError("Job already started")
        self._running.set()
        self._thread = threading.Thread(
            target=self._tick, name=f"cron-{self.schedule}", daemon=True
        )
        self._thread.start()
        logger.info("Started cron job '%s'", self.schedule)

    def stop(self) -> None:
        """Ask the loop to exit after its current cycle. Safe to call repeatedly."""
        if self._running.is_set():
            self._running.clear()
            logger.info("Stopping cron job '%s'", self.schedule)

    @property
    def running(self) -> bool:
        """Whether the loop has not yet been asked to stop."""
        return self._running.is_set()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the loop thread to exit. Returns True if it has."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _wait(self) -> None:
        now = _now()
        delay = (next_minute(now, self._padding) - now).total_seconds()
        time.sleep(max(delay, 0.0))

    def _tick(self) -> None:
        """Sleep to the top of the minute, then check once per minute."""
        if _now().second > 0:
            self._wait()

        try:
            while self._running.is_set():
                now = _now()
                if self.expression.trigger(now):
                    logger.debug("Cron job '%s' triggered at %s", self.schedule, now)
                    self.func()
                self._wait()
        finally:
            self._running.clear()
            logger.debug("Cron job '%s' loop exited", self.schedule)


def run(schedule: str, func: JobFunc, padding: float = DEFAULT_PADDING) -> Job:
    """Parse ``schedule`` and start a job calling ``func`` whenever it matches.

    Parsing happens before anything is started, so an invalid schedule
    raises without leaving a thread behind.

    Args:
        schedule: 5-field cron expression or ``@`` shortcut (e.g. "@hourly").
        func: Zero-argument callable, run synchronously on the job thread.
        padding: Seconds to wait past each minute boundary.

    Returns:
        The started :class:`Job`; call :meth:`Job.stop` to end it.

    Raises:
        CronParseError: If the schedule is invalid.
    """
    expression = parse(schedule)
    job = Job(expression, func, padding=padding, schedule=schedule.strip())
    job.start()
    return job

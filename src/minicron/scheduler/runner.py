"""Serve-mode orchestrator — runs one cron job until SIGINT/SIGTERM."""

from __future__ import annotations

import logging
import shlex
import signal
import subprocess
import threading
import time
from datetime import datetime
from typing import TYPE_CHECKING, Callable

from minicron.scheduler.job import JobFunc, run

if TYPE_CHECKING:
    from minicron.config.settings import Settings

logger = logging.getLogger(__name__)


def ticker() -> JobFunc:
    """Callback printing alternating ``tick``/``TOCK`` lines with the time."""
    tick = True

    def _tick() -> None:
        nonlocal tick
        stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        print(f"{'tick' if tick else 'TOCK'}: {stamp}", flush=True)
        tick = not tick

    return _tick


def command_runner(
    command: str,
    on_failure: Callable[[], None] | None = None,
) -> JobFunc:
    """Callback running ``command`` as a subprocess, inheriting stdout/stderr.

    ``on_failure`` is called when the command cannot be started or exits
    non-zero.
    """
    argv = shlex.split(command)
    if not argv:
        raise ValueError("command must not be empty")

    def _run() -> None:
        logger.info("Run command: %r", command)
        try:
            result = subprocess.run(argv, check=False)
        except OSError:
            logger.exception("Error executing command %r", command)
        else:
            if result.returncode == 0:
                logger.debug("Command %r finished", command)
                return
            logger.error("Command %r exited with status %d", command, result.returncode)
        if on_failure is not None:
            on_failure()

    return _run


def serve(settings: Settings, schedule: str, command: str | None = None) -> int:
    """Run the ticker (or ``command``) on ``schedule`` and block until a signal.

    This is the entry point for ``python -m minicron tick|exec``. A failing
    command stops the loop, mirroring a cron wrapper that exits on error.

    Returns:
        0 after a clean shutdown, 1 if the command failed.

    Raises:
        CronParseError: If the schedule is invalid; nothing is started.
    """
    stop_event = threading.Event()
    failed = threading.Event()

    def _on_failure() -> None:
        failed.set()
        stop_event.set()

    callback = ticker() if command is None else command_runner(command, _on_failure)
    job = run(schedule, callback, padding=settings.tick_padding)
    logger.info("Serve mode active — schedule='%s'", schedule)

    def _handle_signal(signum: int, frame: object) -> None:
        logger.info("Received signal %d, shutting down...", signum)
        stop_event.set()

    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    try:
        while not stop_event.is_set():
            time.sleep(1)
    finally:
        job.stop()
        logger.info("Serve mode stopped")

    return 1 if failed.is_set() else 0

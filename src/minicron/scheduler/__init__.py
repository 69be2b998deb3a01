"""Scheduler package — minute-aligned job loop and serve-mode runner."""

from minicron.scheduler.job import Job, run
from minicron.scheduler.runner import serve

__all__ = ["Job", "run", "serve"]

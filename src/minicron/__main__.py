"""CLI entry point — ``python -m minicron tick [SCHEDULE] | exec SCHEDULE COMMAND``."""

from __future__ import annotations

import argparse
import logging
import sys

from minicron.config import get_settings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minicron",
        description="minicron — run a ticker or a command on a cron schedule.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    tick = sub.add_parser("tick", help="Print tick/TOCK every time the schedule fires.")
    tick.add_argument(
        "schedule",
        nargs="?",
        default=None,
        help="Cron expression or @shortcut (default: MINICRON_DEFAULT_SCHEDULE).",
    )

    exe = sub.add_parser("exec", help="Run an external command on the schedule.")
    exe.add_argument("schedule", help='Cron expression, e.g. "*/5 * * * *".')
    exe.add_argument("program", help="Command line to execute.")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args and run the requested job until interrupted."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    from minicron.scheduler.runner import serve

    if args.command == "tick":
        schedule = args.schedule or settings.default_schedule
        program = None
    else:
        schedule = args.schedule
        program = args.program

    try:
        return serve(settings, schedule, program)
    except ValueError as exc:  # CronParseError or an empty command
        print(f"minicron: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

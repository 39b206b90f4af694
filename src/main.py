"""Resolve a time specification from the command line and print the period.

Example:
    python -m src.main last 7 days
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from src.app import create_app
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.timerange.normalize import DEFAULT_SPEC
from src.timerange.parser import UnsupportedSpecError
from src.timerange.schema import TimeRange

logger = logging.getLogger(__name__)

MACHINE_FORMAT = "%Y-%m-%d %H:%M"
HUMAN_FORMAT = "%d %b %Y"


def format_period(time_range: TimeRange) -> str:
    """Render a range as a machine-readable line followed by a human-readable one."""

    start, end = time_range.as_tuple()
    return (
        f"Period: {start.strftime(MACHINE_FORMAT)} to {end.strftime(MACHINE_FORMAT)}\n"
        f"        {start.strftime(HUMAN_FORMAT)} - {end.strftime(HUMAN_FORMAT)}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""

    parser = argparse.ArgumentParser(description="Resolve a time specification to a date range.")
    parser.add_argument(
        "spec",
        nargs="*",
        help=f'Time specification, e.g. "thisweek", "october 2025", "week 32" (default: {DEFAULT_SPEC}).',
    )
    args = parser.parse_args(argv)

    load_dotenv(".env")
    settings = load_settings()
    configure_logging(settings.log_level)

    app = create_app(settings)
    spec = " ".join(args.spec) or DEFAULT_SPEC

    try:
        time_range = app.parser().parse(spec)
    except UnsupportedSpecError as exc:
        print(f"invalid time specification: {exc}", file=sys.stderr)
        return 2

    logger.debug("resolved spec=%r start=%s end=%s", spec, time_range.start, time_range.end)
    print(format_period(time_range))
    return 0


if __name__ == "__main__":
    sys.exit(main())

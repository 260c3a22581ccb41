#!/usr/bin/env python3
"""
Fitness Tracker CLI.

Record users and their workouts in memory for the length of a session.

Usage:
    fitness-tracker                     # Start the interactive menu
    fitness-tracker --log-level INFO    # Show registry activity on stderr
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from . import __version__
from .config import get_settings
from .registry import FitnessTracker
from .shell import InteractiveShell

logger = logging.getLogger(__name__)


def configure_logging(level: str, fmt: str) -> None:
    """Send log records to stderr so they stay out of the menu output."""
    logging.basicConfig(level=level.upper(), format=fmt, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fitness-tracker",
        description="Fitness Tracker - record users and workouts in memory",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (overrides FITNESS_TRACKER_LOG_LEVEL)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    configure_logging(args.log_level or settings.log_level, settings.log_format)
    logger.debug(f"Starting Fitness Tracker v{__version__}")

    shell = InteractiveShell(
        tracker=FitnessTracker(),
        console=Console(),
        json_indent=settings.json_indent,
    )
    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

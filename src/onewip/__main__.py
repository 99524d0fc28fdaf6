"""CLI entry point for onewip."""

import argparse
import logging
from pathlib import Path

from . import __version__
from .cli.output import error, success
from .config import DEFAULT_BOARD_FILE, Settings
from .logging import setup_logging
from .repositories import BoardLoadError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="onewip",
        description="Terminal kanban board with a work-in-progress limit of one",
    )
    parser.add_argument(
        "--board-file",
        type=Path,
        default=None,
        help=f"YAML file to load and save the board (default: {DEFAULT_BOARD_FILE})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings from CLI args; flags override the environment."""
    settings_kwargs: dict = {}
    if args.board_file:
        settings_kwargs["board_file"] = args.board_file
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    settings = build_settings(args)

    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help/--version don't pay for loading textual
    from .app import run

    try:
        snapshot = run(settings)
    except BoardLoadError as e:
        logger.error("Cannot start: %s", e)
        error(str(e))
        raise SystemExit(1) from e

    total = len(snapshot.todo) + len(snapshot.done) + (snapshot.wip is not None)
    success(f"{total} tasks on the board in {settings.board_file}")


if __name__ == "__main__":
    main()

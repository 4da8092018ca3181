"""CLI entry point for taskdeck."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging
from .models import Category, Priority, SortBy, SortOrder, TaskStatus


def _values(enum) -> list[str]:
    return [member.value for member in enum]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="taskdeck",
        description="Personal task manager with filtering, sorting and statistics",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding tasks and preferences (default: .taskdeck)",
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

    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List tasks")
    list_parser.add_argument(
        "--filter",
        "-f",
        default=None,
        metavar="EXPR",
        help='Filter expression, e.g. "status:pending priority:high sort:dueDate cena"',
    )
    list_parser.add_argument("--status", choices=["all", *_values(TaskStatus)])
    list_parser.add_argument("--category", choices=["all", *_values(Category)])
    list_parser.add_argument("--priority", choices=["all", *_values(Priority)])
    list_parser.add_argument(
        "--assigned", help='Assignee name, "unassigned" or "all"'
    )
    list_parser.add_argument("--search", help="Search title, description and tags")
    list_parser.add_argument("--sort", choices=_values(SortBy))
    list_parser.add_argument("--order", choices=_values(SortOrder))

    add_parser = sub.add_parser("add", help="Add a task")
    add_parser.add_argument("title")
    _add_task_fields(add_parser)

    edit_parser = sub.add_parser("edit", help="Edit a task")
    edit_parser.add_argument("task_id", help="Task ID or unique ID prefix")
    edit_parser.add_argument("--title")
    edit_parser.add_argument("--status", choices=_values(TaskStatus))
    _add_task_fields(edit_parser)
    edit_parser.add_argument("--clear-due", action="store_true", help="Remove the due date")
    edit_parser.add_argument("--unassign", action="store_true", help="Remove the assignee")

    toggle_parser = sub.add_parser("toggle", help="Advance a task's status")
    toggle_parser.add_argument("task_id", help="Task ID or unique ID prefix")

    delete_parser = sub.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("task_id", help="Task ID or unique ID prefix")

    reorder_parser = sub.add_parser("reorder", help="Set manual order from a list of IDs")
    reorder_parser.add_argument("task_ids", nargs="+", help="Task IDs in their new order")

    sub.add_parser("stats", help="Show task statistics")
    sub.add_parser("theme", help="Toggle light/dark theme")
    sub.add_parser("seed", help="Load sample tasks into an empty store")

    return parser


def _add_task_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--description", "-d")
    parser.add_argument("--priority", choices=_values(Priority))
    parser.add_argument("--category", choices=_values(Category))
    parser.add_argument(
        "--due", help="Due date: ISO date/datetime, today, tomorrow or +N days"
    )
    parser.add_argument("--tag", "-t", action="append", help="Tag (repeatable)")
    parser.add_argument("--assign", help="Assignee")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.data_dir:
        settings_kwargs["data_dir"] = args.data_dir
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    # Setup logging based on verbosity
    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help and --version stay fast
    from .app import create_store
    from .cli.commands import COMMANDS

    store = create_store(settings)
    exit_code = COMMANDS[args.command](store, args)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()

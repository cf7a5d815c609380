"""Command-line interface for the task tracker."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from platformdirs import user_data_path

from wimm.app import App
from wimm.errors import DbError, WimmError

log = logging.getLogger(__name__)


class ActionKind(Enum):
    START = "start"
    LIST = "list"
    ADD = "add"
    DELETE = "remove"
    COMPLETE = "complete"
    PAUSE = "pause"


@dataclass(frozen=True)
class Action:
    """A command to perform; ``argument`` is a task name or ID, if any."""

    kind: ActionKind
    argument: str | None = None


@dataclass(frozen=True)
class Args:
    action: Action
    db_path: Path
    force_init: bool


def default_db_path():
    """The database path in the user's data directory, or ``None``."""
    data_dir = user_data_path("wimm", "wimm")
    return data_dir / "wimm.db" if data_dir else None


_SUBCOMMANDS = [
    (ActionKind.ADD, "a", "add a new task", "task", "name of the task"),
    (ActionKind.START, "s", "start a new task", "id", "ID of the task"),
    (ActionKind.DELETE, "rm", "remove a task", "id", "ID of the task"),
    (ActionKind.LIST, "ls", "list all tasks", None, None),
    (ActionKind.COMPLETE, "c", "complete a task", "id", "ID of the task"),
    (ActionKind.PAUSE, "p", "pause a task", "id", "ID of the task"),
]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wimm")
    parser.add_argument("--db", type=Path, metavar="DB_PATH", help="Path to the database file")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Force initialization, overwriting existing database",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for kind, alias, about, arg_name, arg_help in _SUBCOMMANDS:
        sub = subparsers.add_parser(kind.value, aliases=[alias], help=about)
        sub.set_defaults(kind=kind, arg_name=arg_name)
        if arg_name:
            sub.add_argument(arg_name, metavar=arg_name.upper(), help=arg_help)
    return parser


def parse_args(argv=None):
    """Parse command-line arguments (without the program name)."""
    namespace = _build_parser().parse_args(argv)
    db_path = namespace.db if namespace.db is not None else default_db_path()
    if db_path is None:
        raise DbError("No DB path specified")
    log.debug("Using database path: %s", db_path)
    argument = getattr(namespace, namespace.arg_name) if namespace.arg_name else None
    return Args(
        action=Action(namespace.kind, argument),
        db_path=db_path,
        force_init=namespace.force,
    )


def run(argv=None):
    args = parse_args(argv)
    log.debug("Parsed arguments: %r", args)
    task_arg = args.action.argument
    with App(args.db_path, args.force_init) as app:
        match args.action.kind:
            case ActionKind.START:
                app.start_task(task_arg)
                print(f"Started task ID: {task_arg}")
            case ActionKind.LIST:
                tasks = app.get_tasks()
                if not tasks:
                    print("No tasks found.")
                for task in tasks:
                    print(task)
            case ActionKind.ADD:
                task_id = app.add_task(task_arg)
                print(f"Added task: {task_id}")
            case ActionKind.DELETE:
                app.delete_task(task_arg)
                print(f"Deleted task: {task_arg}")
            case ActionKind.COMPLETE:
                app.complete_task(task_arg)
                print(f"Completed task: {task_arg}")
            case ActionKind.PAUSE:
                app.pause_task(task_arg)
                print(f"Pause task: {task_arg}")


def _configure_logging() -> None:
    level = logging.getLevelName(os.environ.get("WIMM_LOG", "WARNING").upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level)


def main(argv=None):
    _configure_logging()
    try:
        run(argv)
    except WimmError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
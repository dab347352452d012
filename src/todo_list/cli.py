"""Command line interface for the todo list."""

from __future__ import annotations

import argparse
import logging
import sys

import structlog

from .commands import TodoIndexError, TodoList
from .config import get_settings
from .logging_config import configure_logging
from .store import StorageError, TodoStore

logger = structlog.get_logger(__name__)


def _index(value: str) -> int:
    try:
        idx = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid index: {value!r}") from None
    if idx < 0:
        raise argparse.ArgumentTypeError(f"index must be non-negative: {value}")
    return idx


def build_parser(prog_name: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog_name, description="Manage a todo list.")
    parser.add_argument("-f", "--file", help="path of the JSON storage file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True, metavar="command")

    add_p = sub.add_parser("add", help="add a new todo")
    add_p.add_argument("description")

    rm_p = sub.add_parser("remove", help="remove a todo by its 0-based index")
    rm_p.add_argument("index", type=_index)

    sub.add_parser("list", help="list all todos")

    comp_p = sub.add_parser("complete", help="mark a todo as completed")
    comp_p.add_argument("index", type=_index)
    return parser


def _dispatch(todo: TodoList, args: argparse.Namespace) -> None:
    if args.cmd == "add":
        added = todo.add(args.description)
        print(f"Added: {added.description}")
    elif args.cmd == "remove":
        removed = todo.remove(args.index)
        print(f"Removed: {removed.description}")
    elif args.cmd == "list":
        for line in todo.lines():
            print(line)
    elif args.cmd == "complete":
        done = todo.complete(args.index)
        print(f"Task '{done.description}' marked as complete!")


def main(argv: list[str] | None = None, prog_name: str | None = None) -> int:
    parser = build_parser(prog_name)
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(logging.DEBUG if args.verbose else settings.log_level)
    store = TodoStore(args.file or settings.storage_path)
    logger.debug("command_start", cmd=args.cmd, path=str(store.path))

    try:
        _dispatch(TodoList(store), args)
    except TodoIndexError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except StorageError as e:
        logger.debug("storage_failed", path=str(e.path))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

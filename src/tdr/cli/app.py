"""CLI application entry point and command routing for tdr.

This module is the **sole error boundary** for the entire application.
It catches :class:`~tdr.exceptions.TdrError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* Task semantics live in :mod:`tdr.core.commands`; this module only
  parses, dispatches, prints, and decides whether to persist.
* One invocation runs one command: load → apply → save (if mutated).
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from tdr.cli import exit_codes
from tdr.cli.console import console, err_console, escape_markup
from tdr.core.commands import TaskScope, subtask_scope, task_scope
from tdr.core.protocols import TaskRepository
from tdr.exceptions import TdrError
from tdr.infra.json_store import JsonTaskStore
from tdr.infra.paths import StorageConfig
from tdr.logging_setup import setup_logging
from tdr.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_scope_commands(subparsers: argparse._SubParsersAction, noun: str) -> None:
    """Register the eight per-scope commands on *subparsers*."""
    add = subparsers.add_parser("add", help=f"Add a new {noun}.")
    add.add_argument("text", help=f"The text of the {noun}.")

    edit = subparsers.add_parser("edit", help=f"Replace the text of a {noun}.")
    edit.add_argument("id", type=int, help=f"The number of the {noun} to edit.")
    edit.add_argument("text", help="The new text.")

    for name, verb in (
        ("complete", "Complete"),
        ("uncomplete", "Uncomplete"),
        ("get", "Show"),
        ("remove", "Remove"),
    ):
        cmd = subparsers.add_parser(name, help=f"{verb} a {noun}.")
        cmd.add_argument("id", type=int, help=f"The number of the {noun}.")

    subparsers.add_parser("list", help=f"List all {noun}s.")
    subparsers.add_parser("clear", help=f"Remove all {noun}s.")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``tdr <command> [args]``                 — operate on tasks
    * ``tdr subtask <id> <command> [args]``    — operate on one task's subtasks
    * ``tdr --version``
    """
    parser = argparse.ArgumentParser(
        prog="tdr",
        description="Personal task tracker.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )

    commands = parser.add_subparsers(dest="command", metavar="<command>")
    _add_scope_commands(commands, "task")

    subtask = commands.add_parser("subtask", help="Operate on the subtasks of a task.")
    subtask.add_argument("parent", type=int, metavar="id", help="The number of the parent task.")
    subtask_commands = subtask.add_subparsers(
        dest="subcommand",
        metavar="<command>",
        required=True,
    )
    _add_scope_commands(subtask_commands, "subtask")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _label(scope: TaskScope, position: int) -> str:
    if scope.parent is None:
        return f"task {position}"
    return f"subtask {position} of task {scope.parent}"


def _print_entries(scope: TaskScope) -> None:
    for position, task in scope.entries():
        console.print(f"{position}: {task.render()}", markup=False)
        if scope.parent is None:
            for sub_position, subtask in enumerate(task.subtasks, start=1):
                console.print(f"  {sub_position}: {subtask.render()}", markup=False)


def _apply(command: str, args: argparse.Namespace, scope: TaskScope) -> bool:
    """Run *command* against *scope* and print its result.

    Returns
    -------
    bool
        ``True`` when the scope was mutated and must be persisted.
    """
    if command == "add":
        position, _task = scope.add(args.text)
        if scope.parent is None:
            message = f"Added task {position} with text {args.text}"
        else:
            message = f"Added subtask {position} to task {scope.parent} with text {args.text}"
        console.print(message, markup=False)
        return True

    if command == "edit":
        scope.edit(args.id, args.text)
        console.print(f"Edited {_label(scope, args.id)}", markup=False)
        return True

    if command == "complete":
        scope.complete(args.id)
        console.print(f"Completed {_label(scope, args.id)}", markup=False)
        return True

    if command == "uncomplete":
        scope.uncomplete(args.id)
        console.print(f"Uncompleted {_label(scope, args.id)}", markup=False)
        return True

    if command == "remove":
        scope.remove(args.id)
        console.print(f"Removed {_label(scope, args.id)}", markup=False)
        return True

    if command == "get":
        console.print(scope.get(args.id).render(), markup=False)
        return False

    if command == "list":
        _print_entries(scope)
        return False

    if command == "clear":
        scope.clear()
        if scope.parent is None:
            console.print("Cleared all tasks")
        else:
            console.print(f"Cleared all subtasks of task {scope.parent}")
        return True

    raise ValueError(f"Unknown command: {command}")


def _handle_command(args: argparse.Namespace, store: TaskRepository) -> int:
    """Load the task list, apply one command, and persist if it changed."""
    store.open_or_create()
    task_list = store.load()

    if args.command == "subtask":
        scope = subtask_scope(task_list, args.parent)
        command: str = args.subcommand
    else:
        scope = task_scope(task_list)
        command = args.command

    logger.debug("Running %r on %s", command, "tasks" if scope.parent is None else "subtasks")
    if _apply(command, args, scope):
        store.save(task_list)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    config: StorageConfig | None = None,
) -> int:
    """Run the tdr CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    config:
        Storage location.  When ``None``, :meth:`StorageConfig.default`
        resolves the per-OS data directory.  Injecting a config enables
        deterministic testing without touching the real home directory.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    if args.command is None:
        console.print("No command specified")
        return exit_codes.SUCCESS

    store = JsonTaskStore(config if config is not None else StorageConfig.default())
    return _handle_command(args, store)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(
    argv: list[str] | None = None,
    *,
    config: StorageConfig | None = None,
) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv, config=config)
        sys.exit(code)
    except TdrError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

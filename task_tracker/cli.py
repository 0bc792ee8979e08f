"""Command-line interface for task-tracker.

This module provides the CLI interface for managing tasks using argparse.
It supports the following commands:
- add: Create a new task
- list: List all tasks or filter by status
- delete: Delete a task
- update: Change a task's description and/or status
- mark-done: Mark a task as done
- mark-in-progress: Mark a task as in progress

Any other invocation prints the help text.
"""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from colorama import just_fix_windows_console

from task_tracker.config import load_settings
from task_tracker.console import format_task, print_error, print_success
from task_tracker.errors import TaskTrackerError, ValidationError
from task_tracker.logging_setup import setup_logging
from task_tracker.models import Status, parse_task_id
from task_tracker.repository import TaskRepository
from task_tracker.storage import JsonStorage

logger = logging.getLogger(__name__)

STATUS_CHOICES = ", ".join(status.value for status in Status)


class TaskArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments as ValidationError."""

    def error(self, message: str):
        raise ValidationError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--file",
        metavar="PATH",
        help="Path to the task store (default: $TASK_DB_PATH or tasks.json)",
    )
    common.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    parser = TaskArgumentParser(
        prog="task-cli",
        description="Track tasks in a local JSON file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    add_parser = subparsers.add_parser("add", parents=[common], help="Add a new task")
    add_parser.add_argument("description", nargs="?", help="Task description")
    add_parser.add_argument(
        "status",
        nargs="?",
        default=Status.TODO.value,
        help=f"Initial status: {STATUS_CHOICES} (default: todo)",
    )

    list_parser = subparsers.add_parser("list", parents=[common], help="List tasks")
    list_parser.add_argument(
        "status", nargs="?", help=f"Only show tasks with this status: {STATUS_CHOICES}"
    )

    delete_parser = subparsers.add_parser(
        "delete", parents=[common], help="Delete a task"
    )
    delete_parser.add_argument("id", nargs="?", help="Task ID")

    update_parser = subparsers.add_parser(
        "update", parents=[common], help="Update a task"
    )
    update_parser.add_argument("id", nargs="?", help="Task ID")
    update_parser.add_argument("--description", help="New description")
    update_parser.add_argument("--status", help=f"New status: {STATUS_CHOICES}")

    done_parser = subparsers.add_parser(
        "mark-done", parents=[common], help="Mark a task as done"
    )
    done_parser.add_argument("id", nargs="?", help="Task ID")

    progress_parser = subparsers.add_parser(
        "mark-in-progress", parents=[common], help="Mark a task as in progress"
    )
    progress_parser.add_argument("id", nargs="?", help="Task ID")

    return parser


def cmd_add(args: argparse.Namespace, repo: TaskRepository) -> int:
    """Handle the 'add' command.

    Args:
        args: Parsed command-line arguments
        repo: TaskRepository instance

    Returns:
        Exit code (0 for success)
    """
    task = repo.add(args.description, args.status)
    print_success(f"Task added: #{task.id} {task.description} ({task.status.value})")
    return 0


def cmd_list(args: argparse.Namespace, repo: TaskRepository) -> int:
    """Handle the 'list' command.

    Args:
        args: Parsed command-line arguments
        repo: TaskRepository instance

    Returns:
        Exit code (0 for success)
    """
    tasks = repo.list_tasks(status=args.status)

    if not tasks:
        print("No tasks found.")
        return 0

    for task in tasks:
        print(format_task(task, sys.stdout))

    return 0


def cmd_delete(args: argparse.Namespace, repo: TaskRepository) -> int:
    """Handle the 'delete' command.

    Deleting an ID that does not exist is reported but is not an error.

    Args:
        args: Parsed command-line arguments
        repo: TaskRepository instance

    Returns:
        Exit code (0 for success)
    """
    task_id = parse_task_id(args.id)

    if repo.delete(task_id):
        print_success(f"Task #{task_id} deleted.")
    else:
        print(f"No task #{task_id}; nothing deleted.")
    return 0


def cmd_update(args: argparse.Namespace, repo: TaskRepository) -> int:
    """Handle the 'update' command.

    Args:
        args: Parsed command-line arguments
        repo: TaskRepository instance

    Returns:
        Exit code (0 for success)
    """
    task = repo.update(args.id, description=args.description, status=args.status)
    print_success(f"Task #{task.id} updated: {task.description} ({task.status.value})")
    return 0


def cmd_mark_done(args: argparse.Namespace, repo: TaskRepository) -> int:
    """Handle the 'mark-done' command.

    Args:
        args: Parsed command-line arguments
        repo: TaskRepository instance

    Returns:
        Exit code (0 for success)
    """
    task = repo.mark_done(args.id)
    print_success(f"Task #{task.id} marked as done: {task.description}")
    return 0


def cmd_mark_in_progress(args: argparse.Namespace, repo: TaskRepository) -> int:
    """Handle the 'mark-in-progress' command.

    Args:
        args: Parsed command-line arguments
        repo: TaskRepository instance

    Returns:
        Exit code (0 for success)
    """
    task = repo.mark_in_progress(args.id)
    print_success(f"Task #{task.id} marked as in-progress: {task.description}")
    return 0


COMMANDS: Dict[str, Callable[[argparse.Namespace, TaskRepository], int]] = {
    "add": cmd_add,
    "list": cmd_list,
    "delete": cmd_delete,
    "update": cmd_update,
    "mark-done": cmd_mark_done,
    "mark-in-progress": cmd_mark_in_progress,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:]

    Returns:
        Exit code (0 for success or help, 1 for any reported error)
    """
    just_fix_windows_console()

    argv = sys.argv[1:] if argv is None else list(argv)
    parser = create_parser()

    if not argv or argv[0] not in COMMANDS:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(argv)
        settings = load_settings(args.file)
        setup_logging("DEBUG" if args.verbose else settings.log_level, settings.log_file)
        logger.debug("Running %s against %s", args.command, settings.db_path)

        repo = TaskRepository(JsonStorage(settings.db_path))
        return COMMANDS[args.command](args, repo)
    except TaskTrackerError as e:
        logger.debug("Command failed", exc_info=True)
        print_error(str(e))
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())

"""Console rendering helpers.

Colors are emitted only when the target stream is a terminal and NO_COLOR
is not set, so piped output and captured test output stay plain.
"""

import os
import sys
from datetime import datetime
from typing import Optional, TextIO

from colorama import Fore, Style

from task_tracker.models import Status, Task

ERROR_MARKER = "✖"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

STATUS_ICONS = {
    Status.TODO: " ",
    Status.IN_PROGRESS: "~",
    Status.DONE: "✓",
}

STATUS_COLORS = {
    Status.TODO: Fore.CYAN,
    Status.IN_PROGRESS: Fore.YELLOW,
    Status.DONE: Fore.GREEN,
}


def use_color(stream: Optional[TextIO] = None) -> bool:
    """Return True if ANSI colors should be written to stream."""
    if os.environ.get("NO_COLOR") is not None:
        return False
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def colorize(text: str, color: str, stream: Optional[TextIO] = None) -> str:
    """Wrap text in a colorama color when the stream supports it."""
    if not use_color(stream):
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def format_timestamp(ms: int) -> str:
    """Render an epoch-milliseconds timestamp in local time."""
    return datetime.fromtimestamp(ms / 1000).strftime(TIME_FORMAT)


def format_task(task: Task, stream: Optional[TextIO] = None) -> str:
    """Render a task as a single line for the list command."""
    icon = STATUS_ICONS[task.status]
    status = colorize(f"({task.status.value})", STATUS_COLORS[task.status], stream)
    return (
        f"[{icon}] #{task.id} {task.description} {status}"
        f"  created: {format_timestamp(task.created_at)}"
        f"  updated: {format_timestamp(task.updated_at)}"
    )


def print_success(message: str) -> None:
    """Print a confirmation line to stdout, in green on a terminal.

    Args:
        message: Text to print
    """
    print(colorize(message, Fore.GREEN, sys.stdout))


def print_error(message: str) -> None:
    """Print a single-line error with the error marker to stderr."""
    line = f"{ERROR_MARKER} Error: {message}"
    print(colorize(line, Fore.RED + Style.BRIGHT, sys.stderr), file=sys.stderr)

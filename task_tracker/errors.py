"""Error types raised by task-tracker.

Every failure the CLI reports derives from TaskTrackerError, so the entry
point can catch one base class and print a single-line message.
"""


class TaskTrackerError(Exception):
    """Base exception for task-tracker errors."""

    exit_code: int = 1


class ValidationError(TaskTrackerError):
    """Raised when a command argument is missing or malformed."""


class NotFoundError(TaskTrackerError):
    """Raised when an update or mark operation references an unknown task ID."""

    def __init__(self, task_id: int):
        super().__init__(f"Task #{task_id} not found.")
        self.task_id = task_id


class StateError(TaskTrackerError):
    """Raised when a task already holds the status it is being moved to."""


class ParseError(TaskTrackerError):
    """Raised when the store file is not a valid JSON array of tasks."""


class StorageError(TaskTrackerError):
    """Raised when the store file cannot be read or written."""

"""Core models for task-tracker.

This module defines the core data structures for task tracking:
- Task: A dataclass representing a task with its properties
- Status: Enum for the task's workflow state
- validate_status / parse_task_id: shared argument validation
"""

import re
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from task_tracker.errors import ValidationError

TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class Status(Enum):
    """Task workflow status."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


def now_ms() -> int:
    """Return the current time as milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass
class Task:
    """Task model representing a single task item.

    Attributes:
        id: Unique identifier for the task (assigned by the repository)
        description: What the task is about
        status: Current workflow status of the task
        created_at: Creation time in epoch milliseconds, never changed
        updated_at: Time of the last change in epoch milliseconds
    """

    description: str
    status: Status = Status.TODO
    id: Optional[int] = None
    created_at: int = field(default_factory=now_ms)
    updated_at: int = field(default_factory=now_ms)

    def touch(self) -> None:
        """Refresh updated_at, keeping it strictly increasing."""
        self.updated_at = max(now_ms(), self.updated_at + 1)


def validate_status(value: Any) -> Status:
    """Convert a raw status value into a Status.

    Only the exact strings "todo", "in-progress" and "done" are accepted;
    there is no case folding or whitespace trimming.

    Raises:
        ValidationError: If the value is not a recognized status
    """
    if isinstance(value, Status):
        return value
    for status in Status:
        if value == status.value:
            return status
    choices = ", ".join(s.value for s in Status)
    raise ValidationError(f"Invalid status '{value}'. Expected one of: {choices}")


def parse_task_id(value: Any) -> int:
    """Convert a raw task ID argument into an int.

    Raises:
        ValidationError: If the value is missing or not an integer
    """
    if value is None or value == "":
        raise ValidationError("Task ID is required.")
    if isinstance(value, bool):
        raise ValidationError(f"Task ID must be an integer, got '{value}'.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if TASK_ID_PATTERN.fullmatch(text):
            return int(text)
    raise ValidationError(f"Task ID must be an integer, got '{value}'.")

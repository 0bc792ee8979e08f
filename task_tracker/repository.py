"""Task repository for managing task operations.

This module provides a high-level TaskRepository class that manages tasks
using the storage layer. Every operation loads the full collection, and
mutating operations save the full collection back.

Deleting an unknown ID is a no-op, while updating or marking an unknown ID
raises NotFoundError.
"""

import logging
from typing import Any, List, Optional

from task_tracker.errors import NotFoundError, StateError, ValidationError
from task_tracker.models import Status, Task, now_ms, parse_task_id, validate_status
from task_tracker.storage import Storage

logger = logging.getLogger(__name__)


def _find(tasks: List[Task], task_id: int) -> Optional[Task]:
    for task in tasks:
        if task.id == task_id:
            return task
    return None


class TaskRepository:
    """Repository for managing tasks with a storage backend.

    Attributes:
        storage: Storage backend for persisting tasks
    """

    def __init__(self, storage: Storage):
        """Initialize TaskRepository with a storage backend.

        Args:
            storage: Storage implementation to use
        """
        self.storage = storage

    def add(self, description: Optional[str], status: Any = Status.TODO.value) -> Task:
        """Create a new task.

        Args:
            description: Task description, must not be empty
            status: Initial status (default: todo)

        Returns:
            The created Task object with assigned ID

        Raises:
            ValidationError: If description is empty or status is invalid
        """
        if not description:
            raise ValidationError("Task description is required.")
        task_status = validate_status(status)

        tasks = self.storage.load()

        # Next ID follows the highest existing ID, not the task count
        next_id = max((task.id for task in tasks), default=0) + 1

        timestamp = now_ms()
        task = Task(
            id=next_id,
            description=description,
            status=task_status,
            created_at=timestamp,
            updated_at=timestamp,
        )

        tasks.append(task)
        self.storage.save(tasks)

        logger.info("Added task #%d (%s)", task.id, task.status.value)
        return task

    def list_tasks(self, status: Any = None) -> List[Task]:
        """Get all tasks, optionally filtered by status.

        Args:
            status: Optional status filter. If provided, only tasks with
                   exactly this status are returned.

        Returns:
            List of Task objects, sorted by ID descending

        Raises:
            ValidationError: If the status filter is not a recognized status
        """
        tasks = self.storage.load()

        if status is not None:
            wanted = validate_status(status)
            tasks = [task for task in tasks if task.status == wanted]

        return sorted(tasks, key=lambda task: task.id, reverse=True)

    def get_task(self, task_id: Any) -> Optional[Task]:
        """Get a specific task by ID.

        Returns:
            Task object if found, None otherwise
        """
        return _find(self.storage.load(), parse_task_id(task_id))

    def delete(self, task_id: Any) -> bool:
        """Delete a task by ID.

        The collection is saved even when no task matches.

        Returns:
            True if a task was removed, False if no task had that ID

        Raises:
            ValidationError: If task_id is missing or not an integer
        """
        wanted = parse_task_id(task_id)
        tasks = self.storage.load()

        remaining = [task for task in tasks if task.id != wanted]
        self.storage.save(remaining)

        removed = len(remaining) != len(tasks)
        if removed:
            logger.info("Deleted task #%d", wanted)
        else:
            logger.info("Delete of task #%d matched nothing", wanted)
        return removed

    def update(
        self,
        task_id: Any,
        description: Optional[str] = None,
        status: Any = None,
    ) -> Task:
        """Update the description and/or status of a task.

        Empty or missing values leave the corresponding field untouched.

        Returns:
            The updated Task object

        Raises:
            ValidationError: If task_id is invalid or status is not recognized
            NotFoundError: If no task has that ID
        """
        wanted = parse_task_id(task_id)
        new_status = validate_status(status) if status else None

        tasks = self.storage.load()
        task = _find(tasks, wanted)
        if task is None:
            raise NotFoundError(wanted)

        if description:
            task.description = description
        if new_status is not None:
            task.status = new_status
        task.touch()

        self.storage.save(tasks)

        logger.info("Updated task #%d", task.id)
        return task

    def mark_done(self, task_id: Any) -> Task:
        """Mark a task as done.

        Raises:
            NotFoundError: If no task has that ID
            StateError: If the task is already done
        """
        return self._transition(task_id, Status.DONE)

    def mark_in_progress(self, task_id: Any) -> Task:
        """Mark a task as in progress.

        Raises:
            NotFoundError: If no task has that ID
            StateError: If the task is already in progress
        """
        return self._transition(task_id, Status.IN_PROGRESS)

    def _transition(self, task_id: Any, target: Status) -> Task:
        wanted = parse_task_id(task_id)
        tasks = self.storage.load()

        task = _find(tasks, wanted)
        if task is None:
            raise NotFoundError(wanted)
        if task.status == target:
            raise StateError(f"Task #{wanted} is already {target.value}.")

        task.status = target
        task.touch()
        self.storage.save(tasks)

        logger.info("Task #%d marked %s", task.id, target.value)
        return task

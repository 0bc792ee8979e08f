"""Storage layer for task-tracker.

This module provides an abstract storage interface and a JSON file
implementation. The whole collection is loaded and saved at once; the file
always holds a JSON array of task records, written with 4-space indentation.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union

from task_tracker.errors import ParseError, StorageError
from task_tracker.models import Status, Task

logger = logging.getLogger(__name__)

EMPTY_STORE = "[]"


class Storage(ABC):
    """Abstract base class for task storage implementations."""

    @abstractmethod
    def ensure_exists(self) -> None:
        """Create an empty store if none exists yet."""
        pass

    @abstractmethod
    def load(self) -> List[Task]:
        """Load tasks from storage.

        Returns:
            List of Task objects in stored order
        """
        pass

    @abstractmethod
    def save(self, tasks: List[Task]) -> None:
        """Replace the stored collection with tasks.

        Args:
            tasks: Full list of Task objects to persist
        """
        pass


def task_to_dict(task: Task) -> Dict[str, Any]:
    """Convert a Task into its JSON record."""
    return {
        "id": task.id,
        "description": task.description,
        "status": task.status.value,
        "createdAt": task.created_at,
        "updatedAt": task.updated_at,
    }


def task_from_dict(record: Any) -> Task:
    """Build a Task from a JSON record.

    Raises:
        ParseError: If the record is missing fields or holds invalid values
    """
    if not isinstance(record, dict):
        raise ParseError(f"Task record must be an object, got {type(record).__name__}")
    try:
        description = record["description"]
        if not isinstance(description, str) or not description:
            raise ParseError(f"Task record has invalid description {description!r}")
        return Task(
            id=_int_field(record, "id"),
            description=description,
            status=Status(record["status"]),
            created_at=_int_field(record, "createdAt"),
            updated_at=_int_field(record, "updatedAt"),
        )
    except KeyError as e:
        raise ParseError(f"Task record is missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise ParseError(f"Task record is invalid: {e}") from e


def _int_field(record: Dict[str, Any], key: str) -> int:
    # bool is an int subclass; JSON true/false is not a valid number here
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"Task record field '{key}' must be an integer, got {value!r}")
    return value


class JsonStorage(Storage):
    """JSON file-based storage implementation.

    Attributes:
        file_path: Path to the JSON storage file
    """

    def __init__(self, file_path: Union[str, Path]):
        """Initialize JsonStorage with a file path.

        Args:
            file_path: Path to the JSON file for storage
        """
        self.file_path = Path(file_path)

    def ensure_exists(self) -> None:
        """Create the file containing an empty array if it does not exist."""
        if self.file_path.exists():
            return
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(EMPTY_STORE, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot create {self.file_path}: {e}") from e
        logger.debug("Created empty store at %s", self.file_path)

    def load(self) -> List[Task]:
        """Load tasks from the JSON file.

        Returns:
            List of Task objects in file order

        Raises:
            ParseError: If the file is not a JSON array of task records
            StorageError: If the file cannot be read
        """
        self.ensure_exists()
        try:
            content = self.file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"{self.file_path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read {self.file_path}: {e}") from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(f"{self.file_path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise ParseError(f"{self.file_path} must contain a JSON array")

        tasks = [task_from_dict(record) for record in data]

        seen = set()
        for task in tasks:
            if task.id in seen:
                raise ParseError(f"{self.file_path} contains duplicate task ID {task.id}")
            seen.add(task.id)

        logger.debug("Loaded %d task(s) from %s", len(tasks), self.file_path)
        return tasks

    def save(self, tasks: List[Task]) -> None:
        """Write tasks to the JSON file, replacing its whole content.

        The data is written to a sibling temporary file first and then moved
        over the target, so the file never holds a partial write.

        Raises:
            StorageError: If the file cannot be written
        """
        self.ensure_exists()
        content = json.dumps(
            [task_to_dict(task) for task in tasks], indent=4, ensure_ascii=False
        )
        tmp_path = self.file_path.with_name(self.file_path.name + ".tmp")
        try:
            tmp_path.write_text(content, encoding="utf-8")
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(f"Cannot write {self.file_path}: {e}") from e
        logger.debug("Saved %d task(s) to %s", len(tasks), self.file_path)

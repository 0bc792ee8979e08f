"""Settings for task-tracker, resolved from arguments and environment.

The store path is resolved once per invocation and handed to JsonStorage;
nothing else reads it from the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

DB_PATH_ENV = "TASK_DB_PATH"
LOG_LEVEL_ENV = "TASK_TRACKER_LOG_LEVEL"
LOG_FILE_ENV = "TASK_TRACKER_LOG_FILE"

DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent / "tasks.json"
DEFAULT_LOG_LEVEL = "WARNING"


def _env(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip()


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = _env(name)
    if raw is None:
        return default
    return Path(raw).expanduser()


@dataclass
class Settings:
    """Resolved configuration for one CLI invocation.

    Attributes:
        db_path: Path to the JSON store file
        log_level: Logging level name for console output
        log_file: Optional file that receives the same log records
    """

    db_path: Path
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None


def load_settings(db_path: Optional[Union[str, Path]] = None) -> Settings:
    """Build Settings from an explicit store path and the environment.

    Args:
        db_path: Store path given on the command line. Takes precedence over
                 TASK_DB_PATH, which takes precedence over the default path
                 next to the installed package.

    Returns:
        Settings instance
    """
    if db_path is not None and str(db_path).strip() != "":
        resolved = Path(db_path).expanduser()
    else:
        resolved = _env_path(DB_PATH_ENV, DEFAULT_DB_PATH)

    return Settings(
        db_path=resolved,
        log_level=(_env(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper(),
        log_file=_env_path(LOG_FILE_ENV, None),
    )

"""Tests for console rendering and logging setup."""

import io
import logging
from datetime import datetime

from colorama import Fore

from task_tracker.console import colorize, format_task, format_timestamp, print_error
from task_tracker.logging_setup import setup_logging
from task_tracker.models import Status, Task


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


class TestConsole:
    """Test suite for console helpers."""

    def test_colorize_plain_when_not_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert colorize("hi", Fore.RED, io.StringIO()) == "hi"

    def test_colorize_on_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        result = colorize("hi", Fore.RED, FakeTTY())
        assert result.startswith(Fore.RED)
        assert "hi" in result

    def test_no_color_disables_colors(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert colorize("hi", Fore.RED, FakeTTY()) == "hi"

    def test_format_timestamp(self):
        ms = int(datetime(2024, 1, 2, 3, 4, 5).timestamp() * 1000)
        assert format_timestamp(ms) == "2024-01-02 03:04:05"

    def test_format_task(self):
        ms = int(datetime(2024, 1, 2, 3, 4, 5).timestamp() * 1000)
        task = Task(id=2, description="pay rent", status=Status.DONE,
                    created_at=ms, updated_at=ms)

        line = format_task(task, io.StringIO())

        assert line.startswith("[✓] #2 pay rent (done)")
        assert "created: 2024-01-02 03:04:05" in line
        assert "updated: 2024-01-02 03:04:05" in line

    def test_format_task_icons(self):
        todo = Task(id=1, description="a", status=Status.TODO)
        doing = Task(id=2, description="b", status=Status.IN_PROGRESS)
        assert format_task(todo, io.StringIO()).startswith("[ ]")
        assert format_task(doing, io.StringIO()).startswith("[~]")

    def test_print_error_has_marker(self, capsys):
        print_error("Task #9 not found.")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.strip() == "✖ Error: Task #9 not found."


class TestSetupLogging:
    """Test suite for setup_logging."""

    def test_level_by_name(self):
        logger = setup_logging("debug")
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        logger = setup_logging("chatty")
        assert logger.level == logging.WARNING

    def test_no_duplicate_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "task.log"
        logger = setup_logging(logging.INFO, log_file)
        logging.getLogger("task_tracker.repository").info("added task")
        for handler in logger.handlers:
            handler.flush()

        assert "added task" in log_file.read_text(encoding="utf-8")
        setup_logging()

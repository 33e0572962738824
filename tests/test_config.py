from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_store import logging_setup
from todo_store.cli import build_parser
from todo_store.config import DEFAULT_TASKS_FILE, Settings


def test_settings_defaults() -> None:
    settings = Settings.from_args(build_parser().parse_args(["list"]))
    assert settings.tasks_file == Path(DEFAULT_TASKS_FILE)
    assert settings.log_level == logging.WARNING
    assert settings.log_file is None


def test_settings_from_flags(tmp_path: Path) -> None:
    args = build_parser().parse_args(
        ["--file", str(tmp_path / "t.txt"), "-v", "--log-file", str(tmp_path / "log" / "todo.log"), "list"]
    )
    settings = Settings.from_args(args)
    assert settings.tasks_file == tmp_path / "t.txt"
    assert settings.log_level == logging.DEBUG
    assert settings.log_file == tmp_path / "log" / "todo.log"


def test_setup_logging_writes_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    log_file = tmp_path / "logs" / "todo.log"
    try:
        logging_setup.setup_logging(console_level=logging.CRITICAL, log_file=log_file)
        logging.getLogger("todo_store.store").debug("hello %s", "file")
        for handler in root.handlers:
            handler.flush()
        assert "DEBUG todo_store.store: hello file" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_console_filter_keeps_own_records() -> None:
    noise = logging_setup._ConsoleNoiseFilter()

    def record(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert noise.filter(record("todo_store.storage", logging.DEBUG))
    assert not noise.filter(record("urllib3", logging.WARNING))
    assert noise.filter(record("urllib3", logging.ERROR))

"""Tests for the logger factory."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from uuid import uuid4

import pytest

from valentine.utilities.logging import _sanitize_logger_name, get_logger


def _unique_name() -> str:
    return f"valentine.tests.{uuid4().hex}"


@pytest.fixture()
def log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("VALENTINE_LOG_DIR", str(tmp_path / "logs"))
    return tmp_path / "logs"


class TestGetLogger:
    """Keep logging off the screen while the heart owns the terminal."""

    def test_writes_to_rotating_file_only_by_default(
        self, log_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("VALENTINE_LOG_TO_STDERR", raising=False)
        name = _unique_name()

        logger = get_logger(name)

        assert [type(handler) for handler in logger.handlers] == [RotatingFileHandler]
        assert (log_dir / f"{_sanitize_logger_name(name)}.log").exists()
        assert logger.propagate is False

    def test_adds_stream_handler_on_request(
        self, log_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("VALENTINE_LOG_TO_STDERR", "1")

        logger = get_logger(_unique_name())

        assert [type(handler) for handler in logger.handlers] == [
            logging.StreamHandler,
            RotatingFileHandler,
        ]

    def test_respects_log_level(self, log_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert get_logger(_unique_name()).level == logging.DEBUG

    def test_existing_handlers_are_kept(self, log_dir: Path) -> None:
        name = _unique_name()
        first = get_logger(name)
        handlers = list(first.handlers)

        assert get_logger(name).handlers == handlers

    def test_repeated_calls_refresh_level_only(
        self, log_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        name = _unique_name()
        monkeypatch.setenv("LOG_LEVEL", "info")
        handlers = list(get_logger(name).handlers)

        monkeypatch.setenv("LOG_LEVEL", "warning")
        logger = get_logger(name)

        assert logger.handlers == handlers
        assert logger.level == logging.WARNING

    def test_sanitize_logger_name(self) -> None:
        assert _sanitize_logger_name("valentine.runtime.game_loop") == "valentine_runtime_game_loop"
        assert _sanitize_logger_name("") == "root"

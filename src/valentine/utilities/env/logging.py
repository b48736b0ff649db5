import os
from pathlib import Path

from valentine.utilities.env.parsing import _env_choice, _env_flag

DEFAULT_LOG_SUBDIR = Path(".valentine") / "logs"
LOG_LEVEL_CHOICES = {"debug", "info", "warning", "error", "critical"}


class LoggingConfiguration:
    @classmethod
    def log_level(cls) -> str:
        return _env_choice(
            "LOG_LEVEL", default="info", choices=LOG_LEVEL_CHOICES
        ).upper()

    @classmethod
    def log_directory(cls) -> Path:
        log_dir = os.environ.get("VALENTINE_LOG_DIR")
        if log_dir:
            return Path(log_dir).expanduser()
        return Path.home() / DEFAULT_LOG_SUBDIR

    @classmethod
    def log_to_stderr(cls) -> bool:
        # curses owns the screen while the heart is drawn
        return _env_flag("VALENTINE_LOG_TO_STDERR")

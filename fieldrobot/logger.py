"""Process-wide log file under ``$ILVO_PATH/logs`` with one-step size rotation."""

from __future__ import annotations

import os
import shutil
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import ClassVar

__all__ = ["LogLevel", "LoggerStream", "LOG_FILE_MAX_SIZE"]

LOG_FILE_MAX_SIZE = 10 * 1024 * 1024


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class LoggerStream:
    """Appends timestamped entries to ``<name>.log``, optionally echoing to stdout."""

    _instance: ClassVar[LoggerStream | None] = None

    def __init__(self, name: str, terminal_output: bool = False) -> None:
        base = os.environ.get("ILVO_PATH")
        if base is None:
            raise RuntimeError("environment variable ILVO_PATH is not set")
        self.name = name
        self.terminal_output = terminal_output
        self.log_dir = Path(base) / "logs"
        self.path = self.log_dir / f"{name}.log"
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self._rotate()
        self._file = open(self.path, "a", encoding="utf-8")

    def _rotate(self) -> None:
        if self.path.exists() and self.path.stat().st_size > LOG_FILE_MAX_SIZE:
            backup = self.path.with_name(self.path.name + "1")
            if backup.exists():
                backup.unlink()
            shutil.copyfile(self.path, backup)
            self.path.unlink()

    @classmethod
    def create_instance(cls, name: str, terminal_output: bool = False) -> LoggerStream:
        """Create the shared logger, replacing any earlier one."""
        cls._instance = cls(name, terminal_output)
        return cls._instance

    @classmethod
    def get_instance(cls) -> LoggerStream:
        if cls._instance is None:
            raise RuntimeError("Logger not initialized")
        return cls._instance

    def log(self, level: LogLevel, message: str) -> None:
        """Write one entry on a new line."""
        now = datetime.now()
        header = (
            f"\n[{now.strftime('%a %Y %b %d %H:%M:%S')}.{now.microsecond // 1000:03d}]"
            f"[{level.value}] "
        )
        entry = header + str(message)
        self._file.write(entry)
        self._file.flush()
        if self.terminal_output:
            sys.stdout.write(entry)
            sys.stdout.flush()

    def close(self) -> None:
        """Close the file; a closed shared logger is no longer the shared one."""
        if not self._file.closed:
            self._file.close()
        if LoggerStream._instance is self:
            LoggerStream._instance = None

    def __enter__(self) -> LoggerStream:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
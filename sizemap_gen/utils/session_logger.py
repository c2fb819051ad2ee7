"""
Session Logger for tracking prompt and launcher events.

Supports configurable log levels (NONE, INFO, DEBUG) and dual output:
- Console: Human-readable lines on stderr (stdout carries prompts and JSON)
- File: JSON Lines format for parsing and analysis
"""

import json
import os
import sys
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from dotenv import load_dotenv


class LogLevel(Enum):
    """Logging levels for session output."""

    NONE = 0
    INFO = 1
    DEBUG = 2


class SessionLogger:
    """Centralized logger for generator and launcher sessions."""

    _instance: Optional["SessionLogger"] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the logger with configuration from environment."""
        if self._initialized:
            return

        load_dotenv()
        self.configure()
        self.session_id = str(uuid.uuid4())
        self._initialized = True

    def configure(
        self,
        level: Optional[str] = None,
        log_to_file: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        (Re)apply configuration, falling back to environment variables.

        Args:
            level: NONE, INFO or DEBUG (default: SIZEMAP_DEBUG_LEVEL).
            log_to_file: Whether to append JSON Lines (default: SIZEMAP_LOG_TO_FILE).
            log_dir: Directory for log files (default: SIZEMAP_LOG_DIR).
            stream: Console stream (default: stderr at write time).
        """
        level_str = (level or os.getenv("SIZEMAP_DEBUG_LEVEL", "NONE")).upper()
        try:
            self.level = LogLevel[level_str]
        except KeyError:
            self.level = LogLevel.NONE

        if log_to_file is None:
            log_to_file = os.getenv("SIZEMAP_LOG_TO_FILE", "false").lower() == "true"
        self.log_to_file = log_to_file
        self.log_dir = Path(log_dir or os.getenv("SIZEMAP_LOG_DIR", "outputs"))
        self.stream = stream

    @classmethod
    def reset(cls):
        """Drop the singleton so the next instantiation rereads the environment."""
        cls._instance = None

    def _should_log(self, min_level: LogLevel) -> bool:
        """Check if we should log at the given level."""
        return self.level.value >= min_level.value

    def _format_timestamp(self) -> str:
        """Get ISO8601 formatted timestamp."""
        return datetime.now().isoformat()

    def _format_console(self, component: str, event: str, details: Dict[str, Any]) -> str:
        parts = [f"[{component}]", event]
        parts.extend(f"{key}={value}" for key, value in details.items())
        return " | ".join(parts)

    def _write_to_file(self, log_entry: Dict[str, Any]):
        """Write log entry to JSON Lines file."""
        if not self.log_to_file:
            return

        log_file = self.log_dir / "logs" / "sessions.jsonl"
        log_file.parent.mkdir(parents=True, exist_ok=True)

        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")

    def _log(self, min_level: LogLevel, component: str, event: str, **details: Any):
        if not self._should_log(min_level):
            return

        stream = self.stream or sys.stderr
        print(self._format_console(component, event, details), file=stream)

        self._write_to_file({
            "timestamp": self._format_timestamp(),
            "session_id": self.session_id,
            "level": min_level.name,
            "component": component,
            "event": event,
            "details": details,
        })

    def info(self, component: str, event: str, **details: Any):
        """Log an event at INFO level."""
        self._log(LogLevel.INFO, component, event, **details)

    def debug(self, component: str, event: str, **details: Any):
        """Log an event at DEBUG level."""
        self._log(LogLevel.DEBUG, component, event, **details)


def get_logger() -> SessionLogger:
    """Get the singleton SessionLogger instance."""
    return SessionLogger()

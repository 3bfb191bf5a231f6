# hvac_mock/logging_system.py
"""
Logging configuration for the HVAC telemetry generator.

Provides:
- Plain console logging for interactive runs
- JSON-lines file logging with rotation for unattended runs
- Structured log entries carrying record/run context

Modules obtain their logger with ``logging.getLogger(__name__)``;
this module only decides where those records end up.
"""

import json
import logging
import logging.handlers
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

__all__ = [
    "CONSOLE_FORMAT",
    "LogEntry",
    "JSONFormatter",
    "configure_logging",
]

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Rotating file handler limits (10MB max, 5 backups)
_MAX_LOG_BYTES = 10 * 1024 * 1024
_BACKUP_COUNT = 5


# ----------------------------------------------------------------
# Structured Log Entry
# ----------------------------------------------------------------


@dataclass
class LogEntry:
    """Structured log entry written by JSONFormatter."""

    wall_time: float
    level: str
    logger: str
    message: str

    # Context
    module: str = ""
    function: str = ""

    # Additional data
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialisation."""
        entry_dict = {
            "wall_time": self.wall_time,
            "level": self.level,
            "logger": self.logger,
            "message": self.message,
        }

        if self.module:
            entry_dict["module"] = self.module
        if self.function:
            entry_dict["function"] = self.function
        if self.data:
            entry_dict["data"] = self.data

        return entry_dict

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), default=str)


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = LogEntry(
            wall_time=record.created,
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
            module=record.module,
            function=record.funcName,
        )

        # Extra context passed via logger.info(..., extra={"data": {...}})
        extra_data = getattr(record, "data", None)
        if isinstance(extra_data, dict):
            entry.data.update(extra_data)

        if record.exc_info:
            entry.data["exception"] = self.formatException(record.exc_info)

        return entry.to_json()


# ----------------------------------------------------------------
# Global configuration
# ----------------------------------------------------------------


def configure_logging(
    level: int | str = logging.INFO,
    log_dir: Path | str | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Configure root logging for a generator run.

    Replaces any handlers previously installed on the root logger so that
    repeated calls (tests, multiple runs in one process) do not duplicate
    output.

    Args:
        level: Logging level name or number
        log_dir: Directory for the rotating JSON log file (None = console only)
        json_format: Emit JSON on the console instead of plain text

    Returns:
        The configured root logger
    """
    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric_level

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(
        JSONFormatter() if json_format else logging.Formatter(CONSOLE_FORMAT)
    )
    root.addHandler(console)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path / "generator.json.log",
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_BACKUP_COUNT,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        root.addHandler(file_handler)

    return root

"""Structured logging utilities for Flowdock."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List

__all__ = ["JSONFormatter", "LOG_FILENAME", "setup_structured_logging"]

LOG_FILENAME = "flowdock.jsonl"
_PACKAGE_LOGGER = "flowdock"
_NOISY_THIRD_PARTY_LOGGERS = (
    "urllib3",
    "docker",
    "docker.utils",
    "docker.auth",
    "docker.api",
)


# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with ``extra=`` fields inlined."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": _to_iso_millis(datetime.fromtimestamp(record.created, timezone.utc)),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, _json_safe(value))
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_structured_logging(
    logs_dir: Path,
    level: str = "INFO",
    debug: bool = False,
    quiet: bool = False,
) -> Path:
    """Configure JSONL file logging plus an optional stderr console handler.

    Returns the path of the log file.
    """
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / LOG_FILENAME

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG if debug else _level_value(level))
    file_handler.setFormatter(JSONFormatter())

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.DEBUG)
    package_logger.propagate = False
    package_logger.addHandler(file_handler)
    for handler in _build_console_handlers(debug=debug, quiet=quiet):
        package_logger.addHandler(handler)

    _limit_third_party_noise()
    return log_file


def _level_value(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def _build_console_handlers(*, debug: bool, quiet: bool) -> List[logging.Handler]:
    if quiet:
        return []
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    return [console_handler]


def _limit_third_party_noise() -> None:
    for name in _NOISY_THIRD_PARTY_LOGGERS:
        noisy_logger = logging.getLogger(name)
        noisy_logger.setLevel(logging.WARNING)
        noisy_logger.propagate = False


def _to_iso_millis(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def _json_safe(value: object) -> object:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value

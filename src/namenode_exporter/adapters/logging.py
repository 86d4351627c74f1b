"""Python logging adapter for the exporter.

Converts standard library log records into LogEntry objects and renders
them as logfmt or JSON lines on stderr.
"""

import logging
import sys
import time
import traceback
from typing import TextIO

from namenode_exporter.core.encoding.ndjson import encode_log_entry, encode_logfmt
from namenode_exporter.core.exceptions import ConfigError
from namenode_exporter.core.logs import LOGGER_NAMESPACE
from namenode_exporter.core.models import LogEntry

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["logger", "source"]

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
}

LOG_FORMATS = ("logfmt", "json")


def record_to_log_entry(
    record: logging.LogRecord, include_attrs: list[str] | None = None
) -> LogEntry:
    """Convert a log record into a LogEntry.

    Args:
        record: The log record to convert.
        include_attrs: Record attributes to include. Defaults to
            ["logger", "source"].

    Returns:
        LogEntry carrying extra fields and exception details as attributes.
    """
    # Map of attribute names to their values from LogRecord
    attr_mapping: dict[str, str | int | float | bool] = {
        "logger": record.name,
        "source": f"{record.filename}:{record.lineno}",
        "module": record.module,
        "funcName": record.funcName or "",
        "lineno": record.lineno,
        "pathname": record.pathname,
    }

    attributes: dict[str, str | int | float | bool] = {
        key: attr_mapping[key]
        for key in (include_attrs or _DEFAULT_INCLUDE_ATTRS)
        if key in attr_mapping
    }

    # Add any extra attributes passed via logging call or with_fields()
    for key, value in record.__dict__.items():
        if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
            value, (str, int, float, bool)
        ):
            attributes[key] = value

    if record.exc_info:
        exc_type, exc_value, exc_tb = record.exc_info
        if exc_type is not None:
            attributes["exc_type"] = exc_type.__name__
        if exc_value is not None:
            attributes["exc_message"] = str(exc_value)
        if exc_tb is not None:
            attributes["exc_traceback"] = "".join(
                traceback.format_exception(exc_type, exc_value, exc_tb)
            )

    return LogEntry(
        timestamp=record.created,
        level=record.levelname,
        message=record.getMessage(),
        attributes=attributes,
    )


class LogfmtFormatter(logging.Formatter):
    """Formats records as ``time=... level=... msg=...`` lines."""

    def __init__(self, include_attrs: list[str] | None = None) -> None:
        super().__init__()
        self._include_attrs = include_attrs

    def format(self, record: logging.LogRecord) -> str:
        entry = record_to_log_entry(record, self._include_attrs)
        millis = int(record.msecs)
        stamp = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
        return encode_logfmt(entry, f"{stamp}.{millis:03d}Z")


class JsonFormatter(logging.Formatter):
    """Formats records as one JSON object per line."""

    def __init__(self, include_attrs: list[str] | None = None) -> None:
        super().__init__()
        self._include_attrs = include_attrs

    def format(self, record: logging.LogRecord) -> str:
        return encode_log_entry(record_to_log_entry(record, self._include_attrs))


def configure_logging(
    level: str = "info",
    fmt: str = "logfmt",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install a single stream handler on the exporter's logger tree.

    Calling it again replaces the previously installed handler.

    Args:
        level: One of debug, info, warn, error, fatal.
        fmt: Either "logfmt" or "json".
        stream: Destination stream (default: sys.stderr).

    Returns:
        The installed handler.

    Raises:
        ConfigError: Unknown level or format.
    """
    if level not in LOG_LEVELS:
        raise ConfigError(f"unknown log level {level!r}")
    if fmt not in LOG_FORMATS:
        raise ConfigError(f"unknown log format {fmt!r}")

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if fmt == "json" else LogfmtFormatter())

    root = logging.getLogger(LOGGER_NAMESPACE)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(LOG_LEVELS[level])
    root.propagate = False
    return handler

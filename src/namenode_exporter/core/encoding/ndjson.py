"""JSON-lines and logfmt encoders for log entries."""

import json

from namenode_exporter.core.models import LogEntry


def encode_log_entry(entry: LogEntry) -> str:
    """Encode one log entry as a single JSON line (without newline).

    Args:
        entry: The entry to encode.

    Returns:
        JSON object with timestamp, level, message and attributes.
    """
    obj = {
        "timestamp": entry.timestamp,
        "level": entry.level,
        "message": entry.message,
        "attributes": entry.attributes,
    }
    return json.dumps(obj, default=str)


def _logfmt_value(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value)
    if text == "" or any(c in text for c in ' ="\n\\'):
        return json.dumps(text)
    return text


def encode_logfmt(entry: LogEntry, timestamp: str) -> str:
    """Encode one log entry as a logfmt line.

    Args:
        entry: The entry to encode.
        timestamp: Pre-formatted time value for the ``time`` key.

    Returns:
        ``time=... level=... msg=...`` followed by the attributes in
        insertion order.
    """
    pairs: list[tuple[str, str | int | float | bool]] = [
        ("time", timestamp),
        ("level", entry.level.lower()),
        ("msg", entry.message),
        *entry.attributes.items(),
    ]
    return " ".join(f"{key}={_logfmt_value(value)}" for key, value in pairs)

"""Tests for JSON-lines and logfmt log encoders."""

import json

import pytest

from namenode_exporter.core.encoding.ndjson import encode_log_entry, encode_logfmt
from namenode_exporter.core.models import LogEntry


class TestJsonLineEncoder:
    """Tests for encode_log_entry()."""

    @pytest.mark.encoding
    def test_encode_single_entry(self) -> None:
        """A LogEntry encodes to one JSON object."""
        entry = LogEntry(
            timestamp=1702300000.0,
            level="INFO",
            message="Starting namenode_exporter",
        )

        parsed = json.loads(encode_log_entry(entry))

        assert parsed == {
            "timestamp": 1702300000.0,
            "level": "INFO",
            "message": "Starting namenode_exporter",
            "attributes": {},
        }

    @pytest.mark.encoding
    def test_no_trailing_newline(self) -> None:
        entry = LogEntry(timestamp=1.0, level="INFO", message="line\nbreak")
        assert "\n" not in encode_log_entry(entry)

    @pytest.mark.encoding
    def test_encode_entry_with_attributes(self) -> None:
        """Attributes keep their JSON types."""
        entry = LogEntry(
            timestamp=1702300000.0,
            level="ERROR",
            message="Failed to collect metrics from namenode",
            attributes={"url": "http://nn:50070/jmx", "status": 503, "ok": False},
        )

        parsed = json.loads(encode_log_entry(entry))

        assert parsed["attributes"] == {
            "url": "http://nn:50070/jmx",
            "status": 503,
            "ok": False,
        }


class TestLogfmtEncoder:
    """Tests for encode_logfmt()."""

    @pytest.mark.encoding
    def test_leading_keys(self) -> None:
        entry = LogEntry(timestamp=0.0, level="WARNING", message="hello")
        assert encode_logfmt(entry, "2024-01-01T00:00:00.000Z") == (
            "time=2024-01-01T00:00:00.000Z level=warning msg=hello"
        )

    @pytest.mark.encoding
    def test_values_with_spaces_are_quoted(self) -> None:
        entry = LogEntry(timestamp=0.0, level="INFO", message='say "hi" now')
        assert 'msg="say \\"hi\\" now"' in encode_logfmt(entry, "t")

    @pytest.mark.encoding
    def test_empty_value_is_quoted(self) -> None:
        entry = LogEntry(timestamp=0.0, level="INFO", message="m", attributes={"a": ""})
        assert encode_logfmt(entry, "t").endswith(' a=""')

    @pytest.mark.encoding
    def test_attributes_in_insertion_order(self) -> None:
        entry = LogEntry(
            timestamp=0.0,
            level="DEBUG",
            message="m",
            attributes={"samples": 39, "duration_seconds": 0.25, "cached": True},
        )
        assert encode_logfmt(entry, "t") == (
            "time=t level=debug msg=m samples=39 duration_seconds=0.25 cached=true"
        )

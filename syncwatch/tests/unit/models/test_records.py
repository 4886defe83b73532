"""Tests for record models and their identity keys."""

from __future__ import annotations

from syncwatch.models.records import (
    LogFileInfo,
    LogRecord,
    PerformanceRecord,
    ProcessingEventRecord,
    SessionRecord,
    TransferRecord,
    record_adapter,
)


class TestLogRecord:
    """Tests for LogRecord."""

    def test_identity_prefers_id(self) -> None:
        """Records with an id use it."""
        assert LogRecord(id=7, message="x").identity_key() == 7

    def test_identity_falls_back_to_content(self) -> None:
        """Without an id the key is timestamp, function and message."""
        record = LogRecord(timestamp="2024-01-01T00:00:00", function="sync", message="done")
        assert record.identity_key() == "2024-01-01T00:00:00-sync-done"

    def test_level_and_category_defaults(self) -> None:
        """Level is upper-cased; a missing category groups under SYSTEM."""
        record = LogRecord(level="warning")
        assert record.level_key == "WARNING"
        assert record.category_key == "SYSTEM"

    def test_to_line(self) -> None:
        """Plain-text export line format."""
        record = LogRecord(timestamp="t1", level="INFO", function="f", message="hello")
        assert record.to_line() == "t1 [INFO] [f] hello"
        assert LogRecord(level="ERROR", message="m").to_line() == "[ERROR]  m"

    def test_file_info_aliases(self) -> None:
        """Server camelCase fields map onto snake_case attributes."""
        info = LogFileInfo.model_validate(
            {"filePath": "/var/log/app.log", "size": 10, "totalLines": 3, "lastModified": "now"}
        )
        assert info.file_path == "/var/log/app.log"
        assert info.total_lines == 3
        assert info.last_modified == "now"


class TestMonitorRecords:
    """Tests for monitor record grouping helpers."""

    def test_session_key_is_pid(self) -> None:
        """Sessions are keyed by process id and grouped by database."""
        session = SessionRecord(pid=42, datname="orders")
        assert session.identity_key() == 42
        assert session.database == "orders"
        assert SessionRecord().database == "Unknown"

    def test_processing_defaults(self) -> None:
        """Processing events default to Unknown engine and public schema."""
        event = ProcessingEventRecord(id=1)
        assert event.engine == "Unknown"
        assert event.schema == "public"

    def test_performance_key_prefers_queryid(self) -> None:
        """queryid wins over the row id."""
        assert PerformanceRecord(id=1, queryid="q9").identity_key() == "q9"
        assert PerformanceRecord(id=1).identity_key() == 1

    def test_performance_blocking_flag(self) -> None:
        """is_blocking parses from the row and is unset when absent."""
        assert PerformanceRecord.model_validate({"id": 1, "is_blocking": True}).is_blocking is True
        assert PerformanceRecord(id=1).is_blocking is None

    def test_transfer_engine(self) -> None:
        """Transfers group by engine."""
        assert TransferRecord(id=1, db_engine="MariaDB").engine == "MariaDB"

    def test_tagged_union_dispatches_on_kind(self) -> None:
        """The record adapter picks the variant from ``kind``."""
        record = record_adapter.validate_python({"kind": "session", "pid": 5})
        assert isinstance(record, SessionRecord)
        assert record.pid == 5

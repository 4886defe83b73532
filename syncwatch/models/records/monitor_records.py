"""Records behind the unified monitor tabs."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from syncwatch.constants.values import DEFAULT_SCHEMA, NOT_AVAILABLE, UNKNOWN_GROUP


class SessionRecord(BaseModel):
    """Active database session (``pg_stat_activity`` row)."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["session"] = "session"
    pid: int | None = None
    datname: str | None = None
    usename: str | None = None
    application_name: str | None = None
    client_addr: str | None = None
    state: str | None = None
    query: str = ""
    query_start: str | None = None
    duration: str | None = None
    duration_seconds: int | None = None
    wait_event_type: str | None = None
    wait_event: str | None = None
    schema_name: str = NOT_AVAILABLE
    table_name: str = NOT_AVAILABLE

    def identity_key(self) -> int | None:
        return self.pid

    @property
    def database(self) -> str:
        return self.datname or UNKNOWN_GROUP


class ProcessingEventRecord(BaseModel):
    """Latest change-processing event for one table."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["processing"] = "processing"
    id: int | None = None
    db_engine: str | None = None
    schema_name: str | None = None
    table_name: str | None = None
    pk_strategy: str | None = None
    status: str | None = None
    processed_at: str | None = None
    new_pk: str | int | None = None
    record_count: int | None = None

    def identity_key(self) -> int | None:
        return self.id

    @property
    def engine(self) -> str:
        return self.db_engine or UNKNOWN_GROUP

    @property
    def schema(self) -> str:
        return self.schema_name or DEFAULT_SCHEMA


class PerformanceRecord(BaseModel):
    """Captured query-performance row."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["performance"] = "performance"
    id: int | None = None
    queryid: int | str | None = None
    dbname: str | None = None
    query_text: str = ""
    operation_type: str | None = None
    performance_tier: str | None = None
    is_blocking: bool | None = None
    calls: int | None = None
    mean_time_ms: float | None = None
    total_time_ms: float | None = None
    query_efficiency_score: float | None = None
    captured_at: str | None = None

    def identity_key(self) -> int | str | None:
        return self.queryid if self.queryid is not None else self.id

    @property
    def database(self) -> str:
        return self.dbname or UNKNOWN_GROUP


class TransferRecord(BaseModel):
    """Data transfer metrics row."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["transfer"] = "transfer"
    id: int | None = None
    db_engine: str | None = None
    schema_name: str | None = None
    table_name: str | None = None
    records_transferred: int | None = None
    bytes_transferred: int | None = None
    memory_used_mb: float | None = None
    io_operations_per_second: float | None = None
    transfer_type: str | None = None
    status: str | None = None
    error_message: str | None = None
    created_at: str | None = None

    def identity_key(self) -> int | None:
        return self.id

    @property
    def engine(self) -> str:
        return self.db_engine or UNKNOWN_GROUP

"""Typed record variants, one per data source.

``Record`` is a tagged union discriminated by ``kind``; each variant
exposes ``identity_key()`` for snapshot diffing.
"""

from typing import Annotated

from pydantic import Field, TypeAdapter

from syncwatch.models.records.log_record import LogFileInfo, LogRecord
from syncwatch.models.records.monitor_records import (
    PerformanceRecord,
    ProcessingEventRecord,
    SessionRecord,
    TransferRecord,
)

Record = Annotated[
    LogRecord | SessionRecord | ProcessingEventRecord | PerformanceRecord | TransferRecord,
    Field(discriminator="kind"),
]

record_adapter: TypeAdapter[Record] = TypeAdapter(Record)

__all__ = [
    "LogFileInfo",
    "LogRecord",
    "PerformanceRecord",
    "ProcessingEventRecord",
    "Record",
    "SessionRecord",
    "TransferRecord",
    "record_adapter",
]

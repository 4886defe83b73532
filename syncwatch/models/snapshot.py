"""Snapshot and metric sample models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class MetricSample(BaseModel):
    """A (timestamp, value) point of one metric channel."""

    timestamp: float
    value: float
    label: str | None = None


class Snapshot(BaseModel):
    """Records captured from one source at one poll tick."""

    source: str
    received_at: float
    generation: int = 0
    records: list[Any] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

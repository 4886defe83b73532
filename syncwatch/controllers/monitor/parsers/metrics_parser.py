"""Metrics parser for monitor controller - maps dashboard stats onto channels."""

from __future__ import annotations

import math
from typing import Any

from syncwatch.constants.values import (
    CHANNEL_CPU,
    CHANNEL_DB_CONNECTIONS,
    CHANNEL_DB_EFFICIENCY,
    CHANNEL_DB_QPS,
    CHANNEL_MEMORY,
    CHANNEL_NETWORK,
    CHANNEL_THROUGHPUT,
    METRIC_CHANNELS,
)
from syncwatch.models.snapshot import MetricSample

_SECONDS_PER_DAY = 24 * 3600

# Channels repeated from the current dashboard value when backfilling history
_DB_CHANNELS = (CHANNEL_DB_CONNECTIONS, CHANNEL_DB_QPS, CHANNEL_DB_EFFICIENCY)


def to_float(value: Any) -> float:
    """Numeric coercion where anything unparseable counts as ``0``."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


class MetricsParser:
    """Parses dashboard statistics into per-channel metric values."""

    def channel_values(self, stats: Any) -> dict[str, float]:
        """Current value of every channel from a dashboard stats payload."""
        stats = stats if isinstance(stats, dict) else {}
        resources = stats.get("systemResources") or {}
        cards = stats.get("metricsCards") or {}
        health = stats.get("dbHealth") or {}
        throughput = cards.get("currentThroughput") or {}
        values = {
            CHANNEL_CPU: to_float(resources.get("cpuUsage")),
            CHANNEL_MEMORY: to_float(resources.get("memoryPercentage")),
            CHANNEL_NETWORK: to_float(cards.get("currentIops")),
            CHANNEL_THROUGHPUT: to_float(throughput.get("avgRps")),
        }
        values.update(self._db_values(health))
        return values

    @staticmethod
    def _db_values(health: dict[str, Any]) -> dict[str, float]:
        return {
            CHANNEL_DB_CONNECTIONS: to_float(health.get("connectionPercentage")),
            CHANNEL_DB_QPS: to_float(health.get("totalQueries24h")) / _SECONDS_PER_DAY,
            CHANNEL_DB_EFFICIENCY: to_float(health.get("queryEfficiencyScore")),
        }

    def samples(self, stats: Any, timestamp: float, label: str | None = None) -> dict[str, MetricSample]:
        """One sample per channel for a single poll tick."""
        return {
            channel: MetricSample(timestamp=timestamp, value=value, label=label)
            for channel, value in self.channel_values(stats).items()
        }

    def history(
        self,
        payload: Any,
        stats: Any,
        *,
        end: float,
        step: float,
    ) -> dict[str, list[MetricSample]]:
        """Build seed series from the resource history endpoint.

        History rows only carry a ``HH:MM:SS`` label, so sample timestamps are
        laid out backwards from ``end`` at ``step`` second spacing, oldest
        first. The database channels repeat the current dashboard value.
        """
        rows = payload.get("logs", []) if isinstance(payload, dict) else payload
        rows = [row for row in rows or [] if isinstance(row, dict)]
        health = stats.get("dbHealth") if isinstance(stats, dict) else None
        db_values = self._db_values(health or {})
        series: dict[str, list[MetricSample]] = {channel: [] for channel in METRIC_CHANNELS}
        count = len(rows)
        for index, row in enumerate(rows):
            timestamp = end - (count - 1 - index) * step
            label = row.get("timestamp")
            row_values = {
                CHANNEL_CPU: to_float(row.get("cpuUsage")),
                CHANNEL_MEMORY: to_float(row.get("memoryPercentage")),
                CHANNEL_NETWORK: to_float(row.get("network")),
                CHANNEL_THROUGHPUT: to_float(row.get("throughput")),
            }
            row_values.update({channel: db_values[channel] for channel in _DB_CHANNELS})
            for channel, value in row_values.items():
                series[channel].append(
                    MetricSample(timestamp=timestamp, value=value, label=label)
                )
        return series

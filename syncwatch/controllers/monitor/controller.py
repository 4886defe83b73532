"""Monitor controller - database activity, performance, transfer and system stats."""

from __future__ import annotations

import logging
from typing import Any

from syncwatch.constants.defaults import (
    HISTORY_CAPACITY_DEFAULT,
    MONITOR_ROW_LIMIT_DEFAULT,
    TRANSFER_WINDOW_DAYS_DEFAULT,
)
from syncwatch.controllers.api.client import DataSyncClient
from syncwatch.controllers.base.base_controller import BaseController
from syncwatch.controllers.monitor.parsers.metrics_parser import MetricsParser
from syncwatch.controllers.monitor.parsers.record_parser import RecordParser
from syncwatch.engine.errors import ValidationError
from syncwatch.models.records.monitor_records import (
    PerformanceRecord,
    ProcessingEventRecord,
    SessionRecord,
    TransferRecord,
)
from syncwatch.models.snapshot import MetricSample

logger = logging.getLogger(__name__)


class MonitorController(BaseController):
    """Fetches everything the unified monitor shows and issues its actions."""

    SESSIONS_PATH = "/api/monitor/queries"
    PROCESSING_PATH = "/api/monitor/processing-logs"
    PROCESSING_STATS_PATH = "/api/monitor/processing-logs/stats"
    TRANSFER_PATH = "/api/monitor/transfer-metrics"
    TRANSFER_STATS_PATH = "/api/monitor/transfer-metrics/stats"
    PERFORMANCE_PATH = "/api/query-performance/queries"
    PERFORMANCE_METRICS_PATH = "/api/query-performance/metrics"
    DASHBOARD_STATS_PATH = "/api/dashboard/stats"
    SYSTEM_HISTORY_PATH = "/api/dashboard/system-logs"

    def __init__(self, client: DataSyncClient) -> None:
        super().__init__(client)
        self._records = RecordParser()
        self._metrics = MetricsParser()

    @property
    def metrics_parser(self) -> MetricsParser:
        return self._metrics

    async def check_connection(self) -> bool:
        return await self._probe(self.DASHBOARD_STATS_PATH)

    # =========================================================================
    # Activity (monitor + live tabs)
    # =========================================================================

    async def fetch_sessions(self) -> list[SessionRecord]:
        return self._records.parse_sessions(await self._client.get_json(self.SESSIONS_PATH))

    async def fetch_processing_events(
        self, page: int = 1, limit: int = MONITOR_ROW_LIMIT_DEFAULT
    ) -> list[ProcessingEventRecord]:
        payload = await self._client.get_json(
            self.PROCESSING_PATH, {"page": page, "limit": limit}
        )
        return self._records.parse_processing_events(payload)

    async def fetch_processing_stats(self) -> dict[str, Any]:
        return self._records.parse_summary(
            await self._client.get_json(self.PROCESSING_STATS_PATH)
        )

    # =========================================================================
    # Performance tab
    # =========================================================================

    async def fetch_performance(
        self, page: int = 1, limit: int = MONITOR_ROW_LIMIT_DEFAULT
    ) -> list[PerformanceRecord]:
        payload = await self._client.get_json(
            self.PERFORMANCE_PATH, {"page": page, "limit": limit}
        )
        return self._records.parse_performance(payload)

    async def fetch_performance_metrics(self) -> dict[str, Any]:
        return self._records.parse_summary(
            await self._client.get_json(self.PERFORMANCE_METRICS_PATH)
        )

    # =========================================================================
    # Transfer tab
    # =========================================================================

    async def fetch_transfers(
        self,
        page: int = 1,
        limit: int = MONITOR_ROW_LIMIT_DEFAULT,
        days: int = TRANSFER_WINDOW_DAYS_DEFAULT,
    ) -> list[TransferRecord]:
        payload = await self._client.get_json(
            self.TRANSFER_PATH, {"page": page, "limit": limit, "days": days}
        )
        return self._records.parse_transfers(payload)

    async def fetch_transfer_stats(
        self, days: int = TRANSFER_WINDOW_DAYS_DEFAULT
    ) -> dict[str, Any]:
        return self._records.parse_summary(
            await self._client.get_json(self.TRANSFER_STATS_PATH, {"days": days})
        )

    # =========================================================================
    # System tab
    # =========================================================================

    async def fetch_dashboard_stats(self) -> dict[str, Any]:
        return self._records.parse_summary(
            await self._client.get_json(self.DASHBOARD_STATS_PATH)
        )

    async def fetch_system_history(
        self,
        *,
        end: float,
        step: float,
        limit: int = HISTORY_CAPACITY_DEFAULT,
    ) -> tuple[dict[str, list[MetricSample]], dict[str, Any]]:
        """Fetch resource history and current stats for seeding the charts.

        Returns:
            ``(series_by_channel, dashboard_stats)``
        """
        history = await self._client.get_json(self.SYSTEM_HISTORY_PATH, {"limit": limit})
        stats = await self.fetch_dashboard_stats()
        return self._metrics.history(history, stats, end=end, step=step), stats

    # =========================================================================
    # Actions
    # =========================================================================

    async def kill_session(self, pid: int | None) -> dict[str, Any]:
        """Terminate the backend process of one session.

        Raises:
            ValidationError: ``pid`` is missing.
        """
        if pid is None:
            raise ValidationError("Session has no process id", field="pid")
        result = await self._client.post_json(f"{self.SESSIONS_PATH}/{pid}/kill")
        logger.info("Killed session pid=%s", pid)
        return result if isinstance(result, dict) else {}

    async def set_schedule_enabled(self, backup_id: int | str | None, enabled: bool) -> dict[str, Any]:
        """Enable or disable a backup schedule.

        Raises:
            ValidationError: ``backup_id`` is missing.
        """
        if backup_id in (None, ""):
            raise ValidationError("Backup id is required", field="backup_id")
        action = "enable-schedule" if enabled else "disable-schedule"
        result = await self._client.post_json(f"/api/backups/{backup_id}/{action}")
        logger.info("Schedule %s for backup %s", "enabled" if enabled else "disabled", backup_id)
        return result if isinstance(result, dict) else {}

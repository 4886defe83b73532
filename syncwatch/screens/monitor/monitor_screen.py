"""Monitor screen - tabbed live view of sessions, processing, performance and resources."""

from __future__ import annotations

import logging
from contextlib import suppress
from datetime import datetime
from typing import Any

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches, WrongType
from textual.widgets import ContentSwitcher, DataTable, SelectionList, Static, Tab, Tabs
from textual_plotext import PlotextPlot

from syncwatch.constants.enums import MonitorTab
from syncwatch.constants.limits import QUERY_PREVIEW_LENGTH
from syncwatch.constants.values import CHANNEL_LABELS, METRIC_CHANNELS
from syncwatch.engine.clock import LoopClock
from syncwatch.engine.tree import TreeRow
from syncwatch.keyboard import MONITOR_SCREEN_BINDINGS
from syncwatch.models.records.monitor_records import (
    PerformanceRecord,
    ProcessingEventRecord,
    SessionRecord,
    TransferRecord,
)
from syncwatch.screens.base_screen import BaseScreen
from syncwatch.screens.monitor.config import (
    CHANNEL_COLORS,
    CHANNELS_LIST_ID,
    CHART_TICK_COUNT,
    NEW_ROW_STYLE,
    STATUS_ID,
    STATUS_STYLES,
    SWITCHER_ID,
    SYSTEM_STATS_ID,
    TAB_COLUMNS,
    TAB_TITLES,
    TABS_ID,
    pane_id,
    plot_id,
    summary_id,
    tab_from_id,
    tab_id,
    table_id,
)
from syncwatch.screens.monitor.presenter import TREE_TABS, MonitorPresenter, PerformanceSummary
from syncwatch.utils.formatting import (
    format_duration_ms,
    format_file_size,
    format_uptime,
    truncate,
)
from syncwatch.widgets import ask_confirmation

logger = logging.getLogger(__name__)


def _status_text(status: str | None) -> Text:
    value = status or ""
    return Text(value, style=STATUS_STYLES.get(value.lower(), ""))


def _format_stats(stats: dict[str, Any]) -> str:
    parts = []
    for key, value in stats.items():
        if isinstance(value, (dict, list)):
            continue
        if isinstance(value, float):
            value = f"{value:.2f}"
        parts.append(f"{key}: {value}")
    return "  ".join(parts) if parts else "No statistics available"


def _format_performance_summary(summary: PerformanceSummary) -> str:
    tiers = "  ".join(f"{tier}: {count}" for tier, count in summary.tiers.items())
    return (
        f"{tiers}  Blocking: {summary.blocking}  Non-blocking: {summary.non_blocking}"
        f"  Avg time: {format_duration_ms(summary.avg_mean_time_ms)}"
    )


def _format_system_stats(presenter: MonitorPresenter) -> str:
    lines = []
    for channel in METRIC_CHANNELS:
        sample = presenter.history.latest(channel)
        value = f"{sample.value:.2f}" if sample is not None else "-"
        lines.append(f"{CHANNEL_LABELS[channel]}: {value}")
    db_health = presenter.dashboard_stats.get("dbHealth") or {}
    lines.append(f"DB Uptime: {format_uptime(db_health.get('uptimeSeconds'))}")
    return "\n".join(lines)


class MonitorScreen(BaseScreen):
    """Unified monitor: one poll timer shared by five tabs."""

    BINDINGS = MONITOR_SCREEN_BINDINGS

    def __init__(
        self,
        presenter: MonitorPresenter | None = None,
        *,
        initial_tab: MonitorTab = MonitorTab.MONITOR,
    ) -> None:
        super().__init__()
        self._presenter = presenter
        self._initial_tab = initial_tab
        self._row_records: dict[MonitorTab, dict[str, Any]] = {tab: {} for tab in TREE_TABS}
        self._countdown_timer = None

    @property
    def screen_title(self) -> str:
        return "Monitor"

    @property
    def presenter(self) -> MonitorPresenter:
        if self._presenter is None:
            self._presenter = MonitorPresenter(
                self.app.monitor_controller,
                LoopClock(),
                settings=self.app.settings,
                tab=self._initial_tab,
            )
        return self._presenter

    def compose_body(self) -> ComposeResult:
        active = self.presenter.tab
        yield Tabs(
            *(Tab(title, id=tab_id(tab)) for tab, title in TAB_TITLES.items()),
            active=tab_id(active),
            id=TABS_ID,
        )
        yield Static("", id=STATUS_ID, classes="status-bar", markup=False)
        with ContentSwitcher(id=SWITCHER_ID, initial=pane_id(active)):
            for tab in TREE_TABS:
                with Vertical(id=pane_id(tab), classes="monitor-pane"):
                    yield Static("", id=summary_id(tab), classes="monitor-summary", markup=False)
                    yield DataTable(id=table_id(tab), cursor_type="row", zebra_stripes=True)
            with Horizontal(id=pane_id(MonitorTab.SYSTEM), classes="monitor-pane"):
                with Vertical(id="system-sidebar"):
                    yield Static("", id=SYSTEM_STATS_ID, classes="monitor-summary", markup=False)
                    yield SelectionList[str](
                        *(
                            (CHANNEL_LABELS[channel], channel, channel in self.presenter.visible_channels)
                            for channel in METRIC_CHANNELS
                        ),
                        id=CHANNELS_LIST_ID,
                    )
                with VerticalScroll(id="system-charts"):
                    for channel in METRIC_CHANNELS:
                        yield PlotextPlot(id=plot_id(channel), classes="system-plot")

    def on_mount(self) -> None:
        super().on_mount()
        self._countdown_timer = self.set_interval(1.0, self._render_status)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_state(self) -> None:
        if not self.is_mounted:
            return
        presenter = self.presenter
        self.show_banner(presenter.banner)
        self._render_status()
        if presenter.tab is MonitorTab.SYSTEM:
            self._render_system()
        else:
            self._render_tree_tab(presenter.tab)

    def _render_status(self) -> None:
        if not self.is_mounted:
            return
        presenter = self.presenter
        parts = [
            TAB_TITLES[presenter.tab],
            f"Refresh in {presenter.countdown}s",
            presenter.state.value,
        ]
        failures = presenter.scheduler.consecutive_failures
        if failures:
            parts.append(f"{failures} failed poll(s)")
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{STATUS_ID}", Static).update(" | ".join(parts))

    def _render_tree_tab(self, tab: MonitorTab) -> None:
        rows = []
        keys = []
        records: dict[str, Any] = {}
        for index, row in enumerate(self.presenter.tree_rows(tab)):
            if row.is_node:
                key = row.path
                rows.append(self._node_cells(row, len(TAB_COLUMNS[tab])))
            else:
                key = f"{row.path}#{index}"
                records[key] = row.record
                rows.append(self._record_cells(tab, row))
            keys.append(key)
        self._row_records[tab] = records
        self.populate_data_table(f"#{table_id(tab)}", TAB_COLUMNS[tab], rows, keys)
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{summary_id(tab)}", Static).update(self._summary(tab))

    def _summary(self, tab: MonitorTab) -> str:
        presenter = self.presenter
        if tab is MonitorTab.MONITOR:
            active = sum(1 for s in presenter.sessions if (s.state or "").lower() == "active")
            return f"Sessions: {len(presenter.sessions)}  Active: {active}"
        if tab is MonitorTab.LIVE:
            return _format_stats(presenter.processing_stats)
        if tab is MonitorTab.PERFORMANCE:
            return "\n".join(
                (
                    _format_stats(presenter.performance_metrics),
                    _format_performance_summary(presenter.performance_summary()),
                )
            )
        return _format_stats(presenter.transfer_stats)

    @staticmethod
    def _node_cells(row: TreeRow, width: int) -> tuple[Any, ...]:
        marker = "▼" if row.node.expanded else "▶"
        label = Text(f"{'  ' * row.depth}{marker} {row.node.key} ({row.node.count})", style="bold")
        return (label, *([""] * (width - 1)))

    def _record_cells(self, tab: MonitorTab, row: TreeRow) -> tuple[Any, ...]:
        record = row.record
        indent = "  " * row.depth
        style = NEW_ROW_STYLE if self.presenter.is_new(record, tab) else ""
        if isinstance(record, SessionRecord):
            return (
                Text(f"{indent}{record.pid} {record.application_name or ''}".rstrip(), style=style),
                record.usename or "",
                _status_text(record.state),
                record.duration or "",
                f"{record.schema_name}.{record.table_name}",
                truncate(record.query, QUERY_PREVIEW_LENGTH),
            )
        if isinstance(record, ProcessingEventRecord):
            return (
                Text(f"{indent}{record.table_name or ''}", style=style),
                _status_text(record.status),
                record.pk_strategy or "",
                str(record.record_count or 0),
                record.processed_at or "",
            )
        if isinstance(record, PerformanceRecord):
            return (
                Text(f"{indent}{truncate(record.query_text, QUERY_PREVIEW_LENGTH)}", style=style),
                record.operation_type or "",
                record.performance_tier or "",
                str(record.calls or 0),
                format_duration_ms(record.mean_time_ms),
                format_duration_ms(record.total_time_ms),
                f"{record.query_efficiency_score or 0:.1f}",
            )
        if isinstance(record, TransferRecord):
            table = ".".join(part for part in (record.schema_name, record.table_name) if part)
            return (
                Text(f"{indent}{table}", style=style),
                record.transfer_type or "",
                _status_text(record.status),
                str(record.records_transferred or 0),
                format_file_size(record.bytes_transferred or 0),
                record.created_at or "",
            )
        return (Text(f"{indent}{record}"), *([""] * (len(TAB_COLUMNS[tab]) - 1)))

    def _render_system(self) -> None:
        presenter = self.presenter
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{SYSTEM_STATS_ID}", Static).update(
                _format_system_stats(presenter)
            )
        for channel in METRIC_CHANNELS:
            with suppress(NoMatches, WrongType):
                plot = self.query_one(f"#{plot_id(channel)}", PlotextPlot)
                plot.display = channel in presenter.visible_channels
                if plot.display:
                    self._draw_channel(plot, channel)

    def _draw_channel(self, plot: PlotextPlot, channel: str) -> None:
        series = self.presenter.channel_series(channel)
        plt = plot.plt
        plt.clear_data()
        plt.title(CHANNEL_LABELS[channel])
        if series:
            x_values = [sample.timestamp for sample in series]
            y_values = [sample.value for sample in series]
            tick_count = min(CHART_TICK_COUNT, len(series))
            if tick_count > 1:
                indexes = sorted({round(i * (len(series) - 1) / (tick_count - 1)) for i in range(tick_count)})
            else:
                indexes = [0]
            plt.xticks(
                [x_values[i] for i in indexes],
                [series[i].label or datetime.fromtimestamp(x_values[i]).strftime("%H:%M:%S") for i in indexes],
            )
            plt.plot(x_values, y_values, color=CHANNEL_COLORS.get(channel, "white"), marker="dot")
        plot.refresh()

    # =========================================================================
    # Events
    # =========================================================================

    @on(Tabs.TabActivated, f"#{TABS_ID}")
    def _on_tab_activated(self, event: Tabs.TabActivated) -> None:
        tab = tab_from_id(event.tab.id if event.tab else None)
        if tab is None:
            return
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{SWITCHER_ID}", ContentSwitcher).current = pane_id(tab)
        if tab is not self.presenter.tab:
            self.run_action(self.presenter.switch_tab(tab), name="switch-tab")

    @on(SelectionList.SelectionToggled, f"#{CHANNELS_LIST_ID}")
    def _on_channel_toggled(self, event: SelectionList.SelectionToggled) -> None:
        self.presenter.toggle_channel(str(event.selection.value))

    @on(DataTable.RowSelected)
    def _on_row_selected(self, event: DataTable.RowSelected) -> None:
        key = event.row_key.value
        if key and key in self._row_records.get(self.presenter.tab, {}):
            return
        if key:
            self.presenter.toggle_node(key)

    # =========================================================================
    # Actions
    # =========================================================================

    def action_switch_tab(self, tab: str) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{TABS_ID}", Tabs).active = tab_id(MonitorTab(tab))

    def _cursor_key(self) -> str | None:
        tab = self.presenter.tab
        if tab not in TREE_TABS:
            return None
        try:
            table = self.query_one(f"#{table_id(tab)}", DataTable)
            if not table.row_count:
                return None
            row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        except (NoMatches, WrongType):
            return None
        return row_key.value

    def action_toggle_node(self) -> None:
        key = self._cursor_key()
        if key and key not in self._row_records.get(self.presenter.tab, {}):
            self.presenter.toggle_node(key)

    def action_kill_session(self) -> None:
        if self.presenter.tab is not MonitorTab.MONITOR:
            self.notify("Select a session on the Activity tab", severity="warning")
            return
        record = self._row_records[MonitorTab.MONITOR].get(self._cursor_key() or "")
        if not isinstance(record, SessionRecord):
            self.notify("Select a session row first", severity="warning")
            return
        confirm = lambda: ask_confirmation(  # noqa: E731
            self.app, f"Terminate session {record.pid} on {record.database}?", "Kill Session"
        )
        self.run_action(self.presenter.kill_session(record.pid, confirm), name="kill-session")

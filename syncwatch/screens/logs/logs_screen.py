"""Logs screen - paginated, auto-refreshing application log viewer."""

from __future__ import annotations

import logging
from contextlib import suppress

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches, WrongType
from textual.widgets import ContentSwitcher, DataTable, Input, Select, Static

from syncwatch.constants.values import FILTER_ALL, LOG_LEVELS
from syncwatch.engine.clock import LoopClock
from syncwatch.engine.errors import ValidationError
from syncwatch.engine.tree import TreeRow
from syncwatch.keyboard import LOGS_SCREEN_BINDINGS
from syncwatch.models.records.log_record import LogRecord
from syncwatch.screens.base_screen import BaseScreen
from syncwatch.screens.logs.config import (
    CATEGORY_SELECT_ID,
    END_DATE_INPUT_ID,
    FUNCTION_SELECT_ID,
    LEVEL_SELECT_ID,
    LEVEL_STYLES,
    LINES_INPUT_ID,
    LIST_TABLE_ID,
    LOG_TABLE_COLUMNS,
    LOG_TREE_COLUMNS,
    NEW_ROW_STYLE,
    SEARCH_INPUT_ID,
    START_DATE_INPUT_ID,
    STATUS_ID,
    SWITCHER_ID,
    TREE_TABLE_ID,
)
from syncwatch.screens.logs.presenter import LogsPresenter
from syncwatch.utils.formatting import format_file_size, truncate
from syncwatch.widgets import WidgetViewport, ask_confirmation

logger = logging.getLogger(__name__)

_TREE_MESSAGE_PREVIEW = 80


def _options(values: list[str]) -> list[tuple[str, str]]:
    return [(value, value) for value in values]


class LogsScreen(BaseScreen):
    """Log viewer with filters, auto-refresh countdown, tree view and export."""

    BINDINGS = LOGS_SCREEN_BINDINGS

    def __init__(self, presenter: LogsPresenter | None = None) -> None:
        super().__init__()
        self._presenter = presenter
        self._tree_mode = False
        self._rendered_categories: list[str] = []
        self._rendered_functions: list[str] = []
        self._countdown_timer = None

    @property
    def screen_title(self) -> str:
        return "Logs"

    @property
    def presenter(self) -> LogsPresenter:
        if self._presenter is None:
            self._presenter = LogsPresenter(
                self.app.logs_controller,
                LoopClock(),
                settings=self.app.settings,
            )
        return self._presenter

    def compose_body(self) -> ComposeResult:
        filters = self.presenter.filters
        with Horizontal(id="logs-filter-bar", classes="filter-bar"):
            yield Select(
                _options(list(LOG_LEVELS)),
                value=filters.level,
                allow_blank=False,
                id=LEVEL_SELECT_ID,
            )
            yield Select(
                _options([FILTER_ALL]),
                value=FILTER_ALL,
                allow_blank=False,
                id=CATEGORY_SELECT_ID,
            )
            yield Select(
                _options([FILTER_ALL]),
                value=FILTER_ALL,
                allow_blank=False,
                id=FUNCTION_SELECT_ID,
            )
            yield Input(placeholder="Search...", id=SEARCH_INPUT_ID)
            yield Input(str(filters.lines), placeholder="Lines", type="integer", id=LINES_INPUT_ID)
            yield Input(placeholder="Start (ISO)", id=START_DATE_INPUT_ID)
            yield Input(placeholder="End (ISO)", id=END_DATE_INPUT_ID)
        yield Static("", id=STATUS_ID, classes="status-bar", markup=False)
        with ContentSwitcher(id=SWITCHER_ID, initial=LIST_TABLE_ID):
            yield DataTable(id=LIST_TABLE_ID, zebra_stripes=True, cursor_type="row")
            yield DataTable(id=TREE_TABLE_ID, cursor_type="row")

    def on_mount(self) -> None:
        with suppress(NoMatches, WrongType):
            self.presenter.viewport = WidgetViewport(self.query_one(f"#{LIST_TABLE_ID}", DataTable))
        super().on_mount()
        # The countdown changes every second without any data change.
        self._countdown_timer = self.set_interval(1.0, self._render_status)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_state(self) -> None:
        if not self.is_mounted:
            return
        presenter = self.presenter
        self.show_banner(presenter.banner)
        self._sync_options(CATEGORY_SELECT_ID, presenter.categories, "_rendered_categories")
        self._sync_options(FUNCTION_SELECT_ID, presenter.functions, "_rendered_functions")
        self._render_list()
        self._render_tree()
        self._render_status()

    def _sync_options(self, select_id: str, values: list[str], cache_attr: str) -> None:
        if getattr(self, cache_attr) == values:
            return
        with suppress(NoMatches, WrongType):
            select = self.query_one(f"#{select_id}", Select)
            current = select.value
            select.set_options(_options(values))
            if current in values:
                select.value = current
            setattr(self, cache_attr, list(values))

    def _styled_level(self, record: LogRecord) -> Text:
        return Text(record.level_key, style=LEVEL_STYLES.get(record.level_key, ""))

    def _render_list(self) -> None:
        presenter = self.presenter
        rows = []
        for record in presenter.page_rows:
            style = NEW_ROW_STYLE if presenter.is_new(record) else ""
            rows.append(
                (
                    Text(record.timestamp or "", style=style),
                    self._styled_level(record),
                    record.category_key,
                    record.function or "",
                    Text(record.message, style=style),
                )
            )
        self.populate_data_table(f"#{LIST_TABLE_ID}", LOG_TABLE_COLUMNS, rows)

    def _render_tree(self) -> None:
        rows = []
        keys = []
        for index, row in enumerate(self.presenter.tree_rows()):
            rows.append(self._tree_cells(row))
            keys.append(row.path if row.is_node else f"{row.path}#{index}")
        self.populate_data_table(f"#{TREE_TABLE_ID}", LOG_TREE_COLUMNS, rows, keys)

    def _tree_cells(self, row: TreeRow) -> tuple[Text | str, ...]:
        indent = "  " * row.depth
        if row.is_node:
            marker = "▼" if row.node.expanded else "▶"
            style = LEVEL_STYLES.get(row.node.key, "bold") if row.depth == 0 else ""
            return (Text(f"{indent}{marker} {row.node.key}", style=style), str(row.node.count), "")
        record = row.record
        style = NEW_ROW_STYLE if self.presenter.is_new(record) else ""
        return (
            Text(f"{indent}{record.timestamp or ''}", style=style),
            "",
            Text(truncate(record.message, _TREE_MESSAGE_PREVIEW), style=style),
        )

    def _render_status(self) -> None:
        if not self.is_mounted:
            return
        presenter = self.presenter
        pager = presenter.paginator
        parts = [
            f"Page {pager.current_page} of {max(pager.total_pages, 1)}",
            f"{pager.total_items} entries",
        ]
        if presenter.info is not None:
            parts.append(f"{presenter.info.file_path or 'Unknown'} ({format_file_size(presenter.info.size or 0)})")
        if presenter.auto_refresh:
            parts.append(f"Auto-refresh in {presenter.countdown}s")
        else:
            parts.append("Auto-refresh off")
        parts.append(presenter.state.value)
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{STATUS_ID}", Static).update(" | ".join(parts))

    # =========================================================================
    # Filter events
    # =========================================================================

    @on(Select.Changed)
    def _on_select_changed(self, event: Select.Changed) -> None:
        field = {
            LEVEL_SELECT_ID: "level",
            CATEGORY_SELECT_ID: "category",
            FUNCTION_SELECT_ID: "function",
        }.get(event.select.id or "")
        if field is None or event.value is Select.BLANK:
            return
        if getattr(self.presenter.filters, field) == event.value:
            return
        self.run_action(self.presenter.apply_filters(**{field: event.value}), name="apply-filters")

    @on(Input.Submitted)
    def _on_input_submitted(self, event: Input.Submitted) -> None:
        input_id = event.input.id or ""
        value = event.value.strip()
        if input_id == LINES_INPUT_ID:
            try:
                changes = {"lines": int(value)}
            except ValueError:
                self.show_validation_error(ValidationError("Lines must be a number", field="lines"))
                return
        else:
            field = {
                SEARCH_INPUT_ID: "search",
                START_DATE_INPUT_ID: "start_date",
                END_DATE_INPUT_ID: "end_date",
            }.get(input_id)
            if field is None:
                return
            changes = {field: value}
        self.run_action(self.presenter.apply_filters(**changes), name="apply-filters")

    @on(DataTable.RowSelected, f"#{TREE_TABLE_ID}")
    def _on_tree_row_selected(self, event: DataTable.RowSelected) -> None:
        path = event.row_key.value
        if path and self.presenter.tree.find(path) is not None:
            self.presenter.toggle_node(path)

    # =========================================================================
    # Actions
    # =========================================================================

    def action_toggle_auto_refresh(self) -> None:
        enabled = self.presenter.toggle_auto_refresh()
        self.notify(f"Auto-refresh {'on' if enabled else 'off'}")

    def action_focus_search(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{SEARCH_INPUT_ID}", Input).focus()

    def action_clear_filters(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{LEVEL_SELECT_ID}", Select).value = FILTER_ALL
            self.query_one(f"#{CATEGORY_SELECT_ID}", Select).value = FILTER_ALL
            self.query_one(f"#{FUNCTION_SELECT_ID}", Select).value = FILTER_ALL
            for input_id in (SEARCH_INPUT_ID, START_DATE_INPUT_ID, END_DATE_INPUT_ID):
                self.query_one(f"#{input_id}", Input).value = ""
            self.query_one(f"#{LINES_INPUT_ID}", Input).value = str(self.presenter.filters.lines)
        self.run_action(self.presenter.clear_filters(), name="clear-filters")

    def action_toggle_view(self) -> None:
        self._tree_mode = not self._tree_mode
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{SWITCHER_ID}", ContentSwitcher).current = (
                TREE_TABLE_ID if self._tree_mode else LIST_TABLE_ID
            )

    def action_export(self) -> None:
        text = self.presenter.export_text()
        self.app.copy_to_clipboard(text)
        self.notify(f"Copied {len(self.presenter.records)} log entries to clipboard")

    def action_clear_logs(self) -> None:
        confirm = lambda: ask_confirmation(  # noqa: E731
            self.app, "Delete ALL log entries? This cannot be undone.", "Clear Logs"
        )
        self.run_action(self.presenter.clear_logs(confirm), name="clear-logs")

    def action_previous_page(self) -> None:
        self.presenter.previous_page()

    def action_next_page(self) -> None:
        self.presenter.next_page()

    def action_first_page(self) -> None:
        self.presenter.first_page()

    def action_last_page(self) -> None:
        self.presenter.last_page()

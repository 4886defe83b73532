"""Base screen class for SyncWatch TUI.

BaseScreen wires a polled presenter into the Textual lifecycle:

1. PRESENTER LIFECYCLE:
   - on_mount() starts the presenter on Textual's event loop
   - on_unmount() deactivates it, so late completions are dropped

2. RENDERING:
   - presenters call back into render() after every state change
   - the error banner is a #error-banner Static shown only while set

3. TABLE HELPERS:
   - populate_data_table(table_id, columns, rows) rebuilds a DataTable
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import suppress
from typing import TYPE_CHECKING, Any, cast

from rich.markup import escape
from textual.app import ComposeResult
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static

from syncwatch.constants.values import APP_TITLE
from syncwatch.engine.errors import ErrorBanner, ValidationError
from syncwatch.keyboard import BASE_SCREEN_BINDINGS
from syncwatch.screens.base_presenter import PolledPresenter

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from syncwatch.app import SyncWatchApp


class BaseScreen(Screen):
    """Abstract base class for polled screens.

    Subclasses must implement:
    - presenter: the PolledPresenter backing the screen
    - compose_body: widgets between the header and the footer
    - render_state: refresh widgets from presenter state
    """

    BINDINGS = BASE_SCREEN_BINDINGS

    @property
    def screen_title(self) -> str:
        return APP_TITLE

    @property
    def app(self) -> SyncWatchApp:
        return cast("SyncWatchApp", super().app)

    @property
    @abstractmethod
    def presenter(self) -> PolledPresenter: ...

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="error-banner", classes="error-banner", markup=False)
        yield from self.compose_body()
        yield Footer()

    @abstractmethod
    def compose_body(self) -> ComposeResult: ...

    def on_mount(self) -> None:
        self.app.title = f"{APP_TITLE} - {self.screen_title}"
        self.presenter.set_update_callback(self.render_state)
        self.render_state()
        self.run_worker(self.presenter.start(), name=f"{self.presenter.view_name}-start")

    def on_unmount(self) -> None:
        self.presenter.deactivate()
        self.presenter.set_update_callback(None)
        with suppress(Exception):
            self.workers.cancel_all()

    @abstractmethod
    def render_state(self) -> None: ...

    # =========================================================================
    # Banner & inline messages
    # =========================================================================

    def show_banner(self, banner: ErrorBanner) -> None:
        with suppress(NoMatches, WrongType):
            widget = self.query_one("#error-banner", Static)
            widget.update(banner.message or "")
            widget.display = banner.visible

    def show_validation_error(self, error: ValidationError) -> None:
        self.notify(str(error), title="Invalid input", severity="warning")

    def run_action(self, coro: Any, name: str) -> None:
        """Run a presenter action in a worker, reporting validation errors inline."""

        async def _runner() -> None:
            try:
                await coro
            except ValidationError as exc:
                self.show_validation_error(exc)

        self.run_worker(_runner(), name=name, exclusive=False)

    # =========================================================================
    # DataTable helpers
    # =========================================================================

    def populate_data_table(
        self,
        table_id: str,
        columns: list[tuple[str, int]],
        rows: list[tuple[Any, ...]],
        keys: list[str] | None = None,
    ) -> None:
        with suppress(NoMatches, WrongType):
            table = self.query_one(table_id, DataTable)
            cursor_row = table.cursor_row
            table.clear()
            if not table.columns:
                for name, width in columns:
                    table.add_column(escape(name), width=width)
            for index, row in enumerate(rows):
                table.add_row(*row, key=keys[index] if keys else None)
            if rows:
                table.move_cursor(row=min(cursor_row, len(rows) - 1))

    def action_refresh(self) -> None:
        self.run_action(self.presenter.refresh(manual=True), name="manual-refresh")

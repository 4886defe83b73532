"""Confirmation dialog for destructive actions.

CSS Classes: widget-confirm-dialog
"""

from __future__ import annotations

import asyncio

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class ConfirmDialog(ModalScreen[bool]):
    """Confirmation dialog with OK/Cancel buttons."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]
    _default_classes = "widget-confirm-dialog"

    def __init__(self, message: str, title: str = "Confirm") -> None:
        super().__init__(classes=self._default_classes)
        self._message = message
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            if self._title:
                yield Static(self._title, classes="dialog-title", markup=False)
            yield Static(self._message, classes="dialog-message", markup=False)
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", id="confirm-btn", variant="error", classes="dialog-btn")
                yield Button("Cancel", id="cancel-btn", classes="dialog-btn")

    def on_mount(self) -> None:
        self.query_one("#cancel-btn", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        self.dismiss(event.button.id == "confirm-btn")

    def action_cancel(self) -> None:
        self.dismiss(False)


def ask_confirmation(app: App, message: str, title: str = "Confirm") -> asyncio.Future[bool]:
    """Push a :class:`ConfirmDialog` and return a future for the answer."""
    future: asyncio.Future[bool] = asyncio.get_running_loop().create_future()

    def _resolve(result: bool | None) -> None:
        if not future.done():
            future.set_result(bool(result))

    app.push_screen(ConfirmDialog(message, title), callback=_resolve)
    return future

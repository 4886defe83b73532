"""Adapter exposing a Textual scrollable widget as a scroll viewport."""

from __future__ import annotations

from textual.widget import Widget


class WidgetViewport:
    """Scroll geometry of a Textual widget, measured in terminal rows."""

    def __init__(self, widget: Widget) -> None:
        self._widget = widget

    @property
    def scroll_height(self) -> float:
        return float(self._widget.virtual_size.height)

    @property
    def scroll_top(self) -> float:
        return float(self._widget.scroll_y)

    @property
    def client_height(self) -> float:
        return float(self._widget.scrollable_content_region.height)

    def scroll_to_bottom(self, *, smooth: bool = True) -> None:
        # Content height is only known once the new rows have been laid out.
        self._widget.call_after_refresh(self._widget.scroll_end, animate=smooth)

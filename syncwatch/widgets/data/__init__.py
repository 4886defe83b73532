"""Data display widgets."""

from syncwatch.widgets.data.viewport import WidgetViewport

__all__ = [
    "WidgetViewport",
]

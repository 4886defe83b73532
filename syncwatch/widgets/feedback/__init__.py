"""Feedback widgets: dialogs and banners."""

from syncwatch.widgets.feedback.confirm_dialog import ConfirmDialog, ask_confirmation

__all__ = [
    "ConfirmDialog",
    "ask_confirmation",
]

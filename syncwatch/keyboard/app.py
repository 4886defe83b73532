"""App-level keyboard bindings.

View switching (logs, monitor) and quit, active on every screen.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("l", "nav_logs", "Logs"),
    Binding("m", "nav_monitor", "Monitor"),
    Binding("q", "app.quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]

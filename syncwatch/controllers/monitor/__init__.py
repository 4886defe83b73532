"""Monitor controller package."""

from syncwatch.controllers.monitor.controller import MonitorController

__all__ = [
    "MonitorController",
]

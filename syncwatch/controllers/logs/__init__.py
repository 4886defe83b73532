"""Logs controller package."""

from syncwatch.controllers.logs.controller import LogsController

__all__ = [
    "LogsController",
]

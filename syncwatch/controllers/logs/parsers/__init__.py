"""Parsers for the logs controller."""

from syncwatch.controllers.logs.parsers.log_parser import LogParser

__all__ = [
    "LogParser",
]

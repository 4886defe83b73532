"""Base controller classes."""

from syncwatch.controllers.base.base_controller import BaseController

__all__ = [
    "BaseController",
]

"""Shared presenter plumbing for polled views.

A presenter owns everything a view needs between mount and unmount: its
``ViewSession``, one ``PollScheduler``, the error banner and the view state.
Screens forward user actions to it and re-render when ``on_update`` fires.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from syncwatch.constants.enums import ViewState
from syncwatch.engine.clock import Clock
from syncwatch.engine.errors import ErrorBanner, UserDeclined
from syncwatch.engine.lifecycle import ViewSession
from syncwatch.engine.scheduler import PollScheduler

logger = logging.getLogger(__name__)

Confirm = Callable[[], Awaitable[bool] | bool]
UpdateCallback = Callable[[], None]


class PolledPresenter:
    """Base class for presenters driven by a single poll timer."""

    view_name = "view"

    def __init__(
        self,
        clock: Clock,
        *,
        on_update: UpdateCallback | None = None,
        spawn: Callable[[Awaitable[Any]], asyncio.Future[Any]] | None = None,
    ) -> None:
        self._clock = clock
        self._on_update = on_update
        self.session = ViewSession(self.view_name)
        self.banner = ErrorBanner()
        self.scheduler = PollScheduler(
            clock, name=self.view_name, on_error=self._on_poll_error, spawn=spawn
        )
        self.state = ViewState.IDLE

    @property
    def is_active(self) -> bool:
        return self.session.is_active

    @property
    def countdown(self) -> int:
        return self.scheduler.countdown

    def set_update_callback(self, callback: UpdateCallback | None) -> None:
        self._on_update = callback

    def deactivate(self) -> None:
        """Tear down: later completions become no-ops and the timer stops."""
        self.session.deactivate()
        self.scheduler.stop()

    def notify(self) -> None:
        if self._on_update is not None and self.session.is_active:
            self._on_update()

    def _begin_fetch(self, *, manual: bool) -> None:
        if manual:
            self.banner.clear()
        self.state = ViewState.LOADING if self.state is ViewState.IDLE else ViewState.REFRESHING

    def _fail(self, error: BaseException) -> None:
        self.banner.show(error)
        self.state = ViewState.READY
        self.notify()

    def _on_poll_error(self, error: BaseException) -> None:
        self.session.run_if_active(self._fail, error)

    @staticmethod
    async def _confirm(confirm: Confirm, action: str) -> None:
        """Ask for confirmation.

        Raises:
            UserDeclined: The confirmation was rejected.
        """
        answer = confirm()
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            raise UserDeclined(action)

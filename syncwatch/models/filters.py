"""Log viewer filter model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from syncwatch.constants.defaults import LOG_LINES_DEFAULT
from syncwatch.constants.limits import LOG_LINES_MAX, LOG_LINES_MIN, SEARCH_MAX_LENGTH
from syncwatch.constants.values import FILTER_ALL
from syncwatch.engine.errors import ValidationError


def sanitize_search(text: str | None, max_length: int = SEARCH_MAX_LENGTH) -> str:
    """Trim free-text search input and cap its length."""
    if not text:
        return ""
    return text.strip()[:max_length]


def _parse_date(value: str, field: str) -> datetime:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {value}", field=field) from exc


class LogFilters(BaseModel):
    """Filters forwarded verbatim to the log endpoint."""

    model_config = ConfigDict(validate_assignment=True)

    lines: int = LOG_LINES_DEFAULT
    level: str = FILTER_ALL
    category: str = FILTER_ALL
    function: str = FILTER_ALL
    search: str = ""
    start_date: str = ""
    end_date: str = ""
    auto_cleanup: bool = False
    delete_debug: bool = False
    delete_duplicates: bool = False
    delete_older_than: int | None = None

    def check(self) -> None:
        """Reject values the server would refuse.

        Raises:
            ValidationError: ``lines`` is out of range or the date range is
                inverted.
        """
        if not LOG_LINES_MIN <= self.lines <= LOG_LINES_MAX:
            raise ValidationError(
                f"Lines must be between {LOG_LINES_MIN} and {LOG_LINES_MAX}",
                field="lines",
            )
        if self.start_date and self.end_date:
            start = _parse_date(self.start_date, "start_date")
            end = _parse_date(self.end_date, "end_date")
            if start.replace(tzinfo=None) > end.replace(tzinfo=None):
                raise ValidationError("Start date must be before end date", field="start_date")

    def to_params(self) -> dict[str, str | int]:
        """Render the query string: ``ALL`` and blanks omitted, flags only when set."""
        params: dict[str, str | int] = {"lines": self.lines}
        for key, value in (
            ("level", self.level),
            ("category", self.category),
            ("function", self.function),
            ("startDate", self.start_date),
            ("endDate", self.end_date),
        ):
            if value and value != FILTER_ALL:
                params[key] = value
        search = sanitize_search(self.search)
        if search:
            params["search"] = search
        for key, flag in (
            ("autoCleanup", self.auto_cleanup),
            ("deleteDebug", self.delete_debug),
            ("deleteDuplicates", self.delete_duplicates),
        ):
            if flag:
                params[key] = "true"
        if self.delete_older_than:
            params["deleteOlderThan"] = self.delete_older_than
        return params

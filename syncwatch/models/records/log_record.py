"""Application log records shown in the log viewer."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from syncwatch.constants.values import DEFAULT_LOG_CATEGORY, DEFAULT_LOG_LEVEL


class LogRecord(BaseModel):
    """One row from the application log table."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["log"] = "log"
    id: int | str | None = None
    timestamp: str | None = None
    level: str = DEFAULT_LOG_LEVEL
    category: str | None = None
    function: str | None = None
    message: str = ""

    def identity_key(self) -> int | str:
        # Database-backed logs carry no id; timestamp + origin + text is stable.
        if self.id is not None:
            return self.id
        return f"{self.timestamp}-{self.function or ''}-{self.message}"

    @property
    def level_key(self) -> str:
        return (self.level or DEFAULT_LOG_LEVEL).upper()

    @property
    def category_key(self) -> str:
        return self.category or DEFAULT_LOG_CATEGORY

    def to_line(self) -> str:
        """Plain-text rendering: ``timestamp [LEVEL] [function] message``."""
        function = f"[{self.function}]" if self.function else ""
        return f"{self.timestamp or ''} [{self.level}] {function} {self.message}".strip()


class LogFileInfo(BaseModel):
    """Metadata about the log store backing the viewer."""

    model_config = ConfigDict(populate_by_name=True)

    exists: bool = True
    file_path: str | None = Field(default=None, alias="filePath")
    size: int | None = None
    total_lines: int | None = Field(default=None, alias="totalLines")
    last_modified: str | None = Field(default=None, alias="lastModified")

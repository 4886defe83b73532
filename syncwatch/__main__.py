"""SyncWatch CLI entry point.

Usage:
    syncwatch [--base-url URL] [--token TOKEN] [--view logs|monitor] [--tab TAB]
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from syncwatch import __version__
from syncwatch.constants.enums import MonitorTab

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_FILE = Path.home() / ".cache" / "syncwatch" / "syncwatch.log"


def configure_logging(log_file: Path, level: str) -> None:
    """Send log records to a file; the terminal belongs to the TUI."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("syncwatch")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())


@click.command()
@click.option("--base-url", envvar="SYNCWATCH_BASE_URL", help="DataSync server URL.")
@click.option("--token", envvar="SYNCWATCH_TOKEN", help="Bearer token for the API.")
@click.option(
    "--view",
    type=click.Choice(["logs", "monitor"]),
    default="monitor",
    show_default=True,
    help="View to open on start.",
)
@click.option(
    "--tab",
    type=click.Choice([tab.value for tab in MonitorTab]),
    default=MonitorTab.MONITOR.value,
    show_default=True,
    help="Initial monitor tab.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_FILE,
    show_default=True,
    help="Where to write diagnostic logs.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.version_option(__version__, prog_name="syncwatch")
def main(
    base_url: str | None,
    token: str | None,
    view: str,
    tab: str,
    log_file: Path,
    log_level: str,
) -> None:
    """Live log viewer and unified monitor for a DataSync server."""
    configure_logging(log_file, log_level)

    from syncwatch.app import SyncWatchApp

    app = SyncWatchApp(base_url=base_url, token=token, view=view, tab=MonitorTab(tab))
    app.run()


if __name__ == "__main__":
    main()

"""Smoke tests for the syncwatch command line and app construction."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from syncwatch import __version__
from syncwatch.__main__ import main
from syncwatch.app import VIEW_LOGS, SyncWatchApp
from syncwatch.constants.enums import MonitorTab


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_path = tmp_path / "settings.yaml"
    monkeypatch.setenv("SYNCWATCH_CONFIG", str(config_path))
    monkeypatch.delenv("SYNCWATCH_BASE_URL", raising=False)
    monkeypatch.delenv("SYNCWATCH_TOKEN", raising=False)
    return config_path


class TestCli:
    """Tests for the click entry point."""

    def test_help_lists_options(self) -> None:
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        for option in ("--base-url", "--token", "--view", "--tab", "--log-file"):
            assert option in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_rejects_unknown_view(self) -> None:
        result = CliRunner().invoke(main, ["--view", "dashboard"])
        assert result.exit_code != 0

    def test_runs_app_with_options(self, tmp_path: Path, isolated_config: Path) -> None:
        """Options reach SyncWatchApp; run() is not entered for real."""
        with patch.object(SyncWatchApp, "run") as run:
            result = CliRunner().invoke(
                main,
                [
                    "--base-url",
                    "http://sync.local:8080",
                    "--view",
                    "logs",
                    "--tab",
                    "system",
                    "--log-file",
                    str(tmp_path / "logs" / "syncwatch.log"),
                ],
            )
        assert result.exit_code == 0, result.output
        run.assert_called_once()
        assert (tmp_path / "logs" / "syncwatch.log").parent.is_dir()


class TestSyncWatchApp:
    """Tests for app construction."""

    def test_css_path(self) -> None:
        assert SyncWatchApp.CSS_PATH == "css/app.tcss"
        assert (Path(__file__).parents[3] / "css" / "app.tcss").is_file()

    def test_cli_overrides_settings(self, isolated_config: Path) -> None:
        app = SyncWatchApp(
            base_url="http://sync.local:8080/",
            token="secret",
            view=VIEW_LOGS,
            tab=MonitorTab.TRANSFER,
        )
        assert app.settings.base_url == "http://sync.local:8080"
        assert app.settings.api_token == "secret"
        assert app.initial_tab is MonitorTab.TRANSFER
        assert str(app.client.base_url) == "http://sync.local:8080"

    def test_defaults_without_config(self, isolated_config: Path) -> None:
        app = SyncWatchApp()
        assert app.settings.base_url == "http://localhost:3000"
        assert not isolated_config.exists()

"""Tests for linktime.cli.main — the click application."""
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from linktime.cli import main as cli_main
from linktime.core.catalog import Catalog

ENTRY_POINTS = "linktime.startup.loader.importlib.metadata.entry_points"

DEFAULT_CATALOG_PLUGINS = """
from abc import ABC, abstractmethod

from linktime import extension_point, register_plugin


@extension_point
class Exporter(ABC):
    @abstractmethod
    def export(self) -> str: ...


@register_plugin
class CsvExporter(Exporter):
    def export(self) -> str:
        return "csv"
"""


@pytest.fixture()
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    monkeypatch.setattr(cli_main, "_configure_logging", lambda verbose: None)
    return CliRunner()


class TestVersionCommand:
    def test_version_shows_package_version(self, runner: CliRunner, expected_version: str) -> None:
        result = runner.invoke(cli_main.cli, ["version"])
        assert result.exit_code == 0
        assert expected_version in result.output


class TestPluginsCommand:
    def test_no_plugins_prints_notice(
        self, runner: CliRunner, isolated_default_catalog: Catalog
    ) -> None:
        with patch(ENTRY_POINTS, return_value=[]):
            result = runner.invoke(cli_main.cli, ["plugins"])
        assert result.exit_code == 0
        assert "No plugins registered" in result.output

    def test_manifest_plugins_are_listed(
        self,
        runner: CliRunner,
        isolated_default_catalog: Catalog,
        plugin_module_factory: Callable[[str], str],
        tmp_path: Path,
    ) -> None:
        module_name = plugin_module_factory(DEFAULT_CATALOG_PLUGINS)
        manifest = tmp_path / "plugins.yaml"
        manifest.write_text(f"modules:\n  - {module_name}\n", encoding="utf-8")

        result = runner.invoke(
            cli_main.cli, ["plugins", "--manifest", str(manifest), "--no-entry-points"]
        )

        assert result.exit_code == 0
        assert "Exporter" in result.output
        assert "CsvExporter" in result.output
        assert "1 plugin(s)" in result.output
        assert isolated_default_catalog.sealed

    def test_bad_manifest_exits_with_error(
        self, runner: CliRunner, isolated_default_catalog: Catalog, tmp_path: Path
    ) -> None:
        manifest = tmp_path / "plugins.yaml"
        manifest.write_text("seal: maybe\n", encoding="utf-8")
        result = runner.invoke(cli_main.cli, ["plugins", "--manifest", str(manifest)])
        assert result.exit_code == 1

    def test_no_entry_points_skips_entry_point_loading(
        self, runner: CliRunner, isolated_default_catalog: Catalog
    ) -> None:
        with patch(ENTRY_POINTS, return_value=[]) as entry_points:
            result = runner.invoke(cli_main.cli, ["plugins", "--no-entry-points"])
        assert result.exit_code == 0
        entry_points.assert_not_called()

    def test_failed_module_is_reported(
        self, runner: CliRunner, isolated_default_catalog: Catalog, tmp_path: Path
    ) -> None:
        manifest = tmp_path / "plugins.yaml"
        manifest.write_text("modules:\n  - linktime_missing_module\n", encoding="utf-8")
        result = runner.invoke(
            cli_main.cli, ["plugins", "--manifest", str(manifest), "--no-entry-points"]
        )
        assert result.exit_code == 0
        assert "linktime_missing_module" in result.output

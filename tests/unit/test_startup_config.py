"""Unit tests for linktime.startup.config — YAML bootstrap manifests."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from linktime.startup.config import (
    DEFAULT_ENTRY_POINT_GROUP,
    BootstrapConfig,
    load_config,
    parse_config,
)
from linktime.core.errors import ManifestError


# ===========================================================================
# BootstrapConfig
# ===========================================================================


class TestBootstrapConfig:
    def test_defaults(self) -> None:
        config = BootstrapConfig()
        assert config.modules == ()
        assert config.entry_point_groups == (DEFAULT_ENTRY_POINT_GROUP,)
        assert config.seal is True

    def test_frozen(self) -> None:
        config = BootstrapConfig()
        with pytest.raises((AttributeError, TypeError)):
            config.seal = False  # type: ignore[misc]


# ===========================================================================
# parse_config
# ===========================================================================


class TestParseConfig:
    def test_empty_text_gives_defaults(self) -> None:
        assert parse_config("") == BootstrapConfig()

    def test_full_manifest(self) -> None:
        manifest = textwrap.dedent(
            """
            modules:
              - app.shapes.circle
              - app.shapes.square
            entry_point_groups:
              - app.plugins
            seal: false
            """
        )
        config = parse_config(manifest)
        assert config.modules == ("app.shapes.circle", "app.shapes.square")
        assert config.entry_point_groups == ("app.plugins",)
        assert config.seal is False

    def test_empty_entry_point_groups_disables_entry_points(self) -> None:
        config = parse_config("entry_point_groups: []\n")
        assert config.entry_point_groups == ()

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(ManifestError, match="not valid YAML"):
            parse_config("modules: [unclosed\n")

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(ManifestError, match="mapping"):
            parse_config("- just\n- a list\n")

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(ManifestError, match="plugins"):
            parse_config("plugins: [a]\n")

    def test_modules_must_be_list(self) -> None:
        with pytest.raises(ManifestError, match="modules"):
            parse_config("modules: app.shapes\n")

    def test_modules_must_be_strings(self) -> None:
        with pytest.raises(ManifestError, match="modules"):
            parse_config("modules: [1, 2]\n")

    def test_seal_must_be_bool(self) -> None:
        with pytest.raises(ManifestError, match="seal"):
            parse_config("seal: maybe\n")

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_config("seal: maybe\n")

    def test_error_names_source(self) -> None:
        with pytest.raises(ManifestError) as exc_info:
            parse_config("seal: maybe\n", source="plugins.yaml")
        assert exc_info.value.source == "plugins.yaml"
        assert "plugins.yaml" in str(exc_info.value)


# ===========================================================================
# load_config
# ===========================================================================


class TestLoadConfig:
    def test_load_from_file(self, tmp_path: Path) -> None:
        manifest = tmp_path / "plugins.yaml"
        manifest.write_text("modules:\n  - app.shapes\n", encoding="utf-8")
        assert load_config(manifest).modules == ("app.shapes",)

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        manifest = tmp_path / "plugins.yaml"
        manifest.write_text("seal: false\n", encoding="utf-8")
        assert load_config(str(manifest)).seal is False

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="cannot read"):
            load_config(tmp_path / "absent.yaml")

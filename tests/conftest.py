"""Shared test fixtures for linktime.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import importlib
import sys
import textwrap
import types
import uuid
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from linktime.core.catalog import Catalog


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "linktime"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def catalog() -> Catalog:
    """Return an empty catalog private to one test."""
    return Catalog("test")


@pytest.fixture()
def isolated_default_catalog(monkeypatch: pytest.MonkeyPatch) -> Catalog:
    """Swap the process-wide catalog for an empty one for one test."""
    fresh = Catalog("isolated-default")
    monkeypatch.setattr("linktime.core.catalog._default_catalog", fresh)
    return fresh


@pytest.fixture()
def plugin_module_factory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, catalog: Catalog
) -> Iterator[Callable[[str], str]]:
    """Write importable plugin modules and return their unique module names.

    Generated modules can reach the test's private catalog as
    ``linktime_fixture.CATALOG``.
    """
    fixture_module = types.ModuleType("linktime_fixture")
    fixture_module.CATALOG = catalog  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "linktime_fixture", fixture_module)
    monkeypatch.syspath_prepend(str(tmp_path))
    created: list[str] = []

    def factory(source: str) -> str:
        module_name = f"linktime_generated_{uuid.uuid4().hex}"
        (tmp_path / f"{module_name}.py").write_text(textwrap.dedent(source), encoding="utf-8")
        importlib.invalidate_caches()
        created.append(module_name)
        return module_name

    yield factory

    for module_name in created:
        sys.modules.pop(module_name, None)

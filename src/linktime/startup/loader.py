"""One-time bootstrap: import every declared plugin module, then seal.

Python runs no code before ``main`` on its own, so the registration window
is reconstructed explicitly. :func:`bootstrap` imports the modules named in
a :class:`~linktime.startup.config.BootstrapConfig` and loads the
configured entry points; each import runs the ``@register_plugin``
decorators it contains. The catalog is then sealed so nothing registers
after application code starts querying.

The body runs at most once per catalog, under a re-entrant guard private to
that catalog. Concurrent callers wait for the first call and get its report
back. A nested call for the same catalog, made by a plugin module while it
is being imported, returns at once with a report of what is registered so
far.
"""
from __future__ import annotations

import importlib
import importlib.metadata
import logging
import threading
import weakref
from dataclasses import dataclass

from linktime.startup.config import BootstrapConfig
from linktime.core.catalog import Catalog, default_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BootstrapReport:
    """Outcome of a bootstrap run.

    Parameters
    ----------
    imported:
        Module names and entry-point names that loaded successfully.
    failed:
        Module names and entry-point names that could not be loaded.
    plugin_count:
        Total plugins registered in the catalog when bootstrap finished.
    """

    imported: tuple[str, ...]
    failed: tuple[str, ...]
    plugin_count: int


_guards_lock = threading.Lock()
_guards: weakref.WeakKeyDictionary[Catalog, threading.RLock] = weakref.WeakKeyDictionary()
_reports: weakref.WeakKeyDictionary[Catalog, BootstrapReport] = weakref.WeakKeyDictionary()
_in_progress: weakref.WeakSet[Catalog] = weakref.WeakSet()


def _guard_for(catalog: Catalog) -> threading.RLock:
    with _guards_lock:
        guard = _guards.get(catalog)
        if guard is None:
            guard = threading.RLock()
            _guards[catalog] = guard
        return guard


def _count_plugins(catalog: Catalog) -> int:
    total = 0
    for extension_point in catalog.extension_points():
        registry = catalog.registry_for(extension_point)
        if registry is not None:
            total += len(registry)
    return total


def _import_modules(modules: tuple[str, ...], imported: list[str], failed: list[str]) -> None:
    for module_name in modules:
        try:
            importlib.import_module(module_name)
        except Exception:
            logger.exception("Failed to import plugin module %r; skipping.", module_name)
            failed.append(module_name)
            continue
        logger.debug("Imported plugin module %r", module_name)
        imported.append(module_name)


def _load_entry_points(groups: tuple[str, ...], imported: list[str], failed: list[str]) -> None:
    for group in groups:
        for ep in importlib.metadata.entry_points(group=group):
            label = f"{group}:{ep.name}"
            try:
                ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                failed.append(label)
                continue
            logger.debug("Loaded entry-point %r from group %r", ep.name, group)
            imported.append(label)


def bootstrap(config: BootstrapConfig | None = None, catalog: Catalog | None = None) -> BootstrapReport:
    """Run the registration phase for ``catalog`` exactly once.

    Import and load errors are logged and skipped: the plugins they would
    have registered are just missing afterwards.

    Parameters
    ----------
    config:
        What to load. Defaults to ``BootstrapConfig()``, which loads the
        "linktime.plugins" entry-point group.
    catalog:
        Catalog to bootstrap. Defaults to the process-wide catalog.

    Returns
    -------
    BootstrapReport
        The report of the first call, on this and every later call. A
        nested call made while the same catalog is bootstrapping gets an
        interim report instead.
    """
    target = catalog if catalog is not None else default_catalog()
    settings = config if config is not None else BootstrapConfig()

    with _guard_for(target):
        previous = _reports.get(target)
        if previous is not None:
            logger.debug("Catalog %r already bootstrapped; skipping.", target.name)
            return previous
        if target in _in_progress:
            # Called from a plugin module while this thread is bootstrapping it.
            logger.debug("Catalog %r is already bootstrapping; skipping nested call.", target.name)
            return BootstrapReport(imported=(), failed=(), plugin_count=_count_plugins(target))

        _in_progress.add(target)
        try:
            imported: list[str] = []
            failed: list[str] = []
            _import_modules(settings.modules, imported, failed)
            _load_entry_points(settings.entry_point_groups, imported, failed)
            if settings.seal:
                target.seal()
        finally:
            _in_progress.discard(target)

        report = BootstrapReport(
            imported=tuple(imported),
            failed=tuple(failed),
            plugin_count=_count_plugins(target),
        )
        _reports[target] = report

    logger.info(
        "Bootstrapped catalog %r: %d plugin(s), %d source(s) loaded, %d failed",
        target.name,
        report.plugin_count,
        len(report.imported),
        len(report.failed),
    )
    return report


def is_bootstrapped(catalog: Catalog | None = None) -> bool:
    """Return ``True`` once :func:`bootstrap` has run for ``catalog``."""
    target = catalog if catalog is not None else default_catalog()
    return target in _reports

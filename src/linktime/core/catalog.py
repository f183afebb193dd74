"""Catalog — the map from extension-point type to its registry.

Python has no per-type static storage, so a catalog keeps one
:class:`~linktime.core.registry.Registry` per extension point in a dict
keyed by the type object and allocates it the first time a plugin for that
type registers.

The process-wide catalog is returned by :func:`default_catalog`. Tests and
embedders that need isolation create their own :class:`Catalog`.
"""
from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, TypeVar

from linktime.core.entry import Entry
from linktime.core.errors import CatalogSealedError
from linktime.core.registry import Registry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Phase(Enum):
    """Lifecycle phase of a catalog.

    REGISTERING
        Bootstrap is in progress; plugins may register.
    STABLE
        Bootstrap has completed; the catalog is read-only.
    """

    REGISTERING = "registering"
    STABLE = "stable"


class Catalog:
    """Process-wide, type-partitioned, write-once/read-many plugin catalog.

    Parameters
    ----------
    name:
        A human-readable name, used in log messages and ``repr``.
    """

    def __init__(self, name: str = "default") -> None:
        self._name = name
        self._registries: dict[type, Registry[Any]] = {}
        self._phase = Phase.REGISTERING
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Human-readable name used in log messages."""
        return self._name

    @property
    def phase(self) -> Phase:
        """Current lifecycle phase."""
        return self._phase

    @property
    def sealed(self) -> bool:
        """``True`` once the catalog has moved to ``Phase.STABLE``."""
        return self._phase is Phase.STABLE

    def seal(self) -> None:
        """Move the catalog to ``Phase.STABLE``. Sealing twice is a no-op."""
        with self._lock:
            if self._phase is Phase.STABLE:
                return
            self._phase = Phase.STABLE
        logger.debug(
            "Catalog %r sealed with %d extension point(s)",
            self._name,
            len(self._registries),
        )

    def registry_for(self, extension_point: type[T], *, create: bool = False) -> Registry[T] | None:
        """Return the registry for ``extension_point``.

        Parameters
        ----------
        extension_point:
            The root extension-point type.
        create:
            Allocate the registry if it does not exist yet. Only allowed
            while the catalog is still registering.

        Returns
        -------
        Registry[T] | None
            ``None`` when the registry does not exist and ``create`` is false.

        Raises
        ------
        CatalogSealedError
            If ``create`` is true and the catalog is sealed.
        """
        if create:
            with self._lock:
                return self._open_registry(extension_point)
        return self._registries.get(extension_point)

    def add(self, entry: Entry[T]) -> bool:
        """Append ``entry`` to the registry of its extension point.

        The phase check, the lazy registry allocation and the append happen
        under one lock, so nothing lands in a sealed catalog and no registry
        exists without an entry in it.

        Returns
        -------
        bool
            ``True`` if the entry was added; see :meth:`Registry.register`.

        Raises
        ------
        CatalogSealedError
            If the catalog is sealed.
        """
        with self._lock:
            registry = self._open_registry(entry.extension_point)
            added = registry.register(entry)
            if not added and len(registry) == 0:
                del self._registries[entry.extension_point]
            return added

    def _open_registry(self, extension_point: type[T]) -> Registry[T]:
        # Caller holds self._lock.
        if self._phase is Phase.STABLE:
            raise CatalogSealedError(extension_point)
        registry = self._registries.get(extension_point)
        if registry is None:
            registry = Registry(extension_point)
            self._registries[extension_point] = registry
            logger.debug(
                "Created registry for extension point %s in catalog %r",
                extension_point.__qualname__,
                self._name,
            )
        return registry

    def query(self, extension_point: type[T]) -> list[T]:
        """Return every registered instance of ``extension_point``.

        A type nobody registered a plugin for yields an empty list.
        """
        if not isinstance(extension_point, type):
            raise TypeError(f"Expected an extension-point class, got {extension_point!r}")
        registry = self._registries.get(extension_point)
        if registry is None:
            return []
        return registry.query_all()

    def extension_points(self) -> list[type]:
        """Return every extension point with a registry, in creation order."""
        return list(self._registries)

    def __len__(self) -> int:
        return len(self._registries)

    def __repr__(self) -> str:
        names = [ep.__qualname__ for ep in self._registries]
        return f"Catalog(name={self._name!r}, phase={self._phase.value}, extension_points={names})"


_default_catalog = Catalog()


def default_catalog() -> Catalog:
    """Return the process-wide catalog used when no catalog is passed."""
    return _default_catalog

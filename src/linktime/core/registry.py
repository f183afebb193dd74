"""Per-extension-point registry of plugin entries.

A :class:`Registry` is append-only. Its backing storage is a tuple that is
replaced on every append, so readers never need a lock: whatever tuple they
pick up is complete and will never change underneath them.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from typing import Generic, TypeVar

from linktime.core.entry import Entry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Registry(Generic[T]):
    """Ordered collection of the entries registered for one extension point.

    Parameters
    ----------
    extension_point:
        The root extension-point type this registry is scoped to.
    """

    def __init__(self, extension_point: type[T]) -> None:
        self._extension_point = extension_point
        self._entries: tuple[Entry[T], ...] = ()
        self._write_lock = threading.Lock()

    @property
    def extension_point(self) -> type[T]:
        return self._extension_point

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, entry: Entry[T]) -> bool:
        """Append ``entry`` to this registry.

        Never raises. If the append fails the entry is left out and the
        failure is logged; callers only ever observe a missing plugin.

        Parameters
        ----------
        entry:
            The entry to add. Must belong to this registry's extension point.

        Returns
        -------
        bool
            ``True`` if the entry was added.
        """
        try:
            with self._write_lock:
                self._entries = self._entries + (entry,)
        except Exception:
            logger.exception(
                "Failed to add %r to the %s registry; the plugin will be missing.",
                entry,
                self._extension_point.__qualname__,
            )
            return False
        logger.debug(
            "Registered plugin %s in the %s registry (%d total)",
            entry.plugin_class.__qualname__,
            self._extension_point.__qualname__,
            len(self._entries),
        )
        return True

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def query_all(self) -> list[T]:
        """Return one instance per registered entry, in registration order.

        Returns
        -------
        list[T]
            A new list on every call. The instances themselves are the same
            objects every time.
        """
        return [entry.instance for entry in self._entries]

    def __iter__(self) -> Iterator[Entry[T]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        plugins = [entry.plugin_class.__qualname__ for entry in self._entries]
        return (
            f"Registry(extension_point={self._extension_point.__qualname__}, "
            f"plugins={plugins})"
        )

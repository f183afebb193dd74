"""Declaration surface: extension points and self-registering plugins.

Example
-------
Declare an extension point::

    from abc import ABC, abstractmethod
    from linktime import extension_point

    @extension_point
    class Shape(ABC):
        @abstractmethod
        def area(self) -> float: ...

Declare and register a plugin, anywhere, in any module::

    from linktime import register_plugin

    @register_plugin
    class Square(Shape):
        def area(self) -> float:
            return 4.0

The decorator runs when the module is imported. Importing the module, which
:func:`linktime.startup.bootstrap` does for every declared plugin module,
is all it takes; no other code needs to name ``Square``.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar, overload

from linktime.core.catalog import Catalog, default_catalog
from linktime.core.entry import Entry
from linktime.core.errors import CatalogSealedError, NotAnExtensionPointError

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C", bound=type)

MARKER = "__extension_point__"


def extension_point(cls: C) -> C:
    """Mark ``cls`` as the root type of an extension point.

    Subclasses inherit the marker, which routes them to this class's
    registry when they are registered.

    Raises
    ------
    TypeError
        If ``cls`` is not a class.
    """
    if not isinstance(cls, type):
        raise TypeError(f"@extension_point must decorate a class, got {cls!r}")
    setattr(cls, MARKER, cls)
    return cls


def is_extension_point(cls: object) -> bool:
    """Return ``True`` if ``cls`` is itself a marked extension-point root."""
    return isinstance(cls, type) and cls.__dict__.get(MARKER) is cls


def extension_point_of(plugin_class: type) -> type:
    """Return the root extension point ``plugin_class`` registers under.

    Raises
    ------
    NotAnExtensionPointError
        If ``plugin_class`` is not a class, has no marked ancestor, or is
        the extension point itself.
    """
    if not isinstance(plugin_class, type):
        raise NotAnExtensionPointError(plugin_class, "only classes can be plugins")
    root = getattr(plugin_class, MARKER, None)
    if not isinstance(root, type) or not issubclass(plugin_class, root):
        raise NotAnExtensionPointError(
            plugin_class, "none of its base classes is marked with @extension_point"
        )
    if root is plugin_class:
        raise NotAnExtensionPointError(
            plugin_class, "an extension point cannot register itself as its own plugin"
        )
    return root


def register(plugin_class: type[T], catalog: Catalog | None = None) -> Entry[T] | None:
    """Build one entry for ``plugin_class`` and add it to its registry.

    This is what ``@register_plugin`` calls. Failures while registering are
    logged and swallowed: the plugin is simply absent from later queries.
    Registering the same class twice is not detected and produces two
    entries; avoid it.

    Parameters
    ----------
    plugin_class:
        A concrete subclass of a marked extension point.
    catalog:
        Catalog to register in. Defaults to the process-wide catalog.

    Returns
    -------
    Entry[T] | None
        The new entry, or ``None`` if registration failed.

    Raises
    ------
    NotAnExtensionPointError
        If ``plugin_class`` cannot be routed to an extension point. This is
        a declaration mistake and is reported immediately.
    """
    root = extension_point_of(plugin_class)
    target = catalog if catalog is not None else default_catalog()

    try:
        entry: Entry[T] = Entry(plugin_class, root)
    except Exception:
        logger.exception(
            "Failed to construct plugin %s; it will be missing from the %s registry.",
            plugin_class.__qualname__,
            root.__qualname__,
        )
        return None

    try:
        added = target.add(entry)
    except CatalogSealedError:
        logger.warning(
            "Plugin %s was declared after catalog %r was sealed; it will not be listed.",
            plugin_class.__qualname__,
            target.name,
        )
        return None
    except MemoryError:
        logger.error(
            "Out of memory creating the %s registry; plugin %s will be missing.",
            root.__qualname__,
            plugin_class.__qualname__,
        )
        return None

    if not added:
        return None
    return entry


@overload
def register_plugin(cls: C) -> C: ...


@overload
def register_plugin(*, catalog: Catalog | None = ...) -> Callable[[C], C]: ...


def register_plugin(cls: Any = None, *, catalog: Catalog | None = None) -> Any:
    """Class decorator that registers one plugin class.

    Usable bare (``@register_plugin``) or with a target catalog
    (``@register_plugin(catalog=my_catalog)``). The decorated class is
    returned unchanged.
    """

    def decorator(plugin_class: C) -> C:
        register(plugin_class, catalog)
        return plugin_class

    if cls is None:
        return decorator
    return decorator(cls)

"""Query API: list the registered instances of an extension point."""
from __future__ import annotations

from typing import TypeVar

from linktime.core.catalog import Catalog, default_catalog

T = TypeVar("T")


def plugins_of(extension_point: type[T], catalog: Catalog | None = None) -> list[T]:
    """Return every registered instance of ``extension_point``.

    Instances come back in registration order and are the same objects on
    every call. An extension point with no plugins yields an empty list.

    Example
    -------
    ::

        total = sum(shape.area() for shape in plugins_of(Shape))
    """
    target = catalog if catalog is not None else default_catalog()
    return target.query(extension_point)

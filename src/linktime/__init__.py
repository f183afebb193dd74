"""linktime — self-registering plugins, looked up by extension-point type.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    from abc import ABC, abstractmethod

    import linktime

    @linktime.extension_point
    class Shape(ABC):
        @abstractmethod
        def area(self) -> float: ...

    @linktime.register_plugin
    class Circle(Shape):
        def area(self) -> float:
            return 3.14

    linktime.bootstrap()
    sum(shape.area() for shape in linktime.plugins_of(Shape))

    linktime.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from linktime.startup import BootstrapConfig, BootstrapReport, bootstrap, load_config
from linktime.core import (
    Catalog,
    CatalogSealedError,
    LinktimeError,
    ManifestError,
    NotAnExtensionPointError,
    Phase,
    default_catalog,
)
from linktime.plugins import extension_point, plugins_of, register_plugin

__all__ = [
    "BootstrapConfig",
    "BootstrapReport",
    "Catalog",
    "CatalogSealedError",
    "LinktimeError",
    "ManifestError",
    "NotAnExtensionPointError",
    "Phase",
    "__version__",
    "bootstrap",
    "default_catalog",
    "extension_point",
    "load_config",
    "plugins_of",
    "register_plugin",
]

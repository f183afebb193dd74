"""Exception types for linktime.

Only declaration mistakes surface as exceptions in application code.
Failures that happen while plugins register themselves are logged and
swallowed at their point of origin; see :mod:`linktime.plugins.registration`.
"""
from __future__ import annotations


class LinktimeError(Exception):
    """Base class for all linktime errors."""


class NotAnExtensionPointError(LinktimeError, TypeError):
    """Raised when a class cannot be routed to an extension point.

    Parameters
    ----------
    obj:
        The object passed to ``@register_plugin``.
    reason:
        Short explanation appended to the message.
    """

    def __init__(self, obj: object, reason: str) -> None:
        self.obj = obj
        super().__init__(f"Cannot register {obj!r} as a plugin: {reason}.")


class CatalogSealedError(LinktimeError, RuntimeError):
    """Raised when a registry is requested for writing after bootstrap."""

    def __init__(self, extension_point: type) -> None:
        self.extension_point = extension_point
        super().__init__(
            f"Catalog is sealed; cannot register a plugin for "
            f"{extension_point.__qualname__} after bootstrap has completed."
        )


class ManifestError(LinktimeError, ValueError):
    """Raised when a bootstrap manifest cannot be read or is malformed."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"Invalid bootstrap manifest {source}: {message}")

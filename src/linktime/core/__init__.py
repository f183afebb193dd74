"""Core data structures: entries, registries and the catalog.

Submodules in core/ should not import from plugins/, startup/ or cli/.
"""
from __future__ import annotations

from linktime.core.catalog import Catalog, Phase, default_catalog
from linktime.core.entry import Entry
from linktime.core.errors import (
    CatalogSealedError,
    LinktimeError,
    ManifestError,
    NotAnExtensionPointError,
)
from linktime.core.registry import Registry

__all__ = [
    "Catalog",
    "CatalogSealedError",
    "Entry",
    "LinktimeError",
    "ManifestError",
    "NotAnExtensionPointError",
    "Phase",
    "Registry",
    "default_catalog",
]

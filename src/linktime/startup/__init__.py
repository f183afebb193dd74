"""Bootstrap: the explicit registration phase.

Call :func:`bootstrap` once at startup, before the first query::

    from linktime.startup import bootstrap, load_config

    bootstrap(load_config("plugins.yaml"))
"""
from __future__ import annotations

from linktime.startup.config import (
    DEFAULT_ENTRY_POINT_GROUP,
    BootstrapConfig,
    load_config,
    parse_config,
)
from linktime.startup.loader import BootstrapReport, bootstrap, is_bootstrapped

__all__ = [
    "DEFAULT_ENTRY_POINT_GROUP",
    "BootstrapConfig",
    "BootstrapReport",
    "bootstrap",
    "is_bootstrapped",
    "load_config",
    "parse_config",
]

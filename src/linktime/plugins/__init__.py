"""Plugin declaration and lookup.

Extension points are marked with ``@extension_point``; plugins announce
themselves with ``@register_plugin``; consumers call ``plugins_of``.

Third-party packages expose their plugin modules under the
"linktime.plugins" entry-point group so that bootstrap imports them:

.. code-block:: toml

    [project.entry-points."linktime.plugins"]
    my_shapes = "my_package.shapes"
"""
from __future__ import annotations

from linktime.plugins.query import plugins_of
from linktime.plugins.registration import (
    extension_point,
    extension_point_of,
    is_extension_point,
    register,
    register_plugin,
)

__all__ = [
    "extension_point",
    "extension_point_of",
    "is_extension_point",
    "plugins_of",
    "register",
    "register_plugin",
]

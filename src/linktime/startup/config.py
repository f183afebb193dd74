"""Bootstrap manifest: which plugin modules to import at startup.

A manifest is a small YAML file::

    modules:
      - my_app.shapes.circle
      - my_app.shapes.square
    entry_point_groups:
      - linktime.plugins
    seal: true

Every key is optional. An empty file gives the defaults.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from linktime.core.errors import ManifestError

DEFAULT_ENTRY_POINT_GROUP = "linktime.plugins"

_KNOWN_KEYS = frozenset({"modules", "entry_point_groups", "seal"})


@dataclass(frozen=True)
class BootstrapConfig:
    """What :func:`linktime.startup.loader.bootstrap` should load.

    Parameters
    ----------
    modules:
        Dotted module names imported during bootstrap.
    entry_point_groups:
        Entry-point groups whose entries are loaded during bootstrap.
    seal:
        Seal the catalog once loading is done.
    """

    modules: tuple[str, ...] = ()
    entry_point_groups: tuple[str, ...] = (DEFAULT_ENTRY_POINT_GROUP,)
    seal: bool = True


def _string_tuple(data: dict[str, object], key: str, default: tuple[str, ...], source: str) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(isinstance(item, str) and item for item in value):
        raise ManifestError(source, f"{key!r} must be a list of non-empty strings")
    return tuple(value)


def parse_config(text: str, source: str = "<string>") -> BootstrapConfig:
    """Build a :class:`BootstrapConfig` from YAML text.

    Raises
    ------
    ManifestError
        If the text is not valid YAML, is not a mapping, has unknown keys,
        or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(source, f"not valid YAML ({exc})") from exc

    if data is None:
        return BootstrapConfig()
    if not isinstance(data, dict):
        raise ManifestError(source, "top level must be a mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ManifestError(source, f"unknown key(s): {', '.join(unknown)}")

    seal = data.get("seal", True)
    if not isinstance(seal, bool):
        raise ManifestError(source, "'seal' must be true or false")

    return BootstrapConfig(
        modules=_string_tuple(data, "modules", (), source),
        entry_point_groups=_string_tuple(
            data, "entry_point_groups", (DEFAULT_ENTRY_POINT_GROUP,), source
        ),
        seal=seal,
    )


def load_config(path: str | Path) -> BootstrapConfig:
    """Read a bootstrap manifest from ``path``.

    Raises
    ------
    ManifestError
        If the file cannot be read or its content is malformed.
    """
    manifest = Path(path)
    try:
        text = manifest.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(str(manifest), f"cannot read file ({exc})") from exc
    return parse_config(text, source=str(manifest))

"""Entry — the self-registering wrapper around one plugin instance."""
from __future__ import annotations

from typing import Any, Generic, NoReturn, TypeVar

T = TypeVar("T")


class Entry(Generic[T]):
    """Own exactly one plugin instance and expose it as the extension point.

    The plugin is default-constructed when the entry is created; nothing
    else is available at registration time, so plugins must be able to
    build themselves without arguments.

    An entry's identity is part of its contract: registries hold it by
    reference and callers may compare instances across queries, so entries
    refuse to be copied or pickled.

    Parameters
    ----------
    plugin_class:
        The concrete plugin class to instantiate.
    extension_point:
        The root extension-point type the instance is exposed as.

    Raises
    ------
    TypeError
        If the constructed instance is not an ``extension_point``.
    """

    __slots__ = ("_plugin_class", "_extension_point", "_instance")

    def __init__(self, plugin_class: type[T], extension_point: type[T]) -> None:
        instance = plugin_class()
        if not isinstance(instance, extension_point):
            raise TypeError(
                f"{plugin_class.__qualname__}() did not produce an instance of "
                f"{extension_point.__qualname__}."
            )
        self._plugin_class = plugin_class
        self._extension_point = extension_point
        self._instance: T = instance

    @property
    def instance(self) -> T:
        """Return the owned plugin instance. Always the same object."""
        return self._instance

    @property
    def plugin_class(self) -> type[T]:
        return self._plugin_class

    @property
    def extension_point(self) -> type[T]:
        return self._extension_point

    def __copy__(self) -> NoReturn:
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} objects cannot be pickled")

    def __repr__(self) -> str:
        return (
            f"Entry(plugin={self._plugin_class.__qualname__}, "
            f"extension_point={self._extension_point.__qualname__})"
        )

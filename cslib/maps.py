"""Maps from string keys to values.

``HashMap`` iterates in no particular guaranteed order (insertion order in
practice), while ``Map`` always iterates over its keys in sorted order.
Both behave like ordinary mutable mappings, and ``get`` returns ``None``
for a missing key.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from typing import Any

__all__ = ["HashMap", "Map"]


class _StringKeyMap(MutableMapping[str, Any]):
    """Shared behaviour for maps whose keys must be strings."""

    def __init__(
        self,
        items: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        self._data: dict[str, Any] = {}
        if items is not None:
            self.update(items)
        self.update(kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"map keys must be strings, not {type(key).__name__}")
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def clear(self) -> None:
        """Remove every entry."""
        self._data.clear()

    def _visit(self, fn: Callable[[str, Any, Any], Any], data: Any) -> None:
        for key in list(self):
            fn(key, self._data[key], data)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {self._data[key]!r}" for key in self)
        return f"{type(self).__name__}({{{body}}})"


class HashMap(_StringKeyMap):
    """A hash-based map from strings to values."""

    def clone(self) -> HashMap:
        """Return a shallow copy; the values themselves are shared."""
        return HashMap(self._data)

    def for_each(self, fn: Callable[[str, Any, Any], Any], data: Any = None) -> None:
        """Call ``fn(key, value, data)`` for every entry."""
        self._visit(fn, data)


class Map(_StringKeyMap):
    """A map from strings to values that iterates in sorted key order."""

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def clone(self) -> Map:
        """Return a shallow copy; the values themselves are shared."""
        return Map(self._data)

    def for_each(self, fn: Callable[[str, Any, Any], Any], data: Any = None) -> None:
        """Call ``fn(key, value, data)`` for every entry in sorted key order."""
        self._visit(fn, data)
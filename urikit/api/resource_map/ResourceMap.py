"""Mapping from URIs to values, keyed by a string identity of each URI."""

from collections.abc import Callable, Iterator, MutableMapping
from typing import Generic, TypeVar, overload

from ..uri.URI import URI

T = TypeVar("T")
D = TypeVar("D")

ResourceMapKeyFn = Callable[[URI], str]


def _default_to_key(resource: URI) -> str:
    return resource.to_string()


class ResourceMap(MutableMapping[URI, T], Generic[T]):
    """Dictionary of values keyed by URI.

    Entries are stored under `to_key(uri)`, the canonical string by default,
    so two URI objects with the same identity share an entry. Keys handed
    back by iteration, `keys()` and `items()` are re-parsed from the stored
    strings on every traversal.
    """

    def __init__(
        self,
        map_or_key_fn: "ResourceMap[T] | ResourceMapKeyFn | None" = None,
        to_key: ResourceMapKeyFn | None = None,
    ):
        """Create an empty map, or a copy of another ResourceMap.

        Args:
            map_or_key_fn: Another ResourceMap to copy entries from, or a
                custom key function
            to_key: Key function for a copied map; defaults to the
                canonical string
        """
        if isinstance(map_or_key_fn, ResourceMap):
            self._map: dict[str, T] = dict(map_or_key_fn._map)
            self._to_key: ResourceMapKeyFn = to_key or _default_to_key
        else:
            self._map = {}
            self._to_key = map_or_key_fn or _default_to_key

    def __repr__(self):
        return f"ResourceMap({self._map!r})"

    # ---- MutableMapping protocol -----------------------------------------

    def __getitem__(self, resource: URI) -> T:
        return self._map[self._to_key(resource)]

    def __setitem__(self, resource: URI, value: T) -> None:
        self._map[self._to_key(resource)] = value

    def __delitem__(self, resource: URI) -> None:
        del self._map[self._to_key(resource)]

    def __contains__(self, resource: object) -> bool:
        if not isinstance(resource, URI):
            return False
        return self._to_key(resource) in self._map

    def __iter__(self) -> Iterator[URI]:
        for key in list(self._map):
            yield URI.parse(key)

    def __len__(self) -> int:
        return len(self._map)

    # ---- map-style API ----------------------------------------------------

    def set(self, resource: URI, value: T) -> "ResourceMap[T]":
        """Store a value and return the map for chaining."""
        self[resource] = value
        return self

    @overload
    def get(self, resource: URI) -> T | None: ...

    @overload
    def get(self, resource: URI, default: D) -> T | D: ...

    def get(self, resource, default=None):
        return self._map.get(self._to_key(resource), default)

    def has(self, resource: URI) -> bool:
        return resource in self

    def delete(self, resource: URI) -> bool:
        """Remove an entry; returns whether one was present."""
        key = self._to_key(resource)
        if key not in self._map:
            return False
        del self._map[key]
        return True

    def clear(self) -> None:
        self._map.clear()

    @property
    def size(self) -> int:
        return len(self._map)

    def for_each(self, callback: Callable[[T, URI, "ResourceMap[T]"], None]) -> None:
        """Call `callback(value, uri, map)` for every entry."""
        for key, value in list(self._map.items()):
            callback(value, URI.parse(key), self)

    def values(self) -> Iterator[T]:  # type: ignore[override]
        return iter(list(self._map.values()))

    def keys(self) -> Iterator[URI]:  # type: ignore[override]
        return iter(self)

    def items(self) -> Iterator[tuple[URI, T]]:  # type: ignore[override]
        for key, value in list(self._map.items()):
            yield URI.parse(key), value

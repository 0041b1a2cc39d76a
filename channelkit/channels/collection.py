"""Keyed caches used by clients, guilds and channels."""

from __future__ import annotations

from typing import Any, Callable, Generic, Hashable, Iterator, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Collection(dict, Generic[K, V]):
    """Dictionary with the ``get``/``set`` surface the channel factory writes to.

    The collection only stores what it is given; it never evicts.
    """

    def set(self, key: K, value: V) -> "Collection[K, V]":
        """Store ``value`` under ``key``, replacing any existing entry."""
        self[key] = value
        return self

    def has(self, key: K) -> bool:
        return key in self

    def delete(self, key: K) -> bool:
        """Remove ``key``. Returns True if an entry was removed."""
        return self.pop(key, _MISSING) is not _MISSING

    def filter(self, predicate: Callable[[V], bool]) -> "Collection[K, V]":
        """Return a new collection with the values matching ``predicate``."""
        return Collection((key, value) for key, value in self.items() if predicate(value))

    def first(self) -> Optional[V]:
        return next(iter(self.values()), None)

    def __repr__(self) -> str:
        return f"Collection({dict.__repr__(self)})"


_MISSING = object()


class CachingManager(Generic[K, V]):
    """Owns a :class:`Collection` on behalf of a client, guild or channel."""

    def __init__(self, owner: Any):
        self.owner = owner
        self.cache: Collection[K, V] = Collection()

    def __len__(self) -> int:
        return len(self.cache)

    def __iter__(self) -> Iterator[V]:
        return iter(self.cache.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self.cache)})"

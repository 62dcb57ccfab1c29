"""One-to-many lookup tables derived from repository contents.

A GroupedIndex is a cache: it reflects the source sequence passed to the
last ``rebuild`` and must be rebuilt after the source changes.
"""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Iterable, TypeVar

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class GroupedIndex(Generic[K, T]):
    """Maps a foreign-key value to the entities that reference it."""

    def __init__(self) -> None:
        self._buckets: dict[K, list[T]] = {}

    def rebuild(self, source: Iterable[T], key_fn: Callable[[T], K]) -> None:
        """Replace the index contents with buckets built from source.

        Args:
            source: Entities to group, usually a repository snapshot.
            key_fn: Extracts the foreign key from an entity.
        """
        buckets: dict[K, list[T]] = {}
        for entity in source:
            buckets.setdefault(key_fn(entity), []).append(entity)
        # Previous contents survive a key_fn failure.
        self._buckets = buckets

    def lookup(self, key: K) -> list[T]:
        """Entities grouped under key, in source order. Empty if none."""
        return list(self._buckets.get(key, []))

    def keys(self) -> list[K]:
        return list(self._buckets)

    def __contains__(self, key: object) -> bool:
        return key in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

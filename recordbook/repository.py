"""In-memory entity repositories.

Two variants share the same surface:

    Repository[T]        list-backed, ids need not be unique, misses
                         return None or False.
    KeyedRepository[T]   id-keyed, rejects duplicates, misses raise
                         NotFoundError.

InventoryRepository adds quantity updates on top of the keyed variant.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Hashable, Iterator, Optional, Protocol, TypeVar

from recordbook.exceptions import DuplicateKeyError, InvalidQuantityError, NotFoundError

logger = logging.getLogger(__name__)


class Identified(Protocol):
    """Anything with an ``id`` attribute."""

    @property
    def id(self) -> Hashable: ...


class Stocked(Identified, Protocol):
    """An identified entity with a mutable stock quantity."""

    quantity: int


T = TypeVar("T", bound=Identified)
S = TypeVar("S", bound=Stocked)


class Repository(Generic[T]):
    """Ordered collection of entities; duplicate ids are allowed."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, entity: T) -> None:
        self._items.append(entity)

    def get_all(self) -> list[T]:
        """Snapshot of all entities in insertion order."""
        return list(self._items)

    def get_by_id(self, entity_id: Hashable) -> Optional[T]:
        return self.find(lambda e: e.id == entity_id)

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first entity matching predicate, or None."""
        for entity in self._items:
            if predicate(entity):
                return entity
        return None

    def remove_where(self, predicate: Callable[[T], bool]) -> bool:
        """Remove the first entity matching predicate.

        Returns True if an entity was removed, False if nothing matched.
        """
        for i, entity in enumerate(self._items):
            if predicate(entity):
                del self._items[i]
                return True
        return False

    def remove_by_id(self, entity_id: Hashable) -> bool:
        return self.remove_where(lambda e: e.id == entity_id)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))


class KeyedRepository(Generic[T]):
    """Entities keyed by id. Insertion order is kept for iteration."""

    def __init__(self) -> None:
        self._items: dict[Hashable, T] = {}

    def add(self, entity: T) -> None:
        """Store an entity.

        Raises:
            DuplicateKeyError: an entity with the same id is already stored.
        """
        if entity.id in self._items:
            raise DuplicateKeyError(entity.id)
        self._items[entity.id] = entity
        logger.debug("Added %s %s", type(entity).__name__, entity.id)

    def get_all(self) -> list[T]:
        return list(self._items.values())

    def get_by_id(self, entity_id: Hashable) -> T:
        try:
            return self._items[entity_id]
        except KeyError:
            raise NotFoundError(entity_id) from None

    def find(self, predicate: Callable[[T], bool]) -> T:
        for entity in self._items.values():
            if predicate(entity):
                return entity
        raise NotFoundError()

    def remove(self, entity_id: Hashable) -> None:
        """Delete the entity with the given id.

        Raises:
            NotFoundError: no entity has that id.
        """
        if entity_id not in self._items:
            raise NotFoundError(entity_id)
        del self._items[entity_id]
        logger.debug("Removed item %s", entity_id)

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))


class InventoryRepository(KeyedRepository[S]):
    """Keyed repository of stock items."""

    def update_quantity(self, entity_id: Hashable, new_quantity: int) -> None:
        """Set the stored quantity of an item in place.

        The quantity is validated before the lookup, so a negative value is
        rejected even for unknown ids.

        Raises:
            InvalidQuantityError: new_quantity is negative.
            NotFoundError: no item has that id.
        """
        if new_quantity < 0:
            raise InvalidQuantityError(new_quantity)
        item = self.get_by_id(entity_id)
        item.quantity = new_quantity
        logger.debug("Item %s quantity set to %d", entity_id, new_quantity)

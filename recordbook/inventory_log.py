"""JSON-file-backed inventory logger.

The whole in-memory sequence is written as one JSON array; loading replaces
the in-memory sequence. A store file that does not exist yet loads as empty.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Generic, Protocol, TypeVar

from recordbook.exceptions import StoreCorruptError

logger = logging.getLogger(__name__)


class Serializable(Protocol):
    def to_dict(self) -> dict: ...


T = TypeVar("T", bound=Serializable)


class InventoryLogger(Generic[T]):
    """Ordered list of entities persisted to a JSON file.

    Args:
        path: JSON store location.
        from_dict: Builds an entity from one decoded JSON object, e.g.
            ``InventoryItem.from_dict``.
    """

    def __init__(self, path: Path, from_dict: Callable[[dict], T]) -> None:
        self.path = Path(path)
        self._from_dict = from_dict
        self._items: list[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)

    def get_all(self) -> list[T]:
        return list(self._items)

    def save_to_file(self) -> Path:
        """Write every entity to the store. Returns the store path."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps([item.to_dict() for item in self._items], indent=2),
            encoding="utf-8",
        )
        logger.info("Saved %d items to %s", len(self._items), self.path)
        return self.path

    def load_from_file(self) -> list[T]:
        """Replace in-memory contents with the store's contents.

        Returns the loaded entities.

        Raises:
            StoreCorruptError: the file exists but is not a valid store.
        """
        if not self.path.exists():
            logger.warning("Store %s not found, starting empty", self.path)
            self._items = []
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise StoreCorruptError(str(self.path), "expected a JSON array")
            items = [self._from_dict(d) for d in raw]
        except json.JSONDecodeError as e:
            raise StoreCorruptError(str(self.path), str(e)) from e
        except (KeyError, TypeError, ValueError) as e:
            raise StoreCorruptError(str(self.path), f"bad record: {e}") from e
        self._items = items
        logger.debug("Loaded %d items from %s", len(items), self.path)
        return list(items)

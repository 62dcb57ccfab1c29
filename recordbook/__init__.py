"""recordbook: in-memory record repositories with grouped lookups.

Holds uniquely-identified records (patients, prescriptions, stock items) in
memory, answers one-to-many lookups over them, grades student score files and
keeps a JSON-backed inventory log.

Usage:
    python -m recordbook report scores.txt report.txt   # Grade a score file
    python -m recordbook stock add "USB cable" 40       # Append to the JSON store
    python -m recordbook stock list                     # Show the JSON store
"""

from recordbook.exceptions import (
    DuplicateKeyError,
    InvalidEncodingError,
    InvalidQuantityError,
    InvalidScoreFormatError,
    MissingFieldError,
    NotFoundError,
    RecordbookError,
    StoreCorruptError,
)
from recordbook.healthcare import HealthRecords
from recordbook.index import GroupedIndex
from recordbook.repository import InventoryRepository, KeyedRepository, Repository
from recordbook.warehouse import WarehouseManager

__all__ = [
    "DuplicateKeyError",
    "GroupedIndex",
    "HealthRecords",
    "InvalidEncodingError",
    "InvalidQuantityError",
    "InvalidScoreFormatError",
    "InventoryRepository",
    "KeyedRepository",
    "MissingFieldError",
    "NotFoundError",
    "RecordbookError",
    "Repository",
    "StoreCorruptError",
    "WarehouseManager",
]

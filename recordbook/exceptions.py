"""Exceptions raised by recordbook repositories, readers and stores.

Not-found and invalid-value errors also subclass KeyError / ValueError so
callers that only know the builtin contract can still catch them.
"""

from __future__ import annotations

from typing import Any, Optional


class RecordbookError(Exception):
    """Base exception for all recordbook errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DuplicateKeyError(RecordbookError):
    """Raised when an entity with the same identifier is already stored."""

    def __init__(self, entity_id: Any):
        super().__init__(
            message=f"Item with ID {entity_id} already exists",
            details={"id": entity_id},
        )


class NotFoundError(RecordbookError, KeyError):
    """Raised when no stored entity matches an identifier or predicate."""

    def __init__(self, entity_id: Any = None):
        if entity_id is None:
            message = "No matching item found"
        else:
            message = f"Item with ID {entity_id} not found"
        super().__init__(message=message, details={"id": entity_id})


class InvalidQuantityError(RecordbookError, ValueError):
    """Raised when a stock quantity would become negative."""

    def __init__(self, quantity: int):
        super().__init__(
            message=f"Quantity cannot be negative: {quantity}",
            details={"quantity": quantity},
        )


class RecordFormatError(RecordbookError, ValueError):
    """Base for malformed lines in a score input file."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        super().__init__(
            message=f"Line {line_number}: {reason}",
            details={"line_number": line_number, "line": line, "reason": reason},
        )


class MissingFieldError(RecordFormatError):
    """Raised when a score line has fewer than three fields."""

    def __init__(self, line_number: int, line: str):
        super().__init__(line_number, line, f"expected id,fullName,score but got '{line}'")


class InvalidScoreFormatError(RecordFormatError):
    """Raised when the id or score of a line is not an integer."""

    def __init__(self, line_number: int, line: str, field: str, value: str):
        super().__init__(line_number, line, f"invalid {field} '{value}'")


class InvalidEncodingError(RecordFormatError):
    """Raised when a line of a score file is not valid UTF-8."""

    def __init__(self, line_number: int, raw: bytes, reason: str):
        super().__init__(line_number, repr(raw), f"not valid UTF-8 ({reason})")


class StoreCorruptError(RecordbookError):
    """Raised when a JSON store exists but cannot be decoded."""

    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"Cannot read store {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message=message, details={"path": path, "reason": reason})

"""Record types stored in recordbook repositories.

Patient/Prescription feed the health records, ElectronicItem/GroceryItem the
warehouse, Student the score report and InventoryItem the JSON logger.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

# Lower bound (inclusive) for each letter grade, highest first.
GRADE_THRESHOLDS: list[tuple[int, str]] = [
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
]
FAILING_GRADE = "F"


def grade_for(score: int) -> str:
    """Letter grade for a numeric score."""
    for lower, letter in GRADE_THRESHOLDS:
        if score >= lower:
            return letter
    return FAILING_GRADE


@dataclass
class Patient:
    id: int
    name: str
    age: int
    gender: str


@dataclass
class Prescription:
    id: int
    patient_id: int
    medication_name: str
    date_issued: date


@dataclass
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int


@dataclass
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: date


@dataclass
class Student:
    """A student line from the score input file."""

    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        return grade_for(self.score)

    def report_line(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"


@dataclass
class InventoryItem:
    """Stock entry persisted by the inventory logger."""

    id: int
    name: str
    quantity: int
    date_added: datetime

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "date_added": self.date_added.isoformat(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> InventoryItem:
        """Deserialize from a JSON dict written by to_dict()."""
        return cls(
            id=d["id"],
            name=d["name"],
            quantity=d["quantity"],
            date_added=datetime.fromisoformat(d["date_added"]),
        )

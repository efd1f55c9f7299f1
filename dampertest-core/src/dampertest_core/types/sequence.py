"""Sequence item type for damper inspection checklists.

A sequence is the ordered list of damper inspection points an operator
walks through on site. Each SequenceItem is immutable; progress is recorded
by replacing an item with a completed copy.

Example:
    >>> item = SequenceItem(floor_number="03", location="Smoke Shaft", shaft_id="SS1")
    >>> done = item.mark_completed(test_id="t-42")
    >>> done.completed, item.completed
    (True, False)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class SequenceItem:
    """One damper inspection point within a session's ordered list.

    Attributes:
        floor_number: Zero-padded floor label (e.g. "00", "11").
        location: Human label for the inspection point (e.g. "Smoke Shaft").
        shaft_id: Shaft identifier; suffixed "-<n>" when several dampers
            share a floor.
        completed: True once the inspection has been marked complete.
        test_id: Identifier of the associated test record, if any.
    """

    floor_number: str
    location: str
    shaft_id: str
    completed: bool = False
    test_id: str | None = None

    @property
    def label(self) -> str:
        """Return the operator-facing description of this item."""
        return f"Floor {self.floor_number} · {self.location} - {self.shaft_id}"

    def mark_completed(self, test_id: str | None = None) -> SequenceItem:
        """Return a completed copy of this item.

        Args:
            test_id: Optional test record to associate with the item.

        Returns:
            A new SequenceItem with ``completed=True``.
        """
        return replace(self, completed=True, test_id=test_id)

    def reset(self) -> SequenceItem:
        """Return a copy with completion state and test association cleared."""
        return replace(self, completed=False, test_id=None)

    def test_prefill(self, building: str) -> dict[str, str]:
        """Build the fields used to pre-populate a test record for this item.

        Args:
            building: Building the owning session covers.

        Returns:
            Mapping of test record field names to values.
        """
        return {
            "building": building,
            "location": self.location,
            "floor_number": self.floor_number,
            "shaft_id": self.shaft_id,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "floor_number": self.floor_number,
            "location": self.location,
            "shaft_id": self.shaft_id,
            "completed": self.completed,
            "test_id": self.test_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SequenceItem:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with item fields.

        Returns:
            A SequenceItem instance.
        """
        return cls(
            floor_number=data["floor_number"],
            location=data["location"],
            shaft_id=data["shaft_id"],
            completed=data.get("completed", False),
            test_id=data.get("test_id"),
        )

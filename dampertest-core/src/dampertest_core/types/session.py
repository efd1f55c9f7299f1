"""Test session types.

A TestSession is one planned, ordered run of damper inspections for a
building, together with its progress. Sessions are immutable values: every
lifecycle transition produces a new TestSession (see
``dampertest_sequencing.transitions``).

Classes:
    SessionStatus: Lifecycle status of a session.
    TestSession: A session and its inspection sequence.

Status lifecycle:
    pending -> in_progress        (start)
    in_progress -> pending        (pause; position is kept)
    in_progress -> completed      (last item completed)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from dampertest_core.types.common import ProjectId, SessionId, Timestamp
from dampertest_core.types.sequence import SequenceItem


class SessionStatus(Enum):
    """Lifecycle status of a test session."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        """Return the display label for this status."""
        labels = {
            SessionStatus.PENDING: "Pending",
            SessionStatus.IN_PROGRESS: "In Progress",
            SessionStatus.COMPLETED: "Complete",
        }
        return labels[self]


@dataclass(frozen=True)
class TestSession:
    """An ordered run of damper inspections for one building.

    Invariants:
        - ``total_count == len(sequence)`` for the life of the session.
        - ``completed_count`` equals the number of completed items.
        - ``0 <= current_index < len(sequence)`` for non-empty sequences;
          a completed session keeps pointing at its last item.

    Attributes:
        id: Unique session identifier.
        name: Display name.
        building: Building the inspections cover.
        sequence: Ordered inspection items.
        project_id: Optional reference to an external project.
        status: Current lifecycle status.
        current_index: Index of the item currently being inspected.
        total_count: Number of items in the sequence.
        completed_count: Number of completed items.
        created_at: When the session was created.
    """

    __test__ = False  # keep pytest from collecting this as a test class

    id: SessionId
    name: str
    building: str
    sequence: tuple[SequenceItem, ...]
    created_at: Timestamp
    project_id: ProjectId | None = None
    status: SessionStatus = SessionStatus.PENDING
    current_index: int = 0
    total_count: int = 0
    completed_count: int = 0

    @property
    def current_item(self) -> SequenceItem | None:
        """Return the item at the current index, or None for an empty sequence."""
        if not self.sequence:
            return None
        return self.sequence[self.current_index]

    @property
    def is_last(self) -> bool:
        """Return True if the current item is the last in the sequence."""
        return self.current_index + 1 >= len(self.sequence)

    @property
    def is_completed(self) -> bool:
        """Return True if the session has completed."""
        return self.status == SessionStatus.COMPLETED

    @property
    def remaining_count(self) -> int:
        """Return the number of items not yet completed."""
        return self.total_count - self.completed_count

    @property
    def progress_percent(self) -> float:
        """Return completion progress as a percentage of the total."""
        if self.total_count == 0:
            return 0.0
        return self.completed_count / self.total_count * 100

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "building": self.building,
            "project_id": self.project_id,
            "status": self.status.value,
            "current_index": self.current_index,
            "sequence": [item.to_dict() for item in self.sequence],
            "total_count": self.total_count,
            "completed_count": self.completed_count,
            "created_at": self.created_at.unix_ns,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TestSession:
        """Deserialize from a dictionary.

        Args:
            data: Dictionary with session fields.

        Returns:
            A TestSession instance.
        """
        sequence = tuple(SequenceItem.from_dict(item) for item in data["sequence"])
        project_id = data.get("project_id")
        return cls(
            id=SessionId(data["id"]),
            name=data["name"],
            building=data["building"],
            sequence=sequence,
            created_at=Timestamp(unix_ns=data["created_at"]),
            project_id=ProjectId(project_id) if project_id else None,
            status=SessionStatus(data.get("status", "pending")),
            current_index=data.get("current_index", 0),
            total_count=data.get("total_count", len(sequence)),
            completed_count=data.get(
                "completed_count", sum(1 for item in sequence if item.completed)
            ),
        )

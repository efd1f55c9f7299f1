"""Core data types for dampertest.

Submodules:
    common: Base types (Timestamp, SessionId, ProjectId, IdGenerator, Clock)
    sequence: Inspection checklist items (SequenceItem)
    session: Test session types (SessionStatus, TestSession)

All types are exported from this package for convenience.
"""

from dampertest_core.types.common import (
    Clock,
    IdGenerator,
    ProjectId,
    SessionId,
    Timestamp,
)
from dampertest_core.types.sequence import SequenceItem
from dampertest_core.types.session import SessionStatus, TestSession

__all__ = [
    # Common types
    "Clock",
    "IdGenerator",
    "ProjectId",
    "SessionId",
    "Timestamp",
    # Sequence types
    "SequenceItem",
    # Session types
    "SessionStatus",
    "TestSession",
]

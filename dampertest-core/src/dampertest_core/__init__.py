"""Core library for damper test sequencing.

This package provides foundational data types, interfaces, and error types
for the dampertest framework. It has no external dependencies (stdlib-only)
and serves as the base layer for the sequencing engine.

Key components:
    - Types: Common types (Timestamp, SessionId, ProjectId), the inspection
      checklist item (SequenceItem), and sessions (SessionStatus, TestSession).
    - Interfaces: Protocol for the host that executes tests (ExecutionListener).
    - Errors: Hierarchy of exception types for various failure modes.

Example:
    >>> from dampertest_core import SequenceItem
    >>> item = SequenceItem(floor_number="00", location="Smoke Shaft", shaft_id="SS1")
    >>> item.label
    'Floor 00 · Smoke Shaft - SS1'
"""

from dampertest_core.errors import (
    DampertestError,
    NoActiveSessionError,
    PlanError,
    SequenceParameterError,
    SessionNotFoundError,
    SessionStateError,
    SessionValidationError,
)
from dampertest_core.interfaces import ExecutionListener
from dampertest_core.types import (
    Clock,
    IdGenerator,
    ProjectId,
    SequenceItem,
    SessionId,
    SessionStatus,
    TestSession,
    Timestamp,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Common types
    "Clock",
    "IdGenerator",
    "ProjectId",
    "SessionId",
    "Timestamp",
    # Sequence and session types
    "SequenceItem",
    "SessionStatus",
    "TestSession",
    # Interfaces
    "ExecutionListener",
    # Errors
    "DampertestError",
    "NoActiveSessionError",
    "PlanError",
    "SequenceParameterError",
    "SessionNotFoundError",
    "SessionStateError",
    "SessionValidationError",
]

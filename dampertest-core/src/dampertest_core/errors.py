"""Exception types for dampertest-core.

This module defines the exception hierarchy used throughout the dampertest
framework. All dampertest exceptions inherit from DampertestError, allowing
consumers to catch all framework-specific errors with a single except clause.

Exception hierarchy:
    DampertestError (base)
    +-- SessionValidationError: Session creation input rejected
    +-- SequenceParameterError: Sequence generation input rejected
    +-- SessionStateError: Illegal session state transition
    |   +-- NoActiveSessionError: Operation requires an active session
    +-- SessionNotFoundError: Unknown session identifier
    +-- PlanError: Malformed session plan file
"""


class DampertestError(Exception):
    """Base exception for all dampertest errors.

    This is the root of the dampertest exception hierarchy. Catch this to
    handle any framework-specific error.
    """


class SessionValidationError(DampertestError, ValueError):
    """Raised when a session cannot be created from the given input.

    The most common cause is a missing or blank building name. No session
    is created when this is raised.
    """


class SequenceParameterError(DampertestError, ValueError):
    """Raised when sequence generation parameters are invalid.

    Floor counts and dampers-per-floor must be integers of at least 1.
    """


class SessionStateError(DampertestError):
    """Raised for invalid session state or state transition errors.

    This may occur when starting a session that has already completed,
    or when storing a session whose identifier is already in use.
    """


class NoActiveSessionError(SessionStateError):
    """Raised when an operation needs an active session and none is set.

    Only raised by controllers configured with ``strict=True``; otherwise
    such operations are silent no-ops.
    """


class SessionNotFoundError(DampertestError, KeyError):
    """Raised when a session identifier is not present in the repository."""


class PlanError(DampertestError, ValueError):
    """Raised when a session plan file is malformed.

    This includes non-mapping documents, missing required fields, and
    fields of the wrong type.
    """

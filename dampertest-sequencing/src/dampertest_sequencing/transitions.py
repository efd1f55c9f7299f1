"""Session state transitions.

Pure functions from one immutable TestSession to the next. They neither
touch a repository nor notify the host; the controller composes them with
storage and callbacks. Keeping them pure makes every transition testable on
its own.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from dampertest_core.errors import SessionStateError
from dampertest_core.types.sequence import SequenceItem
from dampertest_core.types.session import SessionStatus, TestSession


def count_completed(sequence: Iterable[SequenceItem]) -> int:
    """Return the number of completed items in a sequence."""
    return sum(1 for item in sequence if item.completed)


def start(session: TestSession) -> TestSession:
    """Mark a session as in progress.

    Resuming a paused session keeps its current index and progress.

    Raises:
        SessionStateError: If the session has already completed.
    """
    if session.status == SessionStatus.COMPLETED:
        raise SessionStateError(f"Session {session.id} has already completed")
    return replace(session, status=SessionStatus.IN_PROGRESS)


def complete_current(session: TestSession, test_id: str | None = None) -> TestSession:
    """Complete the current item and move to the next one.

    Completing the last item completes the session; the index then stays
    on the last item.

    Args:
        session: An in-progress session with a non-empty sequence.
        test_id: Optional test record to attach to the completed item.

    Returns:
        The updated session.

    Raises:
        SessionStateError: If the session is completed or has no items.
    """
    if session.status == SessionStatus.COMPLETED:
        raise SessionStateError(f"Session {session.id} has already completed")
    if not session.sequence:
        raise SessionStateError(f"Session {session.id} has no items to complete")

    index = session.current_index
    sequence = list(session.sequence)
    sequence[index] = sequence[index].mark_completed(test_id)

    finished = index + 1 >= len(sequence)
    return replace(
        session,
        sequence=tuple(sequence),
        completed_count=count_completed(sequence),
        current_index=index if finished else index + 1,
        status=SessionStatus.COMPLETED if finished else SessionStatus.IN_PROGRESS,
    )


def skip_current(session: TestSession) -> TestSession:
    """Advance past the current item without completing it.

    At the last item this returns the session unchanged; skipping never
    completes a session.
    """
    if session.current_index + 1 >= len(session.sequence):
        return session
    return replace(session, current_index=session.current_index + 1)


def pause(session: TestSession) -> TestSession:
    """Return a session to pending, keeping its position and progress."""
    return replace(session, status=SessionStatus.PENDING)

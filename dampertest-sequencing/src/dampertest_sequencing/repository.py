"""In-memory session repository.

Holds every known TestSession keyed by identifier, in creation order, plus
a single pointer to the session currently being walked. Holding one
pointer rather than a per-session flag means at most one session can ever
be active.

Sessions live only in process memory. This class is the seam where a
durable store would be introduced.
"""

from __future__ import annotations

import logging
from typing import Iterator

from dampertest_core.errors import SessionNotFoundError, SessionStateError
from dampertest_core.types.common import SessionId
from dampertest_core.types.session import SessionStatus, TestSession

logger = logging.getLogger(__name__)


class SessionRepository:
    """Repository for test sessions and the active-session pointer."""

    def __init__(self) -> None:
        self._sessions: dict[SessionId, TestSession] = {}
        self._active_id: SessionId | None = None

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __iter__(self) -> Iterator[TestSession]:
        return iter(list(self._sessions.values()))

    # --- Sessions ---

    def add(self, session: TestSession) -> None:
        """Store a new session.

        Raises:
            SessionStateError: If a session with the same ID is already stored.
        """
        if session.id in self._sessions:
            raise SessionStateError(f"Session {session.id} already exists")
        self._sessions[session.id] = session

    def get(self, session_id: SessionId) -> TestSession | None:
        """Get a session by ID, or None if unknown."""
        return self._sessions.get(session_id)

    def require(self, session_id: SessionId) -> TestSession:
        """Get a session by ID.

        Raises:
            SessionNotFoundError: If the session is unknown.
        """
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def replace(self, session: TestSession) -> None:
        """Store a new version of an existing session.

        Raises:
            SessionNotFoundError: If no session with this ID is stored.
        """
        if session.id not in self._sessions:
            raise SessionNotFoundError(session.id)
        self._sessions[session.id] = session

    def remove(self, session_id: SessionId) -> TestSession:
        """Remove a session, clearing the active pointer if it pointed at it.

        Returns:
            The removed session.

        Raises:
            SessionNotFoundError: If the session is unknown.
        """
        session = self.require(session_id)
        del self._sessions[session_id]
        if self._active_id == session_id:
            self._active_id = None
        return session

    def list_sessions(self, include_active: bool = True) -> list[TestSession]:
        """List sessions in creation order.

        Args:
            include_active: If False, the active session is left out.
        """
        return [
            s for s in self._sessions.values() if include_active or s.id != self._active_id
        ]

    def status_counts(self) -> dict[SessionStatus, int]:
        """Return the number of stored sessions in each status."""
        counts = {status: 0 for status in SessionStatus}
        for session in self._sessions.values():
            counts[session.status] += 1
        return counts

    # --- Active session ---

    @property
    def active_session_id(self) -> SessionId | None:
        """Return the ID of the active session, if any."""
        return self._active_id

    @property
    def active_session(self) -> TestSession | None:
        """Return the active session, if any."""
        if self._active_id is None:
            return None
        return self._sessions.get(self._active_id)

    def activate(self, session_id: SessionId) -> None:
        """Point the active pointer at a stored session.

        Raises:
            SessionNotFoundError: If the session is unknown.
        """
        self.require(session_id)
        self._active_id = session_id

    def clear_active(self) -> None:
        """Clear the active pointer."""
        self._active_id = None

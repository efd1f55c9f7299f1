"""Session factory.

Builds new TestSession values, either from a generated sequence or as a
fresh copy of an existing session. Identifier generation and the clock are
injectable so tests can produce deterministic sessions.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import tzinfo
from typing import Iterable

from dampertest_core.errors import SessionValidationError
from dampertest_core.types.common import (
    Clock,
    IdGenerator,
    ProjectId,
    SessionId,
    Timestamp,
)
from dampertest_core.types.sequence import SequenceItem
from dampertest_core.types.session import SessionStatus, TestSession

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%Y-%m-%d"
COPY_SUFFIX = " (Copy)"


def _uuid_hex() -> str:
    return uuid.uuid4().hex


class SessionFactory:
    """Creates and duplicates test sessions.

    Example:
        factory = SessionFactory()
        session = factory.create_session("Block A", generate_sequence(0, 3, 1, "Smoke Shaft", "SS1"))
        copy = factory.duplicate_session(session)
    """

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        clock: Clock | None = None,
        date_format: str = DEFAULT_DATE_FORMAT,
        tz: tzinfo | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            id_generator: Source of fresh session identifiers (default: uuid4 hex).
            clock: Source of creation timestamps (default: Timestamp.now).
            date_format: strftime pattern for the date in default session names.
            tz: Zone the date in default names is rendered in (default: the
                local zone, matching the operator's calendar).
        """
        self._id_generator = id_generator or _uuid_hex
        self._clock = clock or Timestamp.now
        self._date_format = date_format
        self._tz = tz

    def default_name(self, building: str, created_at: Timestamp) -> str:
        """Return the name given to sessions created without one."""
        return f"{building} - {created_at.format(self._date_format, self._tz)}"

    def create_session(
        self,
        building: str,
        sequence: Iterable[SequenceItem],
        name: str | None = None,
        project_id: str | None = None,
    ) -> TestSession:
        """Create a new pending session.

        Args:
            building: Building the inspections cover; must not be blank.
            sequence: Ordered inspection items.
            name: Display name. A missing, empty or whitespace-only name is
                replaced by "<building> - <date>".
            project_id: Optional external project reference.

        Returns:
            A new TestSession with status pending and no progress.

        Raises:
            SessionValidationError: If building is blank.
        """
        if not building or not building.strip():
            raise SessionValidationError("A building is required to create a session")

        items = tuple(sequence)
        created_at = self._clock()
        session = TestSession(
            id=SessionId(self._id_generator()),
            name=name if name and name.strip() else self.default_name(building, created_at),
            building=building,
            sequence=items,
            created_at=created_at,
            project_id=ProjectId(project_id) if project_id else None,
            status=SessionStatus.PENDING,
            current_index=0,
            total_count=len(items),
            completed_count=0,
        )
        logger.debug("Built session %s with %d items", session.id, session.total_count)
        return session

    def duplicate_session(self, session: TestSession) -> TestSession:
        """Create an independent, unstarted copy of a session.

        The copy has a fresh identifier and creation time, a " (Copy)" name
        suffix, and every item's completion state and test association reset.

        Args:
            session: The session to copy.

        Returns:
            The new TestSession.
        """
        return replace(
            session,
            id=SessionId(self._id_generator()),
            name=f"{session.name}{COPY_SUFFIX}",
            sequence=tuple(item.reset() for item in session.sequence),
            created_at=self._clock(),
            status=SessionStatus.PENDING,
            current_index=0,
            completed_count=0,
        )

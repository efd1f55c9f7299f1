"""Session lifecycle controller."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dampertest_core.errors import NoActiveSessionError, SessionStateError
from dampertest_core.interfaces.execution import ExecutionListener
from dampertest_core.types.common import SessionId
from dampertest_core.types.session import SessionStatus, TestSession

from dampertest_sequencing import transitions
from dampertest_sequencing.factory import DEFAULT_DATE_FORMAT, SessionFactory
from dampertest_sequencing.generator import SequenceParameters
from dampertest_sequencing.listener import CallbackListener
from dampertest_sequencing.repository import SessionRepository

logger = logging.getLogger(__name__)


@dataclass
class ControllerConfig:
    """Configuration for the session controller.

    Attributes:
        strict: Raise NoActiveSessionError for complete/skip/pause with no
            active session instead of ignoring the call.
        date_format: strftime pattern for the date in default session names.
    """

    strict: bool = False
    date_format: str = DEFAULT_DATE_FORMAT


class SessionController:
    """Drives test sessions through their lifecycle.

    The controller owns the state machine over a repository of sessions:
    it starts a session, advances it as the operator completes or skips
    dampers, and pauses, duplicates, or deletes sessions. Every change is
    stored before the execution listener is notified.

    States and transitions:
        pending -> in_progress: start()
        in_progress -> pending: pause(), or another session is started
        in_progress -> completed: mark_current_complete() on the last item

    Example:
        controller = SessionController(listener=CallbackListener(start_test=launch))

        session = controller.create_session(
            "Block A", SequenceParameters(floor_count=3, dampers_per_floor=2)
        )
        controller.start(session.id)          # launch() receives floor 00, SS1-1
        controller.mark_current_complete("t-1")
        controller.skip_current()
        controller.pause()
    """

    def __init__(
        self,
        repository: SessionRepository | None = None,
        factory: SessionFactory | None = None,
        listener: ExecutionListener | None = None,
        config: ControllerConfig | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            repository: Session store (default: a new empty repository). An
                injected repository is used as-is, even when empty.
            factory: Session factory (default: one using config.date_format).
            listener: Host notified as sessions are walked.
            config: Controller configuration.
        """
        self._config = config if config is not None else ControllerConfig()
        self._repository = repository if repository is not None else SessionRepository()
        if factory is None:
            factory = SessionFactory(date_format=self._config.date_format)
        self._factory = factory
        self._listener: ExecutionListener = (
            listener if listener is not None else CallbackListener()
        )

    @property
    def repository(self) -> SessionRepository:
        """Return the session repository."""
        return self._repository

    @property
    def config(self) -> ControllerConfig:
        """Return the controller configuration."""
        return self._config

    @property
    def active_session(self) -> TestSession | None:
        """Return the session currently being walked, if any."""
        return self._repository.active_session

    @property
    def sessions(self) -> list[TestSession]:
        """Return all sessions in creation order."""
        return self._repository.list_sessions()

    def get(self, session_id: SessionId) -> TestSession | None:
        """Get a session by ID."""
        return self._repository.get(session_id)

    def create_session(
        self,
        building: str,
        parameters: SequenceParameters | None = None,
        name: str | None = None,
        project_id: str | None = None,
    ) -> TestSession:
        """Generate a sequence and store a new pending session for it.

        Args:
            building: Building the inspections cover.
            parameters: Sequence parameters (default: SequenceParameters()).
            name: Optional display name.
            project_id: Optional external project reference.

        Returns:
            The stored session.

        Raises:
            SessionValidationError: If building is blank.
            SequenceParameterError: If the parameters are invalid.
        """
        parameters = parameters or SequenceParameters()
        session = self._factory.create_session(
            building=building,
            sequence=parameters.generate(),
            name=name,
            project_id=project_id,
        )
        self._repository.add(session)
        logger.info(
            "Created session %s (%s) with %d dampers",
            session.id,
            session.name,
            session.total_count,
        )
        return session

    def start(self, session_id: SessionId) -> TestSession:
        """Start or resume a session and make it the active one.

        Resuming a paused session continues from its current item. A session
        with no items is returned unchanged and not activated. If another
        session is active it is paused first.

        Args:
            session_id: The session to start.

        Returns:
            The stored session after the transition.

        Raises:
            SessionNotFoundError: If the session is unknown.
            SessionStateError: If the session has already completed.
        """
        session = self._repository.require(session_id)
        if session.status == SessionStatus.COMPLETED:
            raise SessionStateError(f"Session {session_id} has already completed")
        if not session.sequence:
            logger.debug("Session %s has no dampers; nothing to start", session_id)
            return session

        active = self._repository.active_session
        if active is not None and active.id != session_id:
            logger.warning("Pausing session %s to start session %s", active.id, session_id)
            self._repository.replace(transitions.pause(active))

        session = transitions.start(session)
        self._repository.replace(session)
        self._repository.activate(session.id)
        logger.info(
            "Started session %s at item %d/%d",
            session.id,
            session.current_index + 1,
            session.total_count,
        )

        current = session.current_item
        assert current is not None
        self._listener.on_start_test(current, session)
        return session

    def mark_current_complete(self, test_id: str | None = None) -> TestSession | None:
        """Complete the active session's current item.

        Advances to the next item, or completes the session and clears the
        active pointer if this was the last one.

        Args:
            test_id: Optional test record to attach to the item.

        Returns:
            The stored session after the transition, or None if no session
            is active.

        Raises:
            NoActiveSessionError: If strict and no session is active.
        """
        active = self._require_active("mark_current_complete")
        if active is None:
            return None

        session = transitions.complete_current(active, test_id)
        self._repository.replace(session)

        if session.status == SessionStatus.COMPLETED:
            self._repository.clear_active()
            logger.info(
                "Session %s completed (%d/%d dampers)",
                session.id,
                session.completed_count,
                session.total_count,
            )
            self._listener.on_session_complete(session)
            return session

        logger.debug(
            "Session %s advanced to item %d/%d",
            session.id,
            session.current_index + 1,
            session.total_count,
        )
        current = session.current_item
        assert current is not None
        self._listener.on_start_test(current, session)
        return session

    def skip_current(self) -> TestSession | None:
        """Move the active session past its current item without completing it.

        At the last item this is a no-op and the session is returned unchanged.

        Returns:
            The stored session, or None if no session is active.

        Raises:
            NoActiveSessionError: If strict and no session is active.
        """
        active = self._require_active("skip_current")
        if active is None:
            return None

        session = transitions.skip_current(active)
        if session is active:
            logger.debug("Session %s is at its last item; skip ignored", active.id)
            return active

        self._repository.replace(session)
        logger.debug(
            "Session %s skipped to item %d/%d",
            session.id,
            session.current_index + 1,
            session.total_count,
        )
        current = session.current_item
        assert current is not None
        self._listener.on_start_test(current, session)
        return session

    def pause(self) -> TestSession | None:
        """Pause the active session and clear the active pointer.

        The session keeps its current index and progress, so start()
        resumes where it left off.

        Returns:
            The paused session, or None if no session is active.

        Raises:
            NoActiveSessionError: If strict and no session is active.
        """
        active = self._require_active("pause")
        if active is None:
            return None

        session = transitions.pause(active)
        self._repository.replace(session)
        self._repository.clear_active()
        logger.info(
            "Paused session %s at item %d/%d",
            session.id,
            session.current_index + 1,
            session.total_count,
        )
        return session

    def duplicate(self, session_id: SessionId) -> TestSession:
        """Store an unstarted copy of a session.

        Neither the original session nor the active pointer is affected.

        Raises:
            SessionNotFoundError: If the session is unknown.
        """
        original = self._repository.require(session_id)
        copy = self._factory.duplicate_session(original)
        self._repository.add(copy)
        logger.info("Duplicated session %s as %s", original.id, copy.id)
        return copy

    def delete(self, session_id: SessionId) -> TestSession:
        """Delete a session.

        Deleting the active session clears the active pointer; no completion
        notification is sent.

        Raises:
            SessionNotFoundError: If the session is unknown.
        """
        session = self._repository.remove(session_id)
        logger.info("Deleted session %s", session_id)
        return session

    def _require_active(self, operation: str) -> TestSession | None:
        active = self._repository.active_session
        if active is None:
            if self._config.strict:
                raise NoActiveSessionError(f"{operation} requires an active session")
            logger.debug("%s ignored: no active session", operation)
        return active

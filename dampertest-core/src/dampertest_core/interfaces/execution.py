"""Execution collaborator interface.

The sequencing engine decides which damper is inspected next; the host
application owns the actual instrument test workflow. This module defines
the boundary between them.

Protocols:
    ExecutionListener: Receives notifications as a session is walked.
"""

# pylint: disable=unnecessary-ellipsis  # Ellipsis required for Protocol method stubs

from __future__ import annotations

from typing import Protocol

from dampertest_core.types.sequence import SequenceItem
from dampertest_core.types.session import TestSession


class ExecutionListener(Protocol):
    """Protocol for the host that executes the tests of a session.

    Callbacks are invoked synchronously, after the session change that
    caused them has been stored. The host typically launches a test for
    the item and later reports back through the controller's
    ``mark_current_complete(test_id)``.
    """

    def on_start_test(self, item: SequenceItem, session: TestSession) -> None:
        """Handle a new current item.

        Called on start, after a skip, and after completing a non-final item.

        Args:
            item: The item that just became current.
            session: The session as stored after the transition.
        """
        ...

    def on_session_complete(self, session: TestSession) -> None:
        """Handle completion of a session.

        Called exactly once per session, when its last item is completed.

        Args:
            session: The completed session.
        """
        ...

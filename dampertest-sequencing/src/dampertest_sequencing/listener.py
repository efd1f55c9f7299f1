"""Callback adapter for the execution listener interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from dampertest_core.types.sequence import SequenceItem
from dampertest_core.types.session import TestSession

StartTestCallback = Callable[[SequenceItem, TestSession], None]
SessionCompleteCallback = Callable[[TestSession], None]


@dataclass
class CallbackListener:
    """ExecutionListener built from plain callables.

    Either callback may be omitted, in which case that notification is
    dropped.

    Example:
        listener = CallbackListener(
            start_test=lambda item, session: launch_test(item),
            session_complete=lambda session: print(f"{session.name} done"),
        )
    """

    start_test: StartTestCallback | None = None
    session_complete: SessionCompleteCallback | None = None

    def on_start_test(self, item: SequenceItem, session: TestSession) -> None:
        """Forward to the start-test callback, if set."""
        if self.start_test is not None:
            self.start_test(item, session)

    def on_session_complete(self, session: TestSession) -> None:
        """Forward to the session-complete callback, if set."""
        if self.session_complete is not None:
            self.session_complete(session)

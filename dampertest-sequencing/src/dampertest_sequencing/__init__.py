"""Floor-by-floor damper test sequencing.

This package generates the ordered checklist of damper inspection points
for a building and walks an operator through it one damper at a time,
tracking completion and supporting pause, skip, duplicate, and delete.

Example usage:

    from dampertest_sequencing import (
        CallbackListener,
        SequenceParameters,
        SessionController,
    )

    controller = SessionController(
        listener=CallbackListener(
            start_test=lambda item, session: print("Test", item.label),
            session_complete=lambda session: print("Done", session.name),
        )
    )

    session = controller.create_session(
        "Block A", SequenceParameters(start_floor=0, floor_count=2)
    )
    controller.start(session.id)
    controller.mark_current_complete(test_id="t-1")
    controller.mark_current_complete(test_id="t-2")
"""

from dampertest_sequencing.controller import ControllerConfig, SessionController
from dampertest_sequencing.factory import SessionFactory
from dampertest_sequencing.generator import (
    SequenceParameters,
    format_floor,
    generate_sequence,
)
from dampertest_sequencing.listener import CallbackListener
from dampertest_sequencing.plan import SessionPlan, load_session_plan, parse_session_plan
from dampertest_sequencing.repository import SessionRepository

__all__ = [
    # Sequence generation
    "SequenceParameters",
    "format_floor",
    "generate_sequence",
    # Sessions
    "SessionFactory",
    "SessionRepository",
    # Lifecycle
    "CallbackListener",
    "ControllerConfig",
    "SessionController",
    # Plans
    "SessionPlan",
    "load_session_plan",
    "parse_session_plan",
]

"""Protocol-based interface definitions for dampertest.

Interface Categories:
    Execution: ExecutionListener - host callbacks as a session is walked
"""

from dampertest_core.interfaces.execution import ExecutionListener

__all__ = [
    "ExecutionListener",
]

# failchain/core/stack/__init__.py
"""
Call-site recording.

capture_stack() snapshots the active call stack as an immutable StackTrace
of CallSite records. Function, file and line are resolved lazily from the
recorded code objects when a trace is formatted.
"""

from .frames import CallSite, StackTrace, UNKNOWN
from .capture import capture_stack, EMPTY_STACK

__all__ = [
    "CallSite",
    "StackTrace",
    "UNKNOWN",
    "capture_stack",
    "EMPTY_STACK",
]

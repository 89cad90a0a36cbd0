# failchain/core/errors/capabilities.py
"""
Capability interfaces queried by the chain walker and the formatter.

Both are structural: any exception that provides the method takes part in
chain walking, whether or not it was built by failchain.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from failchain.core.stack import StackTrace


@runtime_checkable
class HasStackTrace(Protocol):
    """An error that owns a captured call stack."""

    def stack_trace(self) -> StackTrace:
        ...


@runtime_checkable
class HasCause(Protocol):
    """An error that wraps exactly one other error."""

    def unwrap(self) -> Optional[BaseException]:
        ...

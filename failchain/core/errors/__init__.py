# failchain/core/errors/__init__.py
"""
Error annotation for failchain.

This package defines the components responsible for:
- Building annotated errors (new, errorf, wrap, with_message, ...)
- Capturing a call stack once per chain
- Walking chains back to their cause
- Rendering errors in short and extended form

No side effects on import.
"""

from .capabilities import HasStackTrace, HasCause
from .exceptions import (
    ChainError,
    FundamentalError,
    StackError,
    MessageError,
    FormattedError,
)
from .chain import unwrap, walk, cause, find, contains, find_stack_tracer, stack_trace_of
from .formatter import format_error
from .api import (
    new,
    errorf,
    ensure_stack,
    with_stack,
    wrap,
    wrapf,
    with_message,
    with_messagef,
)

__all__ = [
    # Capabilities
    "HasStackTrace",
    "HasCause",

    # Node types
    "ChainError",
    "FundamentalError",
    "StackError",
    "MessageError",
    "FormattedError",

    # Construction
    "new",
    "errorf",
    "ensure_stack",
    "with_stack",
    "wrap",
    "wrapf",
    "with_message",
    "with_messagef",

    # Chain walking
    "unwrap",
    "walk",
    "cause",
    "find",
    "contains",
    "find_stack_tracer",
    "stack_trace_of",

    # Rendering
    "format_error",
]

# failchain/__init__.py
"""
failchain - annotate errors without losing them

Attach context messages and a captured call stack to any exception, then
recover the original cause and the stack for diagnostics.

Basic usage:

Creating errors (stack recorded at the call site):
    >>> import failchain
    >>> err = failchain.new("disk full")
    >>> err = failchain.errorf("disk {} full", "/dev/sda1")

Adding context:
    >>> try:
    ...     open("/etc/app.yml")
    ... except OSError as e:
    ...     raise failchain.wrap(e, "read config")

    wrap() records a stack only if the chain does not carry one yet;
    with_message() never records one.

Inspecting:
    >>> failchain.cause(err)          # stack-bearing node, or the leaf
    >>> f"{err}"                      # "read config: disk full"
    >>> f"{err:+v}"                   # text plus the captured stack
    >>> f"{err:q}"                    # quoted text

Every operation returns None when given None, so results can be passed
through unconditionally.
"""

__version__ = "0.1.0"

from .core.errors import (
    # Construction
    new,
    errorf,
    ensure_stack,
    with_stack,
    wrap,
    wrapf,
    with_message,
    with_messagef,

    # Chain walking
    unwrap,
    walk,
    cause,
    find,
    contains,
    stack_trace_of,

    # Rendering
    format_error,

    # Types
    HasStackTrace,
    HasCause,
    ChainError,
    FundamentalError,
    StackError,
    MessageError,
    FormattedError,
)
from .core.stack import CallSite, StackTrace, capture_stack
from .config import FailChainConfig, load_config, get_config, set_config

__all__ = [
    "__version__",

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
    "stack_trace_of",

    # Rendering
    "format_error",

    # Types
    "HasStackTrace",
    "HasCause",
    "ChainError",
    "FundamentalError",
    "StackError",
    "MessageError",
    "FormattedError",
    "CallSite",
    "StackTrace",
    "capture_stack",

    # Configuration
    "FailChainConfig",
    "load_config",
    "get_config",
    "set_config",
]

# failchain/core/errors/api.py
"""
Construction operations.

new/errorf/ensure_stack/wrap/wrapf record a stack at their call site, but
only if the chain does not carry one already: a chain owns exactly one
captured stack, the one nearest its original failure. with_message and
with_messagef never capture.

Every operation that takes an error returns None when given None.
"""

from __future__ import annotations

from typing import Any, Optional
import logging
import warnings

from failchain.core.stack import capture_stack
from .chain import find_stack_tracer
from .exceptions import (
    ChainError,
    FundamentalError,
    StackError,
    MessageError,
    FormattedError,
)


logger = logging.getLogger(__name__)


def _check_error(err: Any) -> None:
    if not isinstance(err, BaseException):
        raise TypeError(f"expected an exception, got {type(err).__name__}")


def _expand(template: str, args: tuple, kwargs: dict) -> str:
    # Never raises; a malformed template renders as itself plus its arguments
    try:
        return template.format(*args, **kwargs)
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        logger.debug(f"Template {template!r} did not expand: {e!r}")
        extra = [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
        return f"{template} (args: {', '.join(extra)})" if extra else template


def new(message: str) -> StackError:
    """Error with the supplied message and the stack at the point new() was called."""
    return StackError(FundamentalError(message), capture_stack(1))


def errorf(template: str, *args: Any, **kwargs: Any) -> StackError:
    """
    Like new(), with the message built by template.format(*args, **kwargs).

        >>> errorf("user {} not found", 42)
    """
    return StackError(FundamentalError(_expand(template, args, kwargs)), capture_stack(1))


def _ensure_stack(err: Optional[BaseException], skip: int) -> Optional[ChainError]:
    # skip counts the public operation's frame; _ensure_stack adds one more
    if err is None:
        return None
    _check_error(err)

    if find_stack_tracer(err) is not None:
        logger.debug(f"Reusing stack already carried by {type(err).__name__} chain")
        return FormattedError(err)

    return StackError(err, capture_stack(skip + 1))


def ensure_stack(err: Optional[BaseException]) -> Optional[ChainError]:
    """
    Ensure err's chain carries a stack trace.

    If it does not, the stack at the point ensure_stack() was called is
    recorded. If it already does, err is returned behind a pass-through
    wrapper and nothing is captured. If err is None, returns None.
    """
    return _ensure_stack(err, 1)


def with_stack(err: Optional[BaseException]) -> Optional[ChainError]:
    """Deprecated alias for ensure_stack()."""
    warnings.warn(
        "with_stack() is deprecated, use ensure_stack()",
        DeprecationWarning,
        stacklevel=2,
    )
    return _ensure_stack(err, 1)


def wrap(err: Optional[BaseException], message: str) -> Optional[MessageError]:
    """
    Annotate err with message, making sure the chain carries a stack.

    The resulting text is "message: <err's text>". If err is None, returns None.
    """
    if err is None:
        return None
    return MessageError(message, _ensure_stack(err, 1))


def wrapf(err: Optional[BaseException], template: str, *args: Any, **kwargs: Any) -> Optional[MessageError]:
    """wrap() with the message built by template.format(*args, **kwargs)."""
    if err is None:
        return None
    return MessageError(_expand(template, args, kwargs), _ensure_stack(err, 1))


def with_message(err: Optional[BaseException], message: str) -> Optional[MessageError]:
    """Annotate err with message without capturing a stack. None stays None."""
    if err is None:
        return None
    _check_error(err)
    return MessageError(message, err)


def with_messagef(err: Optional[BaseException], template: str, *args: Any, **kwargs: Any) -> Optional[MessageError]:
    if err is None:
        return None
    _check_error(err)
    return MessageError(_expand(template, args, kwargs), err)

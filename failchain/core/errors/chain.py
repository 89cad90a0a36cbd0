# failchain/core/errors/chain.py
"""
Chain walking.

A chain starts at any error and follows one unwrap step at a time:
unwrap() for errors providing HasCause, otherwise the explicit
`raise ... from ...` link (__cause__). Implicit __context__ is never
followed. This module is the single place that decides whether a chain
already carries a stack.
"""

from __future__ import annotations

from typing import Iterator, Optional, Type, TypeVar
import logging

from failchain.core.stack import StackTrace
from .capabilities import HasCause, HasStackTrace


logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseException)


def unwrap(err: Optional[BaseException]) -> Optional[BaseException]:
    """One unwrap step; None for a leaf or for None."""
    if err is None:
        return None
    if isinstance(err, HasCause):
        return err.unwrap()
    return getattr(err, "__cause__", None)


def walk(err: Optional[BaseException]) -> Iterator[BaseException]:
    """Yield err, then every error reached by successive unwrap steps."""
    seen = set()
    while err is not None:
        if id(err) in seen:
            logger.warning(f"Cyclic error chain detected at {type(err).__name__}; stopping walk")
            return
        seen.add(id(err))
        yield err
        err = unwrap(err)


def find_stack_tracer(err: Optional[BaseException]) -> Optional[HasStackTrace]:
    """First node in the chain that owns a captured stack, or None."""
    for node in walk(err):
        if isinstance(node, HasStackTrace):
            return node
    return None


def stack_trace_of(err: Optional[BaseException]) -> Optional[StackTrace]:
    """The stack captured somewhere in err's chain, or None."""
    tracer = find_stack_tracer(err)
    if tracer is None:
        return None
    return tracer.stack_trace()


def cause(err: BaseException) -> BaseException:
    """
    Diagnostic root cause of err.

    Returns the first node in the chain that owns a stack trace. If no node
    does, returns the chain's last error (the leaf).

    The walk stops at the stack-bearing node even when message-only
    annotations below it lead further down.

    Raises:
        TypeError: if err is None; callers check for absent errors themselves.
    """
    if err is None:
        raise TypeError("cause() requires an error, got None")

    last = err
    for node in walk(err):
        if isinstance(node, HasStackTrace):
            return node
        last = node
    return last


def find(err: Optional[BaseException], exc_type: Type[E]) -> Optional[E]:
    """First node in the chain that is an instance of exc_type."""
    for node in walk(err):
        if isinstance(node, exc_type):
            return node
    return None


def contains(err: Optional[BaseException], target: BaseException) -> bool:
    """Whether target (by identity or equality) appears in err's chain."""
    for node in walk(err):
        if node is target or node == target:
            return True
    return False

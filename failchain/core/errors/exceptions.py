# failchain/core/errors/exceptions.py
"""
Error node types.

Every node wraps at most one other error and is immutable once built.
Each node links its cause through __cause__ as well, so a raised chain
prints the usual "direct cause" traceback sections.
"""

from __future__ import annotations

from typing import Optional

from failchain.core.stack import StackTrace
from .formatter import safe_str, format_error


class ChainError(Exception):
    """
    Base class for every error failchain builds.

    Supports format(err, spec) with the verbs documented in format_error().
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self._message = message
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    def unwrap(self) -> Optional[BaseException]:
        return self._cause

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r})"

    def __format__(self, spec: str) -> str:
        return format_error(self, spec)


class FundamentalError(ChainError):
    """Leaf error built from message text by new() and errorf()."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class StackError(ChainError):
    """Pairs an error with the call stack captured where it was annotated."""

    def __init__(self, error: BaseException, stack: StackTrace) -> None:
        super().__init__(safe_str(error), cause=error)
        self._stack = stack

    def stack_trace(self) -> StackTrace:
        return self._stack


class MessageError(ChainError):
    """Prefixes the wrapped error's text with an annotation: "annotation: cause"."""

    def __init__(self, annotation: str, error: BaseException) -> None:
        super().__init__(f"{annotation}: {safe_str(error)}", cause=error)
        self._annotation = annotation

    @property
    def annotation(self) -> str:
        return self._annotation


class FormattedError(ChainError):
    """
    Pass-through wrapper returned when a chain already carries a stack.

    Same text as the wrapped error; adds format support for foreign errors.
    """

    def __init__(self, error: BaseException) -> None:
        super().__init__(safe_str(error), cause=error)

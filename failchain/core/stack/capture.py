# failchain/core/stack/capture.py
"""
Call stack capture.
"""

from __future__ import annotations

from typing import Optional
import logging
import sys
import traceback

from failchain.config import get_config
from .frames import CallSite, StackTrace


logger = logging.getLogger(__name__)

EMPTY_STACK = StackTrace(())


def capture_stack(skip: int = 0, *, max_depth: Optional[int] = None) -> StackTrace:
    """
    Record the active call stack, innermost frame first.

    capture_stack's own frame is never recorded; `skip` drops that many more
    frames above it, so skip=0 starts at the caller of capture_stack and
    skip=1 at the caller's caller.

    Args:
        skip: Number of wrapper frames to omit (>= 0)
        max_depth: Maximum call sites to record; defaults to modules.stack.max_depth

    Returns:
        StackTrace (empty only if the stack is shallower than skip)
    """
    if skip < 0:
        raise ValueError(f"skip must be >= 0, got {skip}")

    limit = get_config().stack.max_depth if max_depth is None else max_depth
    if limit < 1:
        return EMPTY_STACK

    try:
        start = sys._getframe(skip + 1)
    except ValueError:
        return EMPTY_STACK

    sites = []
    for frame, lineno in traceback.walk_stack(start):
        if len(sites) >= limit:
            logger.debug(f"Stack capture truncated at max_depth={limit}")
            break
        sites.append(CallSite(
            code=frame.f_code,
            lineno=lineno or 0,
            module=frame.f_globals.get("__name__", ""),
        ))

    return StackTrace(tuple(sites))

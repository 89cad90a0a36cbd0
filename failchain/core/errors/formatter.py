# failchain/core/errors/formatter.py
"""
Dual-mode error rendering.

Short mode is the error's own text; causes are already part of it because
annotations join messages when they are created. Extended mode appends the
stack owned by the chain's stack-bearing node.
"""

from __future__ import annotations

from failchain.config import get_config
from failchain.core.format.verbs import ERROR_VERBS, QUOTED, VALUE, parse_spec, quote
from .chain import find_stack_tracer


def safe_str(x: object) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def format_error(err: BaseException, spec: str = "") -> str:
    """
    Render any error by format spec.

        "" / s / v   short text
        +v           short text followed by the captured stack, if any
        q            short text as a quoted string literal

    Any other spec is applied to the short text as a str format spec
    (width, alignment, ...); specs str rejects render the short text.
    """
    fs = parse_spec(spec)
    text = safe_str(err)

    if fs.verb not in ERROR_VERBS:
        try:
            return format(text, spec)
        except ValueError:
            return text

    if fs.verb == VALUE and fs.plus:
        if not get_config().format.show_stack:
            return text
        tracer = find_stack_tracer(err)
        if tracer is None:
            return text
        return text + format(tracer.stack_trace(), "+v")

    if fs.verb == QUOTED:
        return quote(text)

    return text

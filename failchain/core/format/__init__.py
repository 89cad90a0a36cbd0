# failchain/core/format/__init__.py
"""
Format verbs shared by errors, call sites and stack traces.

Every failchain value implements __format__, so the regular printing
machinery drives it:

    >>> f"{err}"      # short text
    >>> f"{err:+v}"   # short text plus the captured stack
    >>> f"{err:q}"    # quoted short text
"""

from .verbs import (
    SHORT,
    VALUE,
    QUOTED,
    LINE,
    NAME,
    PLUS,
    SHARP,
    ERROR_VERBS,
    FRAME_VERBS,
    FormatSpec,
    parse_spec,
    quote,
)

__all__ = [
    "SHORT",
    "VALUE",
    "QUOTED",
    "LINE",
    "NAME",
    "PLUS",
    "SHARP",
    "ERROR_VERBS",
    "FRAME_VERBS",
    "FormatSpec",
    "parse_spec",
    "quote",
]

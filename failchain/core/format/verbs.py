# failchain/core/format/verbs.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Final


# ---- verbs (stable public contract) ----
SHORT: Final[str] = "s"    # message only / file basename
VALUE: Final[str] = "v"    # same as SHORT unless the "+" flag is set
QUOTED: Final[str] = "q"   # message as a quoted string literal
LINE: Final[str] = "d"     # call site line number
NAME: Final[str] = "n"     # call site function name

# ---- flags ----
PLUS: Final[str] = "+"
SHARP: Final[str] = "#"

FLAGS: Final[frozenset[str]] = frozenset({PLUS, SHARP})

ERROR_VERBS: Final[frozenset[str]] = frozenset({SHORT, VALUE, QUOTED})
FRAME_VERBS: Final[frozenset[str]] = frozenset({SHORT, VALUE, LINE, NAME})


@dataclass(frozen=True)
class FormatSpec:
    """
    Parsed format spec: zero or more flags followed by a single verb.

    An empty spec means VALUE with no flags, matching plain str() output.
    """
    verb: str = VALUE
    flags: frozenset[str] = field(default_factory=frozenset)

    def flag(self, name: str) -> bool:
        return name in self.flags

    @property
    def plus(self) -> bool:
        return PLUS in self.flags


def parse_spec(spec: str) -> FormatSpec:
    """
    Parse a format spec such as "+v", "q" or "%+s".

    A leading "%" is accepted so printf-style verbs can be passed verbatim.
    Anything that is not a known flag followed by exactly one character is
    kept as-is in `verb`; renderers treat unknown verbs as their default form.
    """
    if not spec:
        return FormatSpec()

    text = spec[1:] if spec.startswith("%") else spec
    flags = set()
    i = 0
    while i < len(text) and text[i] in FLAGS:
        flags.add(text[i])
        i += 1

    verb = text[i:] or VALUE
    return FormatSpec(verb=verb, flags=frozenset(flags))


def quote(text: str) -> str:
    """Double-quote text, escaping quotes, backslashes and control characters."""
    return json.dumps(text, ensure_ascii=False)

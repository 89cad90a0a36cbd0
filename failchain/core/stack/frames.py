# failchain/core/stack/frames.py
"""
Call site and stack trace value types.

A CallSite keeps only what is needed to resolve a frame later: the code
object, the line being executed and the module name. Frames themselves are
never retained, so captured stacks do not pin locals in memory.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from types import CodeType
from typing import Iterator, Optional, Tuple, overload
import linecache

from failchain.config import get_config
from failchain.core.format.verbs import SHORT, VALUE, LINE, NAME, parse_spec
from failchain.utils.paths import base_name, display_path


UNKNOWN = "unknown"


@dataclass(frozen=True)
class CallSite:
    """
    One recorded frame.

    Format verbs:
        s    source file base name
        +s   function name and file path, separated by "\\n\\t"
        d    line number
        n    function name (qualified name without the module)
        v    s:d
        +v   +s:d
    """
    code: Optional[CodeType]
    lineno: int
    module: str = ""

    @property
    def name(self) -> str:
        if self.code is None:
            return UNKNOWN
        return getattr(self.code, "co_qualname", None) or self.code.co_name

    @property
    def function(self) -> str:
        """Module-qualified function name."""
        if self.code is None:
            return UNKNOWN
        if self.module:
            return f"{self.module}.{self.name}"
        return self.name

    @property
    def file(self) -> str:
        if self.code is None or not self.code.co_filename:
            return UNKNOWN
        return self.code.co_filename

    @property
    def line(self) -> int:
        if self.code is None:
            return 0
        return self.lineno or 0

    @property
    def source(self) -> Optional[str]:
        """Source text of the line, or None when it cannot be read."""
        if self.code is None or self.line <= 0:
            return None
        text = linecache.getline(self.file, self.line).strip()
        return text or None

    def __format__(self, spec: str) -> str:
        fs = parse_spec(spec)
        if fs.verb == SHORT:
            if fs.plus:
                fmt = get_config().format
                path = display_path(self.file, fmt.path_style, fmt.project_root)
                return f"{self.function}\n\t{path}"
            return base_name(self.file)
        if fs.verb == LINE:
            return str(self.line)
        if fs.verb == NAME:
            return self.name
        prefix = "+s" if fs.plus and fs.verb == VALUE else "s"
        return f"{format(self, prefix)}:{self.line}"

    def __str__(self) -> str:
        return format(self, "v")


@dataclass(frozen=True)
class StackTrace(Sequence):
    """
    Immutable sequence of call sites, innermost (capture site) first.

    Format verbs:
        s    [file file ...]
        v    [file:line file:line ...]
        +v   every call site as "\\n" followed by its +v form
    """
    frames: Tuple[CallSite, ...] = field(default_factory=tuple)

    @overload
    def __getitem__(self, index: int) -> CallSite: ...

    @overload
    def __getitem__(self, index: slice) -> "StackTrace": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return StackTrace(self.frames[index])
        return self.frames[index]

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[CallSite]:
        return iter(self.frames)

    @property
    def innermost(self) -> Optional[CallSite]:
        return self.frames[0] if self.frames else None

    def __format__(self, spec: str) -> str:
        fs = parse_spec(spec)
        if fs.verb == VALUE and fs.plus:
            show_source = get_config().format.show_source
            parts = []
            for site in self.frames:
                parts.append(f"\n{site:+v}")
                if show_source and site.source:
                    parts.append(f"\n\t\t{site.source}")
            return "".join(parts)

        verb = SHORT if fs.verb == SHORT else VALUE
        return "[" + " ".join(format(site, verb) for site in self.frames) + "]"

    def __str__(self) -> str:
        return format(self, "v")

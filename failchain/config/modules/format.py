# failchain/config/modules/format.py
"""
Format Module Configuration

Configuration for extended ("+v") rendering of call sites.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FormatConfig:
    """
    Format configuration.

    show_stack: If False, extended rendering prints the short text only
    path_style: "full" (as recorded), "relative" (to project_root) or "base" (file name)
    project_root: Directory "relative" paths are computed against; with no
        root, "relative" renders full paths. Never discovered from disk.
    show_source: If True, extended frames include the source line
    """

    show_stack: bool = True
    path_style: str = "full"
    project_root: Optional[str] = None
    show_source: bool = False

    @classmethod
    def default(cls) -> "FormatConfig":
        """Default format configuration"""
        return cls()

    @classmethod
    def compact(cls, project_root: str) -> "FormatConfig":
        """Paths relative to project_root, suited to log lines"""
        return cls(path_style="relative", project_root=project_root)

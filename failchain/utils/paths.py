# failchain/utils/paths.py
"""
Path display helpers for call sites.

Design goals:
- Pure string operations: nothing here touches the filesystem.
- The project root is always passed in; it is never discovered.
- Paths outside the root are shown in full.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Optional
import posixpath


PATH_STYLES = ("full", "relative", "base")


def _normalize(path: str) -> str:
    return posixpath.normpath(path.replace("\\", "/"))


def base_name(path: str) -> str:
    """Last path component, accepting both separators."""
    return posixpath.basename(path.replace("\\", "/"))


def format_relative_path(path: str, project_root: Optional[str]) -> str:
    """
    Format path as relative to project_root.
    Falls back to the full path when there is no root or the path lies outside it.
    """
    normalized = _normalize(path)
    if not project_root:
        return normalized

    try:
        rel_path = PurePosixPath(normalized).relative_to(_normalize(project_root))
    except ValueError:
        return normalized
    return str(rel_path)


def display_path(path: str, style: str = "full", project_root: Optional[str] = None) -> str:
    """Render a source file path in one of PATH_STYLES."""
    if style == "base":
        return base_name(path)
    if style == "relative":
        return format_relative_path(path, project_root)
    return path

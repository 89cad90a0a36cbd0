# failchain/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal
from dataclasses import dataclass
from .modules import StackConfig, FormatConfig
from failchain.utils.paths import PATH_STYLES


# Above this, every capture walks (and pins code objects for) a very deep stack
MAX_DEPTH_WARN_THRESHOLD = 512


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging and error messages.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "modules.stack.max_depth"
    message: str
    hint: str = ""  # Optional hint for fixing

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


class ConfigError(ValueError):
    """Raised when a configuration with error-level issues is activated."""

    def __init__(self, issues: List[ConfigIssue]) -> None:
        self.issues = list(issues)
        super().__init__("; ".join(f"{i.path}: {i.message}" for i in self.issues))


def validate_config(
    stack: StackConfig,
    fmt: FormatConfig,
) -> List[ConfigIssue]:
    """
    Validate configuration for illegal/misleading combinations.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    # Value domain validation (errors)
    if not isinstance(stack.max_depth, int) or isinstance(stack.max_depth, bool) or stack.max_depth < 1:
        issues.append(ConfigIssue(
            level="error",
            path="modules.stack.max_depth",
            message=f"Invalid max_depth value: {stack.max_depth!r} (must be an integer >= 1)",
            hint="Set modules.stack.max_depth to a positive integer such as 32",
        ))
    elif stack.max_depth > MAX_DEPTH_WARN_THRESHOLD:
        issues.append(ConfigIssue(
            level="warn",
            path="modules.stack.max_depth",
            message=f"max_depth={stack.max_depth} makes every capture walk a very deep stack",
            hint=f"Keep modules.stack.max_depth at or below {MAX_DEPTH_WARN_THRESHOLD}",
        ))

    if fmt.path_style not in PATH_STYLES:
        issues.append(ConfigIssue(
            level="error",
            path="modules.format.path_style",
            message=f"Invalid path_style value: '{fmt.path_style}' (must be one of {', '.join(PATH_STYLES)})",
            hint="Set modules.format.path_style to one of: full, relative, base",
        ))

    # Misleading combinations (warnings)
    if fmt.show_source and fmt.path_style == "base":
        issues.append(ConfigIssue(
            level="warn",
            path="modules.format.show_source",
            message="show_source=true with path_style='base' prints source lines without naming their file",
            hint="Use path_style='relative' or 'full' together with show_source",
        ))

    if fmt.project_root is not None and not isinstance(fmt.project_root, str):
        issues.append(ConfigIssue(
            level="error",
            path="modules.format.project_root",
            message=f"Invalid project_root value: {fmt.project_root!r} (must be a directory path string)",
            hint="Quote the path in YAML, or leave project_root unset",
        ))
    elif fmt.path_style == "relative" and not fmt.project_root:
        issues.append(ConfigIssue(
            level="warn",
            path="modules.format.project_root",
            message="path_style='relative' without project_root renders full paths",
            hint="Set modules.format.project_root to the directory paths should be relative to",
        ))

    return issues

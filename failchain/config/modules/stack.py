# failchain/config/modules/stack.py
"""
Stack Module Configuration

Configuration for call stack capture.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StackConfig:
    """
    Stack capture configuration.

    max_depth: Maximum number of call sites recorded per capture (>= 1).
    Capture cannot be switched off: every stack-bearing node owns at least
    the frame it was created in.
    """

    max_depth: int = 32

    @classmethod
    def default(cls) -> "StackConfig":
        """Default stack configuration"""
        return cls(max_depth=32)

    @classmethod
    def deep(cls) -> "StackConfig":
        """Record long stacks (recursive code, deep framework call chains)"""
        return cls(max_depth=256)

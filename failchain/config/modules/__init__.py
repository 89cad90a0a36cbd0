# failchain/config/modules/__init__.py
"""
Module configurations.
"""

from .stack import StackConfig
from .format import FormatConfig

__all__ = [
    "StackConfig",
    "FormatConfig",
]

# failchain/config/__init__.py
"""
failchain Configuration

Design principles:
1. Each module has its own semantic configuration
2. YAML is input parameters, code has defaults (YAML can be deleted)
3. Nothing is read from disk unless load_config(path) is called
4. Configs are immutable; set_config() swaps the active one
"""

# Module configurations
from .modules import (
    StackConfig,
    FormatConfig,
)

# Unified configuration
from .loader import FailChainConfig, load_config, get_config, set_config

# Validator
from .validator import validate_config, ConfigIssue, ConfigError

__all__ = [
    # Module configs
    "StackConfig",
    "FormatConfig",

    # Unified config
    "FailChainConfig",
    "load_config",
    "get_config",
    "set_config",

    # Validator
    "validate_config",
    "ConfigIssue",
    "ConfigError",
]

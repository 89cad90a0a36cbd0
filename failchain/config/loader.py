# failchain/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters, read only when the caller asks for a file
- Library works without YAML and never looks for one on its own
- Configs are immutable; set_config() swaps a single reference
"""

from __future__ import annotations

from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Optional, Dict, Any
import logging
import yaml

from .modules import StackConfig, FormatConfig
from .validator import validate_config, ConfigIssue, ConfigError


logger = logging.getLogger(__name__)


class FailChainConfig:
    """
    Unified failchain configuration.

    All fields have code defaults - YAML is optional.
    """

    def __init__(
        self,
        stack: Optional[StackConfig] = None,
        format: Optional[FormatConfig] = None,
    ):
        """Initialize with code defaults"""
        self.stack = stack or StackConfig.default()
        self.format = format or FormatConfig.default()

    @classmethod
    def default(cls) -> "FailChainConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Path) -> "FailChainConfig":
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML file

        Returns:
            FailChainConfig instance (code defaults for anything the file
            leaves out, or for the whole config if it is missing/unreadable)
        """
        yaml_data = _load_yaml(Path(config_path))
        if not yaml_data:
            return cls.default()

        modules = yaml_data.get("modules") or {}
        if not isinstance(modules, dict):
            logger.warning(f"Ignoring 'modules' in {config_path}: expected a mapping")
            return cls.default()

        return cls(
            stack=_merge_section(StackConfig.default(), modules, "stack", config_path),
            format=_merge_section(FormatConfig.default(), modules, "format", config_path),
        )

    def validate(self) -> list[ConfigIssue]:
        """
        Validate configuration for illegal/misleading combinations.

        Returns:
            List of issues (warn/error level)
        """
        return validate_config(self.stack, self.format)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "modules": {
                "stack": asdict(self.stack),
                "format": asdict(self.format),
            },
        }

    def __repr__(self) -> str:
        return f"FailChainConfig(stack={self.stack!r}, format={self.format!r})"


def _load_yaml(path: Path) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    if not path.exists():
        logger.debug(f"No failchain config at {path}; using code defaults")
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return None

    if data is not None and not isinstance(data, dict):
        logger.warning(f"Ignoring config file {path}: top level must be a mapping")
        return None
    return data


def _merge_section(default_instance, modules: Dict[str, Any], name: str, config_path: Path):
    """Overlay modules.<name> onto the default instance; unknown keys are dropped"""
    section = modules.get(name)
    if section is None:
        return default_instance
    if not isinstance(section, dict):
        logger.warning(f"Ignoring modules.{name} in {config_path}: expected a mapping, got {type(section).__name__}")
        return default_instance

    known = {f.name for f in fields(default_instance)}
    return replace(default_instance, **{k: v for k, v in section.items() if k in known})


def load_config(config_path: Path) -> FailChainConfig:
    """
    Load failchain configuration from an explicit YAML file.

    Args:
        config_path: Path to YAML file

    Returns:
        FailChainConfig instance (always has code defaults)

    Note:
        - Loading does not activate anything; pass the result to set_config()
        - If YAML is not found or invalid, returns code defaults
    """
    return FailChainConfig.from_yaml(config_path)


_DEFAULT_CONFIG = FailChainConfig.default()
_active_config: FailChainConfig = _DEFAULT_CONFIG


def get_config() -> FailChainConfig:
    """Get the active configuration (code defaults unless set_config() was called)."""
    return _active_config


def set_config(config: Optional[FailChainConfig]) -> None:
    """
    Activate a configuration for the whole process.

    Passing None restores the code defaults.
    Raises ConfigError if the config has error-level issues.
    """
    global _active_config
    if config is None:
        _active_config = _DEFAULT_CONFIG
        return

    issues = config.validate()
    errors = [i for i in issues if i.level == "error"]
    if errors:
        raise ConfigError(errors)
    for issue in issues:
        logger.warning(str(issue))
    _active_config = config


__all__ = [
    "FailChainConfig",
    "load_config",
    "get_config",
    "set_config",
]

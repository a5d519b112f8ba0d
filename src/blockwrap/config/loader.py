"""Configuration loader with YAML and environment variable support.

This module provides a configuration loader that reads from ~/.config/blockwrap/config.yaml
and allows environment variable overrides using the BLOCKWRAP_* prefix.

Environment variables:
- BLOCKWRAP_LINE_CAPACITY: Override capacity.line_capacity
- BLOCKWRAP_BLOCK_CAPACITY: Override capacity.block_capacity
- BLOCKWRAP_MODE: Override capacity.mode ("lines" or "height")
- BLOCKWRAP_COMMIT_DELAY: Override editor.commit_delay (seconds)
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from blockwrap.models.config import Config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Unlike Config.load(), a missing file is not an error: every setting has a
    default.

    Args:
        config_path: Path to config file. If None, uses ~/.config/blockwrap/config.yaml

    Returns:
        Validated Config object

    Raises:
        ValueError: If the config file is not valid YAML or fails validation
    """
    if config_path is None:
        config_path = Path.home() / ".config" / "blockwrap" / "config.yaml"

    if config_path.exists():
        with config_path.open() as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
    else:
        data = {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {config_path}")

    data = _apply_env_overrides(data)

    return Config(**data)


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration data.

    Args:
        data: Base configuration dictionary from YAML

    Returns:
        Configuration dictionary with environment overrides applied
    """
    if "capacity" not in data:
        data["capacity"] = {}
    if "editor" not in data:
        data["editor"] = {}

    if env_line := os.getenv("BLOCKWRAP_LINE_CAPACITY"):
        try:
            data["capacity"]["line_capacity"] = int(env_line)
        except ValueError:
            pass  # Invalid value, ignore

    if env_block := os.getenv("BLOCKWRAP_BLOCK_CAPACITY"):
        try:
            data["capacity"]["block_capacity"] = int(env_block)
        except ValueError:
            pass  # Invalid value, ignore

    if env_mode := os.getenv("BLOCKWRAP_MODE"):
        data["capacity"]["mode"] = env_mode.lower()

    if env_delay := os.getenv("BLOCKWRAP_COMMIT_DELAY"):
        try:
            data["editor"]["commit_delay"] = float(env_delay)
        except ValueError:
            pass  # Invalid value, ignore

    return data

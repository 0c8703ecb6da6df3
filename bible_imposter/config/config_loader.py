"""
Configuration loader for YAML-based game configurations.
"""

import logging
import yaml
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional, Union, get_args, get_origin

from .game_config import GameConfig

logger = logging.getLogger(__name__)


def _coerce(field_type: Any, value: Any) -> Any:
    """
    Convert a YAML value to a GameConfig field type.
    
    Raises:
        ValueError: If the value cannot represent the field type
    """
    if get_origin(field_type) is Union:
        args = [arg for arg in get_args(field_type) if arg is not type(None)]
        if value is None:
            return None
        field_type = args[0]
    
    if value is None:
        raise ValueError("value is required")
    if field_type is bool:
        if isinstance(value, bool):
            return value
        raise ValueError(f"expected true or false, got {value!r}")
    if field_type is int:
        if isinstance(value, bool) or isinstance(value, float) and not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    if field_type is str:
        if isinstance(value, (dict, list)):
            raise ValueError(f"expected a string, got {value!r}")
        return str(value)
    return value


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load game configuration from a YAML file.
    
    Args:
        config_path: Path to the YAML configuration file
        
    Returns:
        GameConfig instance with values from YAML file
        
    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
    """
    config_file = Path(config_path)
    
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(config_file, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f)
    
    # Fresh instance so callers never mutate the shared default
    config = GameConfig()
    
    if config_dict is None:
        return config
    
    field_types = {f.name: f.type for f in fields(GameConfig)}
    for key, value in config_dict.items():
        if key not in field_types:
            # Warn about unknown keys but don't fail
            logger.warning("Unknown config key '%s' in YAML file", key)
            continue
        try:
            setattr(config, key, _coerce(field_types[key], value))
        except (TypeError, ValueError) as e:
            logger.warning("Ignoring config key '%s': %s", key, e)
    
    config.validate()
    return config


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load configuration from YAML file or return default.
    
    Args:
        config_path: Optional path to YAML config file. If None, returns default config.
        
    Returns:
        GameConfig instance
    """
    if config_path is None:
        return GameConfig()
    
    return load_config_from_yaml(config_path)

"""
Configuration validation utilities.

Environment lookups and typed coercion for ModAgentConfig values.
"""
import os
from typing import Optional
from .exceptions import ConfigurationError


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    return os.getenv(key, default)


def validate_float(value: str, key: str, minimum: float = 0.0) -> float:
    """
    Parse a float setting and check its lower bound.
    
    :param value: Raw string value
    :param key: Setting name (for error messages)
    :param minimum: Smallest accepted value
    :return: Parsed value
    :raises: ConfigurationError if not a number or below minimum
    """
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got {value!r}.")
    
    if parsed < minimum:
        raise ConfigurationError(f"{key} must be at least {minimum}, got {parsed}.")
    
    return parsed


def validate_int(value: str, key: str, minimum: int = 0) -> int:
    """
    Parse an integer setting and check its lower bound.
    
    :param value: Raw string value
    :param key: Setting name (for error messages)
    :param minimum: Smallest accepted value
    :return: Parsed value
    :raises: ConfigurationError if not an integer or below minimum
    """
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}.")
    
    if parsed < minimum:
        raise ConfigurationError(f"{key} must be at least {minimum}, got {parsed}.")
    
    return parsed


def validate_path(path: str, path_name: str) -> str:
    """
    Validate a file path whose parent directory must already exist.
    
    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")
    
    parent = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(parent):
        raise ConfigurationError(
            f"{path_name} points into a missing directory: {parent}\n"
            f"Please create the directory or choose another path."
        )
    
    return path

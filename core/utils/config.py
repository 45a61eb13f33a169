"""
Configuration utility functions
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def resolve_config_path(filepath: str) -> Path:
    """
    Resolve a config path against the working directory, then the project root

    Lets the CLI run from any directory while tests can still point at
    temporary files with absolute paths.
    """
    path = Path(filepath)
    if path.is_absolute() or path.exists():
        return path
    return PROJECT_ROOT / path


def load_yaml(filepath: str) -> dict[str, Any]:
    """
    Load YAML file and return as dictionary

    Args:
        filepath: Path to YAML file (relative or absolute)

    Returns:
        Dictionary with YAML data ({} for an empty file)

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML is invalid

    Example:
        >>> config = load_yaml("config/providers/storage.yaml")
        >>> print(config['supabase']['bucket'])
        images
    """
    path = resolve_config_path(filepath)

    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {filepath}")

    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_yaml_safe(filepath: str) -> dict[str, Any]:
    """
    Load YAML file with fallback to empty dict if file is missing or invalid

    Args:
        filepath: Path to YAML file

    Returns:
        Dictionary with YAML data, or empty dict
    """
    try:
        return load_yaml(filepath)
    except (FileNotFoundError, yaml.YAMLError) as e:
        logger.warning(f"Using defaults, could not load {filepath}: {e}")
        return {}

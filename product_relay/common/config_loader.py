"""
Configuration Loader

Loads YAML configuration files for endpoint URLs and transport settings.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .constants import DEFAULT_TIMEOUT_SECONDS

RELAY_SETTINGS_FILE = 'relay.yaml'


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file from the config directory.

    Args:
        filename: Name of the config file (e.g., 'relay.yaml')

    Returns:
        Parsed YAML content as dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    return _load_yaml(_get_config_dir() / filename)


def _load_yaml(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_relay_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load endpoint and transport settings.

    Args:
        path: Explicit YAML file (if None, loads config/relay.yaml)

    Returns:
        Dictionary with 'source_url', 'destination_url' (None when unset)
        and 'timeout_seconds'

    Example:
        {
            'source_url': 'https://catalog.example.com/api/products',
            'destination_url': 'https://ingest.example.com/api/product-batches',
            'timeout_seconds': 10,
        }
    """
    if path is None:
        config = load_config(RELAY_SETTINGS_FILE)
    else:
        config = _load_yaml(Path(path))

    relay = config.get('relay', {}) or {}
    return {
        'source_url': relay.get('source_url') or None,
        'destination_url': relay.get('destination_url') or None,
        'timeout_seconds': relay.get('timeout_seconds', DEFAULT_TIMEOUT_SECONDS),
    }

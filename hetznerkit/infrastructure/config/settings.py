"""Provides functions for loading and accessing configuration settings.

Supports loading from .env files, environment variables, and a YAML
configuration file (~/.hetznerkit/config.yaml). The facades read API tokens,
base URLs and the HTTP timeout from here when they are not passed explicitly.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".hetznerkit"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0

# --- Global Configuration Store ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_loaded = False

def load_configuration(config_file: Path = DEFAULT_CONFIG_FILE, env_file: Optional[Path] = None) -> None:
    """Loads configuration from environment, .env file, and YAML file.

    Priority order (highest to lowest):
    1. Environment Variables
    2. .env file
    3. YAML configuration file
    4. Default values passed to get_config

    Args:
        config_file: Path to the YAML configuration file.
        env_file: Path to the .env file (searches upwards from cwd if None).
    """
    global _config, _loaded
    if _loaded:
        logger.debug("Configuration already loaded.")
        return

    _config = {}

    # 1. YAML file (lowest priority)
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                yaml_config = yaml.safe_load(f)
            if isinstance(yaml_config, dict):
                _config.update(_flatten(yaml_config))
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. .env file; override=False keeps real environment variables on top
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path:
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logger.debug("Skipping .env file loading (no file found).")

    # 3. Environment variables are read lazily by get_config
    _loaded = True

def reset_configuration() -> None:
    """Forgets everything loaded so the next load_configuration() starts fresh."""
    global _config, _loaded
    _config = {}
    _loaded = False

def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Flattens nested YAML mappings into dotted keys ('cloud.token')."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{dotted}."))
        else:
            flat[dotted] = value
    return flat

def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by key.

    Priority:
    1. Test configuration
    2. Environment variable (key upper-cased, dots replaced by underscores)
    3. YAML config
    4. Default value

    Args:
        key: The configuration key, e.g. 'cloud.base_url'
        default: Default value if the key is not found

    Returns:
        The configuration value
    """
    if key in _test_config:
        return _test_config[key]

    env_key = key.upper().replace('.', '_')
    if env_key in os.environ:
        value = os.environ[env_key]
        if value.lower() == 'true':
            return True
        elif value.lower() == 'false':
            return False
        try:
            if '.' in value:
                return float(value)
            else:
                return int(value)
        except ValueError:
            return value

    if key in _config:
        return _config[key]

    logger.debug(f"Config key '{key}' not found in environment or loaded config. Returning default: {default}")
    return default

def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None

# --- Convenience Functions ---

def _get_str(*keys: str) -> Optional[str]:
    for key in keys:
        value = get_config(key)
        if value is not None:
            return str(value)
    return None

def get_cloud_token() -> Optional[str]:
    """Cloud API token: HCLOUD_TOKEN, then cloud.token."""
    return _get_str('HCLOUD_TOKEN', 'cloud.token')

def get_dns_token() -> Optional[str]:
    """DNS API token: HETZNER_DNS_TOKEN, then dns.token."""
    return _get_str('HETZNER_DNS_TOKEN', 'dns.token')

def get_cloud_base_url() -> Optional[str]:
    return _get_str('cloud.base_url')

def get_dns_base_url() -> Optional[str]:
    return _get_str('dns.base_url')

def get_http_timeout() -> float:
    """HTTP timeout in seconds for the transports."""
    timeout = get_config('http.timeout', DEFAULT_HTTP_TIMEOUT_SECONDS)
    try:
        return float(timeout)
    except (TypeError, ValueError):
        logger.warning(f"Invalid http.timeout value '{timeout}'. Using {DEFAULT_HTTP_TIMEOUT_SECONDS}s.")
        return DEFAULT_HTTP_TIMEOUT_SECONDS

def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """
    Set configuration values for testing purposes.
    These values override any other source.
    """
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")

def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")

#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging

from .exit_codes import ConfigError

logger = logging.getLogger("seafileclient")

CONFIG_FILENAMES = ['config.json', 'config.toml', 'config.yaml', 'config.yml']


def get_config_dir():
    return Path.home() / '.seafileclient'


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. SEAFILE_CONFIG environment variable
    2. ~/.seafileclient/ directory
    """
    if 'SEAFILE_CONFIG' in os.environ:
        return Path(os.environ['SEAFILE_CONFIG']).expanduser()

    config_dir = get_config_dir()
    for filename in CONFIG_FILENAMES:
        path = config_dir / filename
        if path.exists():
            return path

    # If no file exists, return default path for saving
    return config_dir / 'config.json'


def get_default_config():
    """Get default configuration."""
    return {
        "server": {
            "url": "",
            "token": "",
            "timeout_seconds": 30,
            "verify_tls": True
        },
        "logging": {
            "level": "INFO",
            "format": "%(levelname)s: %(message)s"
        }
    }


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    # Start with default config
    config = get_default_config()

    if config_path.exists():
        try:
            if config_path.suffix.lower() in ['.toml']:
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif config_path.suffix.lower() in ['.yaml', '.yml']:
                import yaml
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)
        except Exception as e:
            raise ConfigError(f"Error loading config from {config_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        config = merge_configs(config, file_config)

    return apply_env_overrides(config)


def save_config(config):
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    if config_path.suffix.lower() in ['.yaml', '.yml']:
        import yaml
        with open(config_path, 'w') as f:
            yaml.safe_dump(config, f, default_flow_style=False)
    else:
        if config_path.suffix.lower() != '.json':
            logger.warning(f"Cannot write {config_path.suffix} config, saving as JSON instead.")
            config_path = config_path.with_suffix('.json')
        with open(config_path, 'w') as f:
            json.dump(config, f, indent=2)

    # The file holds an API token
    os.chmod(config_path, 0o600)
    logger.info(f"Configuration saved to {config_path}")
    return config_path


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def _env_value(value):
    if value.lower() in ('true', 'yes', 'on'):
        return True
    if value.lower() in ('false', 'no', 'off'):
        return False
    if value.isdigit():
        return int(value)
    return value


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.

    Every known `section.key` can be set as SEAFILE_<SECTION>_<KEY>,
    e.g. SEAFILE_SERVER_TOKEN=abc123 or SEAFILE_LOGGING_LEVEL=DEBUG.
    Unknown names are ignored.
    """
    for section, values in config.items():
        if not isinstance(values, dict):
            continue
        for key in values:
            env_key = f"SEAFILE_{section}_{key}".upper()
            if env_key in os.environ:
                values[key] = _env_value(os.environ[env_key])

    return config


def create_transport(config):
    """
    Build a SeafileTransport from the `server` config section.

    Raises:
        ConfigError: server url or token is not configured
    """
    from .infra import SeafileTransport

    server = config.get('server', {})
    url = server.get('url')
    token = server.get('token')
    if not url:
        raise ConfigError("No server configured. Run 'seafile login' or set SEAFILE_SERVER_URL.")
    if not token:
        raise ConfigError("No API token configured. Run 'seafile login' or set SEAFILE_SERVER_TOKEN.")

    return SeafileTransport(
        url,
        token=token,
        timeout=server.get('timeout_seconds', 30),
        verify_tls=server.get('verify_tls', True),
    )

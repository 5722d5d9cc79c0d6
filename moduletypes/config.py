#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

from .exit_codes import ConfigError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("moduletypes")

CONFIG_FILENAMES = ['config.json', 'config.toml', 'config.yaml', 'config.yml']


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. MODULETYPES_CONFIG environment variable
    2. ~/.moduletypes/ directory
    """
    if 'MODULETYPES_CONFIG' in os.environ:
        path = Path(os.environ['MODULETYPES_CONFIG'])
        if path.exists():
            return path

    config_dir = Path.home() / '.moduletypes'
    for filename in CONFIG_FILENAMES:
        path = config_dir / filename
        if path.exists() and path.stat().st_size > 10:  # Not empty/trivial
            return path

    # If no file exists, return default path for saving
    return config_dir / 'config.json'


def load_config():
    """Load configuration from file.

    Raises:
        ConfigError: If the config file exists but cannot be parsed
    """
    config_path = get_config_path()

    config = get_default_config()

    if config_path.exists():
        try:
            if config_path.suffix.lower() in ['.toml']:
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif config_path.suffix.lower() in ['.yaml', '.yml']:
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f)
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)
        except (OSError, json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")
            raise ConfigError(f"Error loading config from {config_path}: {e}") from e

        if file_config:
            if not isinstance(file_config, dict):
                raise ConfigError(f"{config_path.name} must contain a mapping at the root")
            config = merge_configs(config, file_config)

    # Apply environment variable overrides
    config = apply_env_overrides(config)

    return config


def save_config(config):
    """Save configuration to file."""
    config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    if config_path.suffix.lower() in ['.toml']:
        # tomllib is read-only
        logger.warning("Cannot write TOML config. Saving as JSON instead.")
        config_path = config_path.with_suffix('.json')

    if config_path.suffix.lower() in ['.yaml', '.yml']:
        with open(config_path, 'w') as f:
            yaml.safe_dump(config, f, default_flow_style=False)
    else:
        with open(config_path, 'w') as f:
            json.dump(config, f, indent=2)

    logger.info(f"Configuration saved to {config_path}")
    return config_path


def get_default_config():
    """Get default configuration."""
    return {
        "classifier": {
            "android_facet_name": "Android",
            "gradle_system_id": "GRADLE",
            "kobalt_system_id": "KOBALT"
        },
        "logging": {
            "level": "INFO",
            "format": "%(levelname)s: %(message)s"
        },
        "output": {
            "pretty": False
        }
    }


def generate_config_example():
    """Generate an example configuration file next to the config path."""
    config = get_default_config()
    config_path = get_config_path().parent / 'config.example.json'
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w') as f:
        json.dump(config, f, indent=2)

    logger.info(f"An example configuration file has been saved to {config_path}")
    logger.info("Copy it to config.json and edit it to configure moduletypes.")
    return config_path


def configure_logging(config, verbose=False):
    """Apply the 'logging' section of the configuration to the package logger."""
    section = config.get("logging", {})
    level_name = "DEBUG" if verbose else str(section.get("level", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level '{level_name}', using INFO")
        level = logging.INFO
    logger.setLevel(level)

    fmt = section.get("format")
    if fmt:
        for handler in logging.getLogger().handlers:
            # Only the console handler installed above
            if type(handler) is logging.StreamHandler:
                handler.setFormatter(logging.Formatter(fmt))
    return logger


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


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: MODULETYPES_SECTION_KEY
    For example: MODULETYPES_CLASSIFIER_ANDROID_FACET_NAME=Android
    Values take the type of the setting they replace.
    """
    env_prefix = "MODULETYPES_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix):
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts_from_key = config_key.split('_')
                if key_parts[i : i + len(config_key_parts_from_key)] == config_key_parts_from_key:
                    if len(config_key_parts_from_key) > best_match_len:
                        best_match_len = len(config_key_parts_from_key)
                        matched_key = config_key

            if matched_key:
                if i + best_match_len == len(key_parts):
                    current_level[matched_key] = _coerce_env_value(value, current_level[matched_key])
                    break

                if isinstance(current_level[matched_key], dict):
                    current_level = current_level[matched_key]
                    i += best_match_len
                else:
                    # Path conflict, e.g., env var is longer but we found a non-dict value
                    break
            else:
                break

    return config


def _coerce_env_value(value, current):
    """Convert an env var string to the type of the setting it overrides."""
    lowered = value.lower()
    if isinstance(current, str):
        return value
    if isinstance(current, bool) or current is None:
        if lowered in ('true', 'yes', 'on'):
            return True
        if lowered in ('false', 'no', 'off'):
            return False
    if isinstance(current, int) and not isinstance(current, bool):
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Expected an integer, got '{value}'")
            return value
    if current is None and value.isdigit():
        return int(value)
    return value

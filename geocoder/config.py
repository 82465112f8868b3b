"""
Configuration loading for the Nominatim geocoder.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict

import tomli

from .exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace environment variable placeholders with actual values.

    Args:
        match: A regex match object containing the environment variable name.

    Returns:
        str: The value of the environment variable or the original placeholder
             if the variable is not set.
    """
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute environment variable placeholders in configuration values.

    Placeholders have the form ${VAR_NAME}. Strings, dictionaries and lists are
    processed, any other value is returned unchanged.
    """
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


def loadConfig(configPath: str = "geocoder.toml") -> Dict[str, Any]:
    """Load configuration from TOML file, dood!

    Args:
        configPath: Path to TOML configuration file

    Returns:
        Dict[str, Any]: Configuration with environment placeholders substituted

    Raises:
        InvalidConfigurationError: If the file does not exist or is not valid TOML
    """
    configFile = Path(configPath)
    if not configFile.is_file():
        logger.error(f"Configuration file {configPath} not found!")
        raise InvalidConfigurationError(f"configuration file {configPath} not found")

    try:
        with open(configFile, "rb") as f:
            config = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        logger.error(f"Failed to parse configuration {configPath}: {e}")
        raise InvalidConfigurationError(f"invalid TOML in {configPath}: {e}") from e

    logger.info(f"Loaded config from {configPath}")
    return substituteEnvVars(config)


def getGeocoderConfig(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get geocoder-specific configuration."""
    return config.get("geocoder", {})


def getLoggingConfig(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get logging-specific configuration."""
    return config.get("logging", {})

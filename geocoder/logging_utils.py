"""
Logging setup for the geocoder package.

Only the "geocoder" logger hierarchy is touched; root logger and handlers of
the host application stay as they are.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "geocoder"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def getLogLevelByStr(levelStr: str, default: Optional[int] = None) -> Optional[int]:
    """Get log level by string."""
    level = getattr(logging, str(levelStr).upper(), None)
    if not isinstance(level, int):
        logger.error(f"Invalid log level '{levelStr}'")
        return default
    return level


def initLogging(config: Dict[str, Any]) -> logging.Logger:
    """Configure the geocoder logger from the [logging] config section, dood!

    Supported keys: level, format, console (attach stderr handler), httpx-level.

    Returns:
        The configured "geocoder" logger
    """
    packageLogger = logging.getLogger(PACKAGE_LOGGER)

    if "level" in config:
        logLevel = getLogLevelByStr(config["level"])
        if logLevel is not None:
            packageLogger.setLevel(logLevel)

    # Drop handlers left from previous call
    for handler in packageLogger.handlers[:]:
        if getattr(handler, "_geocoderHandler", False):
            packageLogger.removeHandler(handler)

    if config.get("console", False):
        consoleHandler = logging.StreamHandler()
        consoleHandler.setFormatter(logging.Formatter(config.get("format", DEFAULT_LOG_FORMAT)))
        setattr(consoleHandler, "_geocoderHandler", True)
        packageLogger.addHandler(consoleHandler)

    # httpx logs every request on INFO
    httpxLevel = getLogLevelByStr(config.get("httpx-level", "WARNING"), logging.WARNING)
    logging.getLogger("httpx").setLevel(httpxLevel or logging.WARNING)
    logging.getLogger("httpcore").setLevel(httpxLevel or logging.WARNING)

    logger.debug(f"Logging configured: level={packageLogger.getEffectiveLevel()}")
    return packageLogger

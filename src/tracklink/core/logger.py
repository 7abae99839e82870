"""
Logging setup for Tracklink.

Every module logs through a child of the "tracklink" logger, which writes
to stderr so that command output on stdout stays clean.
"""

import logging
import sys
from typing import Optional
from .config import LOGGING_CONFIG

PACKAGE_LOGGER = "tracklink"


def setup_logging(
    level: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Configure the package logger.
    
    Calling it again replaces the previous configuration.
    
    Args:
        level: Level name, case-insensitive (default: LOGGING_CONFIG["LEVEL"]);
            unknown names fall back to INFO
        enable_console: Whether to attach the stderr handler
        
    Returns:
        The package logger
    """
    level_name = (level or LOGGING_CONFIG["LEVEL"]).upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()
    package_logger.propagate = False
    
    if enable_console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(LOGGING_CONFIG["FORMAT"]))
        package_logger.addHandler(handler)
    
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get the logger for a module.
    
    Accepts either a module `__name__` or a path below the package,
    e.g. "services.match_ranker".
    """
    prefix = f"{PACKAGE_LOGGER}."
    if name.startswith(prefix):
        name = name[len(prefix):]
    return logging.getLogger(prefix + name)

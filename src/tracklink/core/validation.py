"""
Startup checks for installed dependencies and configuration values.
"""

import importlib
from typing import List, Tuple
from .config import (
    MUSICBRAINZ_CONFIG,
    SUGGESTION_CONFIG,
    LOGGING_CONFIG,
)
from .exceptions import ConfigurationError

# import name -> distribution name
REQUIRED_PACKAGES = {
    "requests": "requests",
    "rapidfuzz": "rapidfuzz",
    "mutagen": "mutagen",
    "rich": "rich",
}

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# (config name, config dict, key, minimum)
MINIMUM_VALUES = (
    ("MusicBrainz", MUSICBRAINZ_CONFIG, "REQUEST_DELAY", 0),
    ("MusicBrainz", MUSICBRAINZ_CONFIG, "TIMEOUT", 1),
    ("Suggestion", SUGGESTION_CONFIG, "MAX_LENGTH_DIFFERENCE", 0),
    ("Suggestion", SUGGESTION_CONFIG, "RELEASE_GROUP_PAGE_SIZE", 1),
    ("Suggestion", SUGGESTION_CONFIG, "SEARCH_LIMIT", 1),
    ("Suggestion", SUGGESTION_CONFIG, "AUTOCOMPLETE_PAGE_SIZE", 1),
    ("Suggestion", SUGGESTION_CONFIG, "RETRY_DELAY", 0),
    ("Suggestion", SUGGESTION_CONFIG, "DEBOUNCE_DELAY", 0),
)


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.
    
    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    missing = []
    for module_name, package_name in REQUIRED_PACKAGES.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)
    
    return not missing, missing


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Check dependencies and configuration values.
    
    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []
    
    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Install them with: pip install -e ."
        )
    
    for config_name, config, key, minimum in MINIMUM_VALUES:
        if config[key] < minimum:
            errors.append(f"{config_name} {key} must be >= {minimum}")
    
    if not 0 < SUGGESTION_CONFIG["NAME_SIMILARITY_THRESHOLD"] <= 1:
        errors.append("Suggestion NAME_SIMILARITY_THRESHOLD must be in (0, 1]")
    
    # None means retry until cancelled
    max_attempts = SUGGESTION_CONFIG["MAX_RETRY_ATTEMPTS"]
    if max_attempts is not None and max_attempts < 1:
        errors.append("Suggestion MAX_RETRY_ATTEMPTS must be >= 1 or None")
    
    if LOGGING_CONFIG["LEVEL"] not in VALID_LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(VALID_LOG_LEVELS)}")
    
    return not errors, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        details = "\n".join(f"  - {error}" for error in errors)
        raise ConfigurationError(f"Configuration validation failed:\n{details}")

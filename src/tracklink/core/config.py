"""
Configuration for Tracklink.
Contains all constants, settings, and global parameters.
"""

# Project Information
PROJECT_NAME = "Tracklink"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Recording suggestions for release track listings"

# MusicBrainz Configuration
MUSICBRAINZ_CONFIG = {
    "BASE_URL": "https://musicbrainz.org/ws/2",
    "USER_AGENT": f"{PROJECT_NAME}/{PROJECT_VERSION} (contact@example.com)",
    "REQUEST_DELAY": 1.0,  # Rate limiting - MusicBrainz allows 1 request per second
    "TIMEOUT": 30,
}

# Suggestion Engine Configuration
SUGGESTION_CONFIG = {
    "MAX_LENGTH_DIFFERENCE": 10 * 1000,  # milliseconds
    "NAME_SIMILARITY_THRESHOLD": 0.75,
    "RELEASE_GROUP_PAGE_SIZE": 100,
    "SEARCH_LIMIT": 25,
    "AUTOCOMPLETE_PAGE_SIZE": 10,
    "RETRY_DELAY": 5.0,  # seconds
    "MAX_RETRY_ATTEMPTS": None,  # None = retry until cancelled
    "DEBOUNCE_DELAY": 0.5,  # seconds
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": "INFO",
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# Error Messages
ERROR_MESSAGES = {
    "NO_RESULTS": "No suggested recordings found.",
    "INVALID_LENGTH": "Invalid length format. Use M:SS or milliseconds.",
    "MISSING_TITLE": "A track title is required (use --title or a tagged --file)",
}

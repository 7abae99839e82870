"""
Custom exceptions for Tracklink.
"""


class TracklinkError(Exception):
    """Base exception for Tracklink."""
    pass


class SearchError(TracklinkError):
    """Exception raised when search operations fail."""
    pass


class ConfigurationError(TracklinkError):
    """Exception raised when configuration is invalid."""
    pass


class APIError(TracklinkError):
    """Exception raised when API calls fail."""
    pass


class NetworkError(TracklinkError, ConnectionError):
    """Exception raised when network operations fail."""
    pass

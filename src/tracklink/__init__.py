"""
Tracklink - recording suggestions for release track listings.
"""

__version__ = "1.0.0"

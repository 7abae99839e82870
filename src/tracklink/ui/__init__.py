"""
User interface modules for Tracklink.
"""

from .cli import TracklinkCLI
from .formatters import DisplayFormatters

__all__ = ['TracklinkCLI', 'DisplayFormatters']

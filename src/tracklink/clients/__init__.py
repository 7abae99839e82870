"""
Client modules for external APIs.
"""

from .musicbrainz import MusicBrainzClient

__all__ = [
    'MusicBrainzClient'
]

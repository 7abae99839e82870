"""
Data models for Tracklink.
"""

from .artist_credit import ArtistCredit, ArtistCreditName
from .observable import Observable, TrackField, Subscription
from .recording import Recording, AppearsOn, ReleaseAppearance
from .release import ReleaseGroup
from .track import Track

__all__ = [
    'ArtistCredit',
    'ArtistCreditName',
    'Observable',
    'TrackField',
    'Subscription',
    'Recording',
    'AppearsOn',
    'ReleaseAppearance',
    'ReleaseGroup',
    'Track'
]

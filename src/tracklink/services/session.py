"""
Release edit session state shared by the suggestion engine.
"""

from typing import List, Optional

from ..models.observable import Observable
from ..models.release import ReleaseGroup
from ..models.track import Track
from .entity_cache import EntityCache


class ReleaseEditSession:
    """
    The release being edited: its selected release group, its tracks and
    the entity cache that lives as long as the edit does.
    """
    
    def __init__(self, release_group: Optional[ReleaseGroup] = None, entity_cache: Optional[EntityCache] = None):
        self.release_group: Observable[Optional[ReleaseGroup]] = Observable(release_group)
        self.entity_cache = entity_cache or EntityCache()
        self.tracks: List[Track] = []
    
    def add_track(self, track: Track) -> Track:
        """Add a track, caching the recordings it is already linked to."""
        self.tracks.append(track)
        for recording in (track.recording.get(), track.recording.saved, track.recording.original):
            if recording is not None and recording.gid:
                self.entity_cache.add(recording)
        return track

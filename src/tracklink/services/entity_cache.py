"""
Session-scoped identity cache for recordings.
"""

from typing import Dict, Iterator, Optional

from ..models.recording import Recording


class EntityCache:
    """
    Keeps one Recording instance per identifier.
    
    Recordings already linked to tracks are registered when the edit session
    loads, without appearance data; later search results backfill it.
    """
    
    def __init__(self):
        self._recordings: Dict[str, Recording] = {}
    
    def get(self, gid: str) -> Optional[Recording]:
        return self._recordings.get(gid)
    
    def add(self, recording: Recording) -> Recording:
        """Register a recording unless one with the same identifier exists."""
        return self._recordings.setdefault(recording.gid, recording)
    
    def entity(self, recording: Recording) -> Recording:
        """Return the cached instance for `recording`, caching it if new."""
        if not recording.gid:
            return recording
        return self.add(recording)
    
    def backfill_appearances(self, recording: Recording) -> None:
        """Copy appearance data onto a cached recording that lacks it."""
        cached = self._recordings.get(recording.gid)
        if cached is not None and cached is not recording and cached.appears_on is None and recording.appears_on is not None:
            cached.appears_on = recording.appears_on.copy()
    
    def clear(self):
        self._recordings.clear()
    
    def __contains__(self, gid: str) -> bool:
        return gid in self._recordings
    
    def __len__(self) -> int:
        return len(self._recordings)
    
    def __iter__(self) -> Iterator[Recording]:
        return iter(self._recordings.values())

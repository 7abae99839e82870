"""
Track model for the release editor.
"""

from typing import List, Optional

from .artist_credit import ArtistCredit
from .observable import Observable, TrackField
from .recording import Recording


class Track:
    """
    An editable line in a release's track listing.
    
    Name, length, artist credit and recording are observable fields with
    `saved` and `original` snapshots. The suggestion engine only writes
    `recording`, `suggested_recordings` and `loading_suggested_recordings`.
    """
    
    def __init__(
        self,
        name: str = "",
        length: Optional[int] = None,
        artist_credit: Optional[ArtistCredit] = None,
        recording: Optional[Recording] = None,
        position: int = 0,
        saved: bool = False
    ):
        """
        Args:
            name: Track title
            length: Track length in milliseconds
            artist_credit: Credited artists
            recording: Currently linked recording
            position: Position in the track listing
            saved: Whether the values were loaded from an existing release,
                in which case they also become the `saved`/`original` snapshots
        """
        factory = TrackField.loaded if saved else TrackField
        self.position = position
        self.name: TrackField[str] = factory(name)
        self.length: TrackField[Optional[int]] = factory(length)
        self.artist_credit: TrackField[ArtistCredit] = factory(artist_credit or ArtistCredit())
        self.recording: TrackField[Optional[Recording]] = factory(recording)
        self.suggested_recordings: Observable[List[Recording]] = Observable([])
        self.loading_suggested_recordings: Observable[bool] = Observable(False)
    
    def has_existing_recording(self) -> bool:
        recording = self.recording.get()
        return bool(recording and recording.gid)
    
    def mark_saved(self):
        """Record the current values as the saved snapshot."""
        for track_field in (self.name, self.length, self.artist_credit, self.recording):
            track_field.saved = track_field.get()
    
    def __repr__(self) -> str:
        return f"Track(position={self.position}, name={self.name.get()!r})"

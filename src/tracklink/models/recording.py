"""
Recording candidate models.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .artist_credit import ArtistCredit


@dataclass(frozen=True)
class ReleaseAppearance:
    """A release a recording appears on."""
    gid: str
    name: str
    release_group_gid: str


@dataclass
class AppearsOn:
    """Releases a recording appears on, one per release group."""
    hits: int = 0
    results: List[ReleaseAppearance] = field(default_factory=list)
    entity_type: str = "release"
    
    def copy(self) -> "AppearsOn":
        return AppearsOn(hits=self.hits, results=list(self.results), entity_type=self.entity_type)


@dataclass
class Recording:
    """A catalog recording that a track may be linked to."""
    gid: str
    name: str
    length: Optional[int] = None  # milliseconds
    artist: str = ""
    artist_credit: ArtistCredit = field(default_factory=ArtistCredit)
    video: bool = False
    comment: str = ""
    appears_on: Optional[AppearsOn] = None
    
    @property
    def appearance_count(self) -> int:
        """Number of distinct release groups the recording appears on."""
        return len(self.appears_on.results) if self.appears_on else 0
    
    @property
    def url(self) -> str:
        return f"https://musicbrainz.org/recording/{self.gid}"
    
    def get_display_name(self) -> str:
        """Get display name for the recording."""
        if self.comment:
            return f"{self.name} ({self.comment})"
        return self.name or "Unknown"

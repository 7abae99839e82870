"""
Artist credit models.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class ArtistCreditName:
    """One credited artist within an artist credit."""
    artist_gid: Optional[str]
    name: str
    join_phrase: str = ""


@dataclass(frozen=True)
class ArtistCredit:
    """Ordered sequence of credited artists."""
    names: Tuple[ArtistCreditName, ...] = ()
    
    @classmethod
    def of(cls, *names: ArtistCreditName) -> "ArtistCredit":
        return cls(tuple(names))
    
    @classmethod
    def from_web_service(cls, credits: Optional[Iterable[Dict[str, Any]]]) -> "ArtistCredit":
        """Build an artist credit from a MusicBrainz `artist-credit` array."""
        names = []
        for credit in credits or []:
            artist = credit.get('artist') or {}
            names.append(ArtistCreditName(
                artist_gid=artist.get('id'),
                name=credit.get('name') or artist.get('name', ''),
                join_phrase=credit.get('joinphrase', '') or ''
            ))
        return cls(tuple(names))
    
    @property
    def artist_gids(self) -> List[str]:
        return [name.artist_gid for name in self.names if name.artist_gid]
    
    def is_complete(self) -> bool:
        """True when every credited name has both an artist and a name."""
        return bool(self.names) and all(
            name.artist_gid and name.name for name in self.names
        )
    
    def reduce(self) -> str:
        """Display string, e.g. "Artist A & Artist B"."""
        return ''.join(name.name + name.join_phrase for name in self.names)
    
    def __str__(self) -> str:
        return self.reduce()

"""
Turn raw web service recording records into Recording candidates.
"""

from typing import Any, Dict, List, Optional

from ..models.artist_credit import ArtistCredit
from ..models.recording import AppearsOn, Recording, ReleaseAppearance
from .entity_cache import EntityCache


def _parse_appearances(releases: Optional[List[Dict[str, Any]]]) -> List[ReleaseAppearance]:
    """One appearance per release group, keeping the first release seen."""
    appearances = []
    seen_release_groups = set()
    
    for release in releases or []:
        release_group_gid = (release.get('release-group') or {}).get('id', '')
        if release_group_gid in seen_release_groups:
            continue
        seen_release_groups.add(release_group_gid)
        # The web service doesn't include the release group title,
        # so the release title stands in for it.
        appearances.append(ReleaseAppearance(
            gid=release.get('id', ''),
            name=release.get('title', ''),
            release_group_gid=release_group_gid
        ))
    
    return appearances


def clean_recording_data(data: Dict[str, Any], entity_cache: Optional[EntityCache] = None) -> Recording:
    """
    Build a Recording from a web service recording record.
    
    When the entity cache already holds this recording without appearance
    data, the freshly parsed appearances are copied onto it.
    
    Args:
        data: One element of a search response's "recordings" list
        entity_cache: Session entity cache to backfill
        
    Returns:
        A new (uncached) Recording
    """
    artist_credit = ArtistCredit.from_web_service(data.get('artist-credit'))
    appearances = _parse_appearances(data.get('releases'))
    
    recording = Recording(
        gid=data.get('id', ''),
        name=data.get('title', ''),
        length=data.get('length') or None,
        artist=artist_credit.reduce(),
        artist_credit=artist_credit,
        video=bool(data.get('video')),
        comment=data.get('disambiguation', '') or '',
        appears_on=AppearsOn(hits=len(appearances), results=appearances)
    )
    
    if entity_cache is not None:
        entity_cache.backfill_appearances(recording)
    
    return recording


def clean_recordings(data: Dict[str, Any], entity_cache: Optional[EntityCache] = None) -> List[Recording]:
    """Clean every recording in a search response."""
    return [clean_recording_data(record, entity_cache) for record in data.get('recordings', [])]

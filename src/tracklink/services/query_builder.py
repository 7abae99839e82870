"""
Build indexed-search queries for a track's candidate recordings.
"""

import re
from typing import Dict, Iterable, List, Optional

from ..core.config import SUGGESTION_CONFIG
from ..models.track import Track

MAX_LENGTH_DIFFERENCE = SUGGESTION_CONFIG["MAX_LENGTH_DIFFERENCE"]

LUCENE_SPECIAL_CHARACTERS = re.compile(r'([+\-&|!(){}\[\]^"~*?:\\/])')


def escape_lucene_value(value) -> str:
    """Backslash-escape characters with a meaning in the query syntax."""
    return LUCENE_SPECIAL_CHARACTERS.sub(r'\\\1', str(value))


def construct_lucene_field(values: Iterable[str], key: str) -> str:
    """Build `key:(v1 OR v2 ...)` from already-escaped values."""
    return f"{key}:({' OR '.join(values)})"


def construct_lucene_field_conjunction(params: Dict[str, List[str]]) -> str:
    """AND together one field per key, skipping keys without values."""
    return ' AND '.join(
        construct_lucene_field(values, key) for key, values in params.items() if values
    )


def _parse_length(length) -> Optional[int]:
    try:
        return int(length)
    except (TypeError, ValueError):
        return None


def recording_query(track: Track, name: Optional[str] = None) -> str:
    """
    Build the recording search query for a track.
    
    Title plus artists is boosted over the title alone, and when the track
    has a length, results must be within MAX_LENGTH_DIFFERENCE of it or have
    no length at all.
    
    Args:
        track: Track supplying artists and length
        name: Title to search for (defaults to the track name; autocomplete
            passes the user's free text instead)
    """
    name = track.name.get() if name is None else name
    params = {
        'recording': [escape_lucene_value(name)],
        'arid': [escape_lucene_value(gid) for gid in track.artist_credit.get().artist_gids],
    }
    
    title_and_artists = construct_lucene_field_conjunction(params)
    just_title = construct_lucene_field(params['recording'], 'recording')
    query = f"({title_and_artists})^2 OR ({just_title})"
    
    duration = _parse_length(track.length.get())
    if duration:
        low = duration - MAX_LENGTH_DIFFERENCE
        high = duration + MAX_LENGTH_DIFFERENCE
        duration_clause = construct_lucene_field([f"[{low} TO {high}] OR \\-"], 'dur')
        query = f"({query}) AND {duration_clause}"
    
    return query


def release_group_query(release_group_gid: str) -> str:
    """Query for every recording on any release of a release group."""
    return construct_lucene_field([escape_lucene_value(release_group_gid)], 'rgid')

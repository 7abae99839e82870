"""
Filter and rank candidate recordings against a track.
"""

from typing import List, Optional, Sequence

from ..core.config import SUGGESTION_CONFIG
from ..models.recording import Recording
from ..models.track import Track
from ..utils.similarity import similar_lengths, similar_names
from ..utils.string_utils import strip_extra_title_info

MAX_LENGTH_DIFFERENCE = SUGGESTION_CONFIG["MAX_LENGTH_DIFFERENCE"]


def length_difference(track_length: Optional[int], recording: Recording) -> int:
    """
    Sort key for closeness in length.
    
    Recordings without a length go after every recording that has one, and
    a track without a length puts every recording that has one on par.
    """
    if not recording.length:
        return MAX_LENGTH_DIFFERENCE + 1
    if not track_length:
        return MAX_LENGTH_DIFFERENCE
    return abs(track_length - recording.length)


def is_candidate_match(track_name: str, track_length: Optional[int], recording: Recording) -> bool:
    if not similar_lengths(track_length, recording.length):
        return False
    if similar_names(track_name, recording.name):
        return True
    return similar_names(track_name, strip_extra_title_info(recording.name))


def match_against_recordings(track: Track, recordings: Optional[Sequence[Recording]]) -> Optional[List[Recording]]:
    """
    Find the recordings that plausibly match a track, best first.
    
    Matches are ordered by number of release-group appearances (most first),
    then by length difference. Ties keep the candidates' original order.
    
    Args:
        track: Track to match
        recordings: Candidate recordings
        
    Returns:
        Ordered matches, or None when there is nothing to match or nothing
        matched, so callers can move on to the next candidate source
    """
    if not recordings:
        return None
    
    track_name = track.name.get()
    track_length = track.length.get()
    
    matches = [
        recording for recording in recordings
        if is_candidate_match(track_name, track_length, recording)
    ]
    # sorted() is stable
    matches = sorted(
        matches,
        key=lambda recording: (
            -recording.appearance_count,
            length_difference(track_length, recording)
        )
    )
    
    return matches or None

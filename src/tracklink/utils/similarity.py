"""
Name and length similarity checks used to match tracks to recordings.
"""

from typing import Optional

from rapidfuzz.distance import Levenshtein

from ..core.config import SUGGESTION_CONFIG
from .string_utils import compact_for_comparison, strip_extra_title_info

MAX_LENGTH_DIFFERENCE = SUGGESTION_CONFIG["MAX_LENGTH_DIFFERENCE"]
NAME_SIMILARITY_THRESHOLD = SUGGESTION_CONFIG["NAME_SIMILARITY_THRESHOLD"]


def similarity(a: str, b: str) -> float:
    """
    Edit-distance similarity between 0.0 and 1.0.
    
    Computed as 1 - distance / (len(a) + len(b)) on compacted strings, so
    a single typo in a long title costs little and in a short one a lot.
    """
    a = compact_for_comparison(a)
    b = compact_for_comparison(b)
    total = len(a) + len(b)
    if total == 0:
        return 1.0
    return 1 - (Levenshtein.distance(a, b) / total)


def _names_close(a: str, b: str) -> bool:
    return a == b or similarity(a, b) >= NAME_SIMILARITY_THRESHOLD


def similar_names(a: Optional[str], b: Optional[str]) -> bool:
    """
    Check whether two names are similar enough to be the same recording.
    
    Identical names always match. Names are also compared with trailing
    parenthetical qualifiers removed, so "Intro (Live)" matches "Intro".
    """
    if a == b:
        return True
    if not a or not b:
        return False
    if _names_close(a, b):
        return True
    
    stripped_a = strip_extra_title_info(a) or a
    stripped_b = strip_extra_title_info(b) or b
    if (stripped_a, stripped_b) == (a, b):
        return False
    return _names_close(stripped_a, stripped_b)


def similar_lengths(a: Optional[int], b: Optional[int]) -> bool:
    """
    Check whether two lengths (milliseconds) are within MAX_LENGTH_DIFFERENCE.
    
    A missing length can't be compared and never disqualifies a match.
    """
    if not a or not b:
        return True
    return abs(a - b) <= MAX_LENGTH_DIFFERENCE

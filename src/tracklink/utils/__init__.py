"""
Utility modules for Tracklink.
"""

from .similarity import similar_names, similar_lengths, similarity
from .string_utils import compact_for_comparison, strip_extra_title_info
from .retry import RetryPolicy, RetryError
from .debounce import Debouncer

__all__ = [
    'similar_names',
    'similar_lengths',
    'similarity',
    'compact_for_comparison',
    'strip_extra_title_info',
    'RetryPolicy',
    'RetryError',
    'Debouncer'
]

"""
Core services for Tracklink.
"""

from .entity_cache import EntityCache
from .session import ReleaseEditSession
from .match_ranker import match_against_recordings
from .query_builder import recording_query
from .release_group_pool import ReleaseGroupPoolManager, PoolState
from .recording_search import TrackRecordingSearch
from .autocomplete import autocomplete_hook, AutocompleteRequest, AutocompletePage
from .suggestion_coordinator import RecordingSuggestionCoordinator

__all__ = [
    'EntityCache',
    'ReleaseEditSession',
    'match_against_recordings',
    'recording_query',
    'ReleaseGroupPoolManager',
    'PoolState',
    'TrackRecordingSearch',
    'autocomplete_hook',
    'AutocompleteRequest',
    'AutocompletePage',
    'RecordingSuggestionCoordinator'
]

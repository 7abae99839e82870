"""
Search the backend for a track's candidate recordings.

Used when there is no release group pool to match against, or nothing in it
matched.
"""

from functools import partial
from typing import List, Optional

from ..core.config import SUGGESTION_CONFIG
from ..core.logger import get_logger
from ..models.recording import Recording
from ..models.track import Track
from ..utils.retry import RetryError, RetryPolicy
from .entity_cache import EntityCache
from .query_builder import recording_query
from .recording_parser import clean_recordings

logger = get_logger(__name__)


class TrackRecordingSearch:
    """Runs a track's recording search with retry."""
    
    def __init__(
        self,
        client,
        entity_cache: EntityCache,
        retry_policy: Optional[RetryPolicy] = None,
        limit: Optional[int] = None
    ):
        self.client = client
        self.entity_cache = entity_cache
        self.retry_policy = retry_policy or RetryPolicy()
        self.limit = limit or SUGGESTION_CONFIG["SEARCH_LIMIT"]
    
    async def search(self, track: Track) -> List[Recording]:
        """
        Search recordings by the track's own title, artists and length.
        
        Transient failures are retried by the policy. Cancellation
        propagates to the caller untouched.
        
        Returns:
            Cleaned candidates, or an empty list if a capped retry policy gave up
        """
        query = recording_query(track)
        try:
            data = await self.retry_policy.run(
                partial(self.client.async_search, 'recording', query, self.limit, 0),
                description=f"Recording search for {track!r}"
            )
        except RetryError as e:
            logger.error(f"No search results for {track!r}: {e}")
            return []
        
        return clean_recordings(data, self.entity_cache)

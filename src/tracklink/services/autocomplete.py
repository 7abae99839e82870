"""
Recording autocomplete adapter.

The generic autocomplete widget pages through results by page number and
only sends free text. The adapter turns its request into an indexed search
that also carries the track's artists and length, and turns the response
back into cleaned recordings with page information.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from ..core.config import SUGGESTION_CONFIG
from ..core.exceptions import APIError, NetworkError
from ..core.logger import get_logger
from ..models.recording import Recording
from ..models.track import Track
from .entity_cache import EntityCache
from .query_builder import recording_query
from .recording_parser import clean_recordings

logger = get_logger(__name__)


@dataclass
class AutocompletePage:
    """One page of autocomplete results."""
    recordings: List[Recording]
    current: int
    pages: int


@dataclass
class AutocompleteRequest:
    """Request as issued by the autocomplete widget."""
    term: str
    page: int = 1
    direct: bool = False
    success: Optional[Callable[[AutocompletePage], None]] = None
    error: Optional[Callable[[Exception], None]] = None


@dataclass
class RecordingSearchRequest:
    """An indexed recording search to run against the backend."""
    params: Dict[str, Any]
    success: Callable[[Dict[str, Any]], AutocompletePage]
    error: Optional[Callable[[Exception], None]] = None
    entity: str = "recording"
    url: str = field(default="/ws/2/recording")
    
    async def execute(self, client) -> Optional[AutocompletePage]:
        """
        Run the search and hand the response to the success callback.
        
        Errors go to the error callback when there is one and are raised
        otherwise.
        """
        try:
            data = await client.async_search(
                self.entity, self.params['query'], self.params['limit'], self.params['offset']
            )
        except (APIError, NetworkError) as e:
            logger.warning(f"Autocomplete search failed: {e}")
            if self.error is None:
                raise
            self.error(e)
            return None
        return self.success(data)


def autocomplete_hook(
    track: Track,
    entity_cache: Optional[EntityCache] = None,
    page_size: Optional[int] = None
) -> Callable[[AutocompleteRequest], Union[AutocompleteRequest, RecordingSearchRequest]]:
    """
    Create an autocomplete request adapter bound to a track.
    
    Direct requests (lookups by identifier or URL) are returned unchanged.
    
    Args:
        track: Track supplying artists and length
        entity_cache: Session entity cache to backfill from results
        page_size: Results per autocomplete page
    """
    page_size = page_size or SUGGESTION_CONFIG["AUTOCOMPLETE_PAGE_SIZE"]
    
    def hook(request: AutocompleteRequest) -> Union[AutocompleteRequest, RecordingSearchRequest]:
        if request.direct:
            return request
        
        offset = (max(request.page, 1) - 1) * page_size
        
        def success(data: Dict[str, Any]) -> AutocompletePage:
            page = AutocompletePage(
                recordings=clean_recordings(data, entity_cache),
                current=data.get('offset', offset) // page_size + 1,
                pages=math.ceil(data.get('count', 0) / page_size)
            )
            if request.success is not None:
                request.success(page)
            return page
        
        return RecordingSearchRequest(
            params={
                'query': recording_query(track, request.term),
                'fmt': 'json',
                'limit': page_size,
                'offset': offset,
            },
            success=success,
            error=request.error
        )
    
    return hook

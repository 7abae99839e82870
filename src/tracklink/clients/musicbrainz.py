"""
MusicBrainz Client Module
A client for the MusicBrainz indexed search web service.
"""

import asyncio
import threading
import time
from typing import Any, Dict, Optional

import requests

from ..core.config import MUSICBRAINZ_CONFIG, SUGGESTION_CONFIG
from ..core.exceptions import APIError, NetworkError, SearchError
from ..core.logger import get_logger

logger = get_logger(__name__)

SEARCH_ENTITIES = {'recording', 'release', 'release-group', 'artist'}


class MusicBrainzClient:
    """
    MusicBrainz search client.
    
    Failures are raised as NetworkError/APIError and never retried here;
    callers decide whether and when to try again.
    """
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        request_delay: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.base_url = (base_url or MUSICBRAINZ_CONFIG["BASE_URL"]).rstrip('/')
        self.user_agent = MUSICBRAINZ_CONFIG["USER_AGENT"]
        self.request_delay = MUSICBRAINZ_CONFIG["REQUEST_DELAY"] if request_delay is None else request_delay
        self.timeout = MUSICBRAINZ_CONFIG["TIMEOUT"]
        
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.user_agent,
            'Accept': 'application/json'
        })
        
        self._rate_lock = threading.Lock()
        self._last_request = 0.0
    
    def _wait_for_rate_limit(self):
        with self._rate_lock:
            elapsed = time.monotonic() - self._last_request
            if elapsed < self.request_delay:
                time.sleep(self.request_delay - elapsed)
            self._last_request = time.monotonic()
    
    def _make_request(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make a GET request and decode the JSON body.
        
        Raises:
            NetworkError: On connection failures and timeouts
            APIError: On HTTP error statuses or an undecodable body
        """
        page_info = ""
        limit = params.get('limit')
        if limit:
            page_info = f" (page {(params.get('offset', 0) // limit) + 1})"
        logger.debug(f"Requesting {url}{page_info}: {params.get('query', '')}")
        
        self._wait_for_rate_limit()
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "an error"
            raise APIError(f"MusicBrainz returned {status} for {url}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e
        
        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"Invalid JSON from {url}: {e}") from e
    
    def search(
        self,
        entity: str,
        query: str,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> Dict[str, Any]:
        """
        Run an indexed search.
        
        Args:
            entity: Entity type to search ("recording", "release", ...)
            query: Query in the search server's field syntax
            limit: Maximum number of results (default: SEARCH_LIMIT)
            offset: Offset for pagination
            
        Returns:
            Decoded response with "count", "offset" and a list keyed by
            the plural entity name (e.g. "recordings")
        """
        if entity not in SEARCH_ENTITIES:
            raise SearchError(f"Unsupported search entity: {entity}")
        
        params = {
            'query': query,
            'fmt': 'json',
            'limit': limit or SUGGESTION_CONFIG["SEARCH_LIMIT"],
            'offset': offset,
        }
        return self._make_request(f"{self.base_url}/{entity}", params)
    
    async def async_search(
        self,
        entity: str,
        query: str,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> Dict[str, Any]:
        """
        Run search() in a worker thread.
        
        Cancelling the awaiting task abandons the request: its response, if
        one still arrives, is dropped.
        """
        return await asyncio.to_thread(self.search, entity, query, limit, offset)
    
    def close(self):
        self.session.close()

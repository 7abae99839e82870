"""
Cached recording pools for release groups.

Release groups rarely hold more than a few dozen recordings, so all of them
are fetched as soon as a release group is selected and kept for the rest of
the session. Tracks matched while a pool is loading wait for it instead of
starting their own fetch.
"""

import asyncio
from enum import Enum
from functools import partial
from typing import Dict, List, Optional

from ..core.config import SUGGESTION_CONFIG
from ..core.logger import get_logger
from ..models.observable import Observable
from ..models.recording import Recording
from ..models.release import ReleaseGroup
from ..utils.retry import RetryError, RetryPolicy
from .entity_cache import EntityCache
from .query_builder import release_group_query
from .recording_parser import clean_recording_data

logger = get_logger(__name__)


class PoolState(Enum):
    UNREQUESTED = "unrequested"
    LOADING = "loading"
    READY = "ready"


class ReleaseGroupPool:
    """All known recordings of one release group."""
    
    def __init__(self, release_group_gid: str):
        self.release_group_gid = release_group_gid
        self.state = PoolState.UNREQUESTED
        self.recordings: Optional[List[Recording]] = None
        self._ready: Optional[asyncio.Future] = None
        self._task: Optional[asyncio.Task] = None
        self._token: Optional[object] = None
    
    def __repr__(self) -> str:
        return f"ReleaseGroupPool({self.release_group_gid!r}, {self.state.value})"


class ReleaseGroupPoolManager:
    """
    Loads and caches release group pools.
    
    Only the selected release group is ever loading. Selecting another one
    abandons an unfinished load; finished pools stay cached. The selected
    group's recordings are published through the `recordings` cell, which
    holds None until the pool is ready.
    """
    
    def __init__(
        self,
        client,
        entity_cache: EntityCache,
        retry_policy: Optional[RetryPolicy] = None,
        page_size: Optional[int] = None
    ):
        """
        Args:
            client: Search backend with an `async_search(entity, query, limit, offset)` coroutine
            entity_cache: Session entity cache
            retry_policy: Policy for failed page fetches
            page_size: Recordings requested per page
        """
        self.client = client
        self.entity_cache = entity_cache
        self.retry_policy = retry_policy or RetryPolicy()
        self.page_size = page_size or SUGGESTION_CONFIG["RELEASE_GROUP_PAGE_SIZE"]
        self.recordings: Observable[Optional[List[Recording]]] = Observable(None)
        self._pools: Dict[str, ReleaseGroupPool] = {}
        self._active_gid: Optional[str] = None
    
    @property
    def active_release_group_gid(self) -> Optional[str]:
        return self._active_gid
    
    def get_pool(self, release_group_gid: str) -> Optional[ReleaseGroupPool]:
        return self._pools.get(release_group_gid)
    
    def select(self, release_group: Optional[ReleaseGroup]) -> Optional[ReleaseGroupPool]:
        """
        Make a release group the selected one, loading its pool if needed.
        
        Must be called from within a running event loop.
        """
        gid = release_group.gid if release_group and release_group.gid else None
        
        if gid != self._active_gid:
            for pool in self._pools.values():
                if pool.release_group_gid != gid and pool.state is PoolState.LOADING:
                    self._abandon(pool)
            self._active_gid = gid
        
        if gid is None:
            self.recordings.set(None)
            return None
        
        pool = self._pools.get(gid)
        if pool is None:
            pool = self._pools[gid] = ReleaseGroupPool(gid)
        if pool.state is PoolState.UNREQUESTED:
            self._start_loading(pool)
        
        self.recordings.set(pool.recordings)
        return pool
    
    async def wait_for_recordings(self, release_group: Optional[ReleaseGroup]) -> Optional[List[Recording]]:
        """
        Get a release group's recordings, waiting while they load.
        
        Returns:
            The pool, or None if there is no release group or the load was
            abandoned or gave up
        """
        pool = self.select(release_group)
        if pool is None:
            return None
        if pool.state is PoolState.READY:
            return pool.recordings
        # Shielded so a cancelled waiter leaves the shared load alone
        return await asyncio.shield(pool._ready)
    
    def close(self):
        """Abandon every unfinished load; ready pools are kept."""
        for pool in self._pools.values():
            if pool.state is PoolState.LOADING:
                self._abandon(pool)
        self._active_gid = None
    
    def _start_loading(self, pool: ReleaseGroupPool):
        loop = asyncio.get_running_loop()
        token = object()
        pool.state = PoolState.LOADING
        pool._token = token
        pool._ready = loop.create_future()
        pool._task = loop.create_task(self._load(pool, token))
        logger.debug(f"Loading recordings of release group {pool.release_group_gid}")
    
    def _abandon(self, pool: ReleaseGroupPool):
        logger.debug(f"Abandoning load of release group {pool.release_group_gid}")
        pool._token = None
        if pool._task is not None:
            pool._task.cancel()
            pool._task = None
        self._release_waiters(pool, None)
        pool.state = PoolState.UNREQUESTED
    
    @staticmethod
    def _release_waiters(pool: ReleaseGroupPool, result: Optional[List[Recording]]):
        if pool._ready is not None and not pool._ready.done():
            pool._ready.set_result(result)
    
    async def _load(self, pool: ReleaseGroupPool, token: object):
        gid = pool.release_group_gid
        try:
            recordings = await self._fetch_all(pool, token)
        except RetryError as e:
            logger.error(f"Giving up on release group {gid}: {e}")
            recordings = None
        except Exception:
            logger.exception(f"Unexpected error loading release group {gid}")
            recordings = None
        
        if pool._token is not token:
            logger.debug(f"Discarding stale load of release group {gid}")
            return
        
        pool._task = None
        if recordings is None:
            pool._token = None
            pool.state = PoolState.UNREQUESTED
            self._release_waiters(pool, None)
            return
        
        pool.recordings = recordings
        pool.state = PoolState.READY
        logger.info(f"Loaded {len(recordings)} recordings for release group {gid}")
        
        self._release_waiters(pool, recordings)
        if self._active_gid == gid:
            self.recordings.set(recordings)
    
    async def _fetch_all(self, pool: ReleaseGroupPool, token: object) -> Optional[List[Recording]]:
        """Fetch every page; a failed page is retried at the same offset."""
        gid = pool.release_group_gid
        query = release_group_query(gid)
        results: Dict[str, Recording] = {}
        offset = 0
        
        while True:
            data = await self.retry_policy.run(
                partial(self.client.async_search, 'recording', query, self.page_size, offset),
                description=f"Release group {gid} recordings at offset {offset}"
            )
            if pool._token is not token:
                return None
            
            page = data.get('recordings', [])
            for record in page:
                recording = clean_recording_data(record, self.entity_cache)
                results.setdefault(recording.gid, recording)
            
            count_so_far = data.get('offset', offset) + self.page_size
            if not page or count_so_far >= data.get('count', 0):
                return list(results.values())
            offset = count_so_far

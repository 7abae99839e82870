"""
Recording suggestions for release editor tracks.

Track titles are compared by edit distance and track lengths must be within
ten seconds of a recording's length. Recordings from the selected release
group are preferred: the whole group is fetched and cached once, and tracks
are matched against it. Without a release group, or when nothing there
matches, the track's current suggestions are re-checked, and as a last
resort the backend is searched for recordings by the track's artists.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.config import SUGGESTION_CONFIG
from ..core.logger import get_logger
from ..models.observable import Subscription
from ..models.recording import Recording
from ..models.release import ReleaseGroup
from ..models.track import Track
from ..utils.debounce import Debouncer
from ..utils.retry import RetryPolicy
from ..utils.similarity import similar_lengths, similar_names
from .autocomplete import autocomplete_hook
from .match_ranker import match_against_recordings
from .recording_search import TrackRecordingSearch
from .release_group_pool import ReleaseGroupPoolManager
from .session import ReleaseEditSession

logger = get_logger(__name__)


@dataclass
class _Operation:
    token: object
    task: asyncio.Task


@dataclass
class _WatchedTrack:
    debouncer: Debouncer
    subscriptions: List[Subscription] = field(default_factory=list)


def can_search(track: Track) -> bool:
    """A track is searchable once it has a name and a complete artist credit."""
    return bool(track.name.get()) and track.artist_credit.get().is_complete()


def watch_track_for_changes(track: Track) -> bool:
    """
    Re-link a track after its name or length changed.
    
    If the track still resembles its saved values it gets the saved
    recording back, else if it resembles its original values the original
    recording, else no recording at all.
    
    Returns:
        False if the track can't be searched for yet and was left alone
    """
    name = track.name.get()
    length = track.length.get()
    
    if not can_search(track):
        return False
    
    def similar_to(snapshot: str) -> bool:
        return (similar_names(getattr(track.name, snapshot), name) and
                similar_lengths(getattr(track.length, snapshot), length))
    
    if similar_to('saved'):
        track.recording.set(track.recording.saved)
    elif similar_to('original'):
        track.recording.set(track.recording.original)
    else:
        track.recording.set(None)
    return True


class RecordingSuggestionCoordinator:
    """
    Computes and publishes suggested recordings for the tracks of a session.
    
    Each track has at most one suggestion operation in flight; starting a
    new one cancels the previous. An operation checks it is still current
    before writing to its track, so a superseded one never changes anything.
    Must be driven from a running asyncio event loop.
    """
    
    def __init__(
        self,
        session: ReleaseEditSession,
        client=None,
        retry_policy: Optional[RetryPolicy] = None,
        debounce_delay: Optional[float] = None,
        page_size: Optional[int] = None,
        search_limit: Optional[int] = None
    ):
        """
        Args:
            session: Release edit session to serve
            client: Search backend (default: MusicBrainzClient)
            retry_policy: Policy shared by the pool loader and track searches
            debounce_delay: Seconds a track must stay unchanged before re-evaluation
            page_size: Release group pool page size
            search_limit: Results requested by track searches
        """
        if client is None:
            from ..clients.musicbrainz import MusicBrainzClient
            client = MusicBrainzClient()
        
        self.session = session
        self.client = client
        self.retry_policy = retry_policy or RetryPolicy()
        self.debounce_delay = SUGGESTION_CONFIG["DEBOUNCE_DELAY"] if debounce_delay is None else debounce_delay
        self.pools = ReleaseGroupPoolManager(client, session.entity_cache, self.retry_policy, page_size)
        self.searcher = TrackRecordingSearch(client, session.entity_cache, self.retry_policy, search_limit)
        
        self._operations: Dict[Track, _Operation] = {}
        self._watched: Dict[Track, _WatchedTrack] = {}
        self._release_group_subscription = session.release_group.subscribe(self._release_group_changed)
    
    # Tracking
    
    def track(self, track: Track) -> None:
        """Re-evaluate a track whenever its name, length or artist credit settle after a change."""
        if track in self._watched:
            return
        
        debouncer = Debouncer(lambda: self._track_changed(track), self.debounce_delay)
        watched = _WatchedTrack(debouncer)
        for track_field in (track.name, track.length, track.artist_credit):
            watched.subscriptions.append(track_field.subscribe(lambda _value: debouncer()))
        self._watched[track] = watched
    
    def untrack(self, track: Track) -> None:
        watched = self._watched.pop(track, None)
        if watched is not None:
            watched.debouncer.cancel()
            for subscription in watched.subscriptions:
                subscription.dispose()
        self.cancel(track)
    
    def close(self) -> None:
        """Stop watching every track and cancel all operations."""
        for track in list(self._watched):
            self.untrack(track)
        for track in list(self._operations):
            self.cancel(track)
        self._release_group_subscription.dispose()
        self.pools.close()
    
    def _track_changed(self, track: Track):
        if watch_track_for_changes(track):
            self.request_suggestions(track)
    
    def _release_group_changed(self, release_group: Optional[ReleaseGroup]):
        gid = release_group.gid if release_group else None
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # The next suggestion request selects the group from the session
            logger.debug(f"Release group changed to {gid} outside the event loop")
            return
        logger.debug(f"Release group changed to {gid}")
        self.pools.select(release_group)
        for track in self.session.tracks:
            self.request_suggestions(track)
    
    # Operations
    
    def request_suggestions(self, track: Track) -> Optional[asyncio.Task]:
        """
        Start computing suggestions for a track, superseding any running operation.
        
        Returns:
            The operation's task, or None if the track can't be searched for yet
        """
        if not can_search(track):
            return None
        
        self._supersede(track)
        token = object()
        task = asyncio.get_running_loop().create_task(self._find_suggestions(track, token))
        self._operations[track] = _Operation(token, task)
        task.add_done_callback(lambda _task: self._operation_done(track, token))
        return task
    
    def cancel(self, track: Track) -> None:
        """Cancel a track's running operation, clearing its loading flag."""
        if self._supersede(track):
            track.loading_suggested_recordings.set(False)
    
    def _supersede(self, track: Track) -> bool:
        operation = self._operations.pop(track, None)
        if operation is None or operation.task.done():
            return False
        logger.debug(f"Cancelling suggestion operation for {track!r}")
        operation.task.cancel()
        return True
    
    def is_current(self, track: Track, token: object) -> bool:
        operation = self._operations.get(track)
        return operation is not None and operation.token is token
    
    def _operation_done(self, track: Track, token: object):
        if self.is_current(track, token):
            del self._operations[track]
    
    async def find_recording_suggestions(self, track: Track) -> Optional[List[Recording]]:
        """
        Compute and publish a track's suggested recordings.
        
        Safe to call repeatedly; each call supersedes the previous one.
        
        Returns:
            The published suggestions, or None if the track can't be searched
            for or a newer operation superseded this one
        """
        task = self.request_suggestions(track)
        if task is None:
            return None
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            if task.cancelled():
                return None
            raise
    
    async def _find_suggestions(self, track: Track, token: object) -> Optional[List[Recording]]:
        release_group = self.session.release_group.get()
        pool_recordings = None
        if release_group is not None and release_group.gid:
            pool_recordings = await self.pools.wait_for_recordings(release_group)
        
        recordings = (
            match_against_recordings(track, pool_recordings) or
            # See if the current suggestions still match
            match_against_recordings(track, track.suggested_recordings.get())
        )
        
        if recordings is None:
            if not self.is_current(track, token):
                return None
            track.loading_suggested_recordings.set(True)
            candidates = await self.searcher.search(track)
            recordings = match_against_recordings(track, candidates) or []
        
        if not self.is_current(track, token):
            return None
        
        self.set_suggested_recordings(track, recordings)
        return track.suggested_recordings.get()
    
    def set_suggested_recordings(self, track: Track, recordings: List[Recording]) -> None:
        """
        Publish a track's suggestions.
        
        A track without a linked recording gets its last saved recording at
        the top of the list.
        """
        recordings = [self.session.entity_cache.entity(recording) for recording in recordings]
        last_recording = track.recording.saved
        
        if not track.has_existing_recording() and last_recording is not None:
            recordings = [last_recording] + recordings
        
        unique = []
        seen = set()
        for recording in recordings:
            key = recording.gid or id(recording)
            if key not in seen:
                seen.add(key)
                unique.append(recording)
        
        logger.debug(f"{len(unique)} suggested recordings for {track!r}")
        track.suggested_recordings.set(unique)
        track.loading_suggested_recordings.set(False)
    
    def autocomplete_hook(self, track: Track):
        """Autocomplete request adapter for a track's recording search box."""
        return autocomplete_hook(track, self.session.entity_cache)

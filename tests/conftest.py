"""
Pytest configuration and shared fixtures.
"""

import inspect
import pytest
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tracklink.models.artist_credit import ArtistCredit, ArtistCreditName
from tracklink.models.recording import AppearsOn, Recording, ReleaseAppearance
from tracklink.models.track import Track


@dataclass
class SearchCall:
    entity: str
    query: str
    limit: Optional[int]
    offset: int


class FakeSearchClient:
    """
    In-memory search backend.
    
    `handler(entity, query, limit, offset)` returns a response dict, raises,
    or returns an awaitable resolving to either.
    """
    
    def __init__(self, handler: Optional[Callable[..., Any]] = None):
        self.handler = handler or (lambda entity, query, limit, offset: {"count": 0, "offset": offset, "recordings": []})
        self.calls: List[SearchCall] = []
        self.closed = False
    
    async def async_search(self, entity: str, query: str, limit: Optional[int] = None, offset: int = 0) -> Dict[str, Any]:
        self.calls.append(SearchCall(entity, query, limit, offset))
        result = self.handler(entity, query, limit, offset)
        if inspect.isawaitable(result):
            result = await result
        return result
    
    def close(self):
        self.closed = True


def build_recording_record(
    gid: str,
    title: str,
    length: Optional[int] = None,
    releases: tuple = (),
    artist_gid: str = "artist-1",
    artist_name: str = "Test Artist",
    video: bool = False
) -> Dict[str, Any]:
    """Web service recording record; releases are (release_id, title, release_group_id)."""
    return {
        "id": gid,
        "title": title,
        "length": length,
        "video": video,
        "artist-credit": [
            {"name": artist_name, "joinphrase": "", "artist": {"id": artist_gid, "name": artist_name}}
        ],
        "releases": [
            {"id": release_id, "title": release_title, "release-group": {"id": release_group_id}}
            for release_id, release_title, release_group_id in releases
        ],
    }


def build_recording(gid: str, name: str, length: Optional[int] = None, appearances: int = 0) -> Recording:
    results = [ReleaseAppearance(f"{gid}-release-{i}", f"Release {i}", f"{gid}-rg-{i}") for i in range(appearances)]
    return Recording(
        gid=gid,
        name=name,
        length=length,
        artist="Test Artist",
        appears_on=AppearsOn(hits=len(results), results=results)
    )


@pytest.fixture
def fake_client() -> FakeSearchClient:
    """Fake search backend returning no results."""
    return FakeSearchClient()


@pytest.fixture
def make_record():
    """Factory for web service recording records."""
    return build_recording_record


@pytest.fixture
def make_recording():
    """Factory for Recording candidates with a number of appearances."""
    return build_recording


@pytest.fixture
def artist_credit() -> ArtistCredit:
    """Complete single-artist credit."""
    return ArtistCredit.of(ArtistCreditName("artist-1", "Test Artist"))


@pytest.fixture
def make_track(artist_credit):
    """Factory for tracks with a complete artist credit."""
    def factory(name: str = "Intro", length: Optional[int] = 120000, **kwargs) -> Track:
        kwargs.setdefault("artist_credit", artist_credit)
        return Track(name=name, length=length, **kwargs)
    return factory

"""
Tests for track, artist credit and recording models.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tracklink.models.artist_credit import ArtistCredit, ArtistCreditName
from tracklink.models.recording import AppearsOn, Recording, ReleaseAppearance
from tracklink.models.track import Track


class TestArtistCredit:
    """Tests for ArtistCredit class."""
    
    def test_complete_credit(self):
        """Test a credit with artists and names is complete."""
        credit = ArtistCredit.of(
            ArtistCreditName("a1", "Artist A", " & "),
            ArtistCreditName("a2", "Artist B")
        )
        assert credit.is_complete()
        assert credit.artist_gids == ["a1", "a2"]
        assert credit.reduce() == "Artist A & Artist B"
    
    def test_empty_credit_is_incomplete(self):
        """Test an empty credit is incomplete."""
        assert not ArtistCredit().is_complete()
    
    def test_credit_missing_artist_is_incomplete(self):
        """Test a name without an artist makes the credit incomplete."""
        credit = ArtistCredit.of(ArtistCreditName(None, "Someone"))
        assert not credit.is_complete()
    
    def test_from_web_service(self):
        """Test parsing a web service artist-credit array."""
        credit = ArtistCredit.from_web_service([
            {"name": "A", "joinphrase": " feat. ", "artist": {"id": "a1", "name": "Artist A"}},
            {"artist": {"id": "a2", "name": "Artist B"}},
        ])
        
        assert credit.reduce() == "A feat. Artist B"
        assert credit.artist_gids == ["a1", "a2"]
    
    def test_from_web_service_none(self):
        """Test parsing a missing artist-credit."""
        assert ArtistCredit.from_web_service(None) == ArtistCredit()


class TestRecording:
    """Tests for Recording class."""
    
    def test_appearance_count(self):
        """Test appearance count follows appears_on results."""
        recording = Recording(gid="r1", name="Intro", appears_on=AppearsOn(
            hits=2,
            results=[ReleaseAppearance("rel1", "Album", "rg1"), ReleaseAppearance("rel2", "Single", "rg2")]
        ))
        assert recording.appearance_count == 2
    
    def test_appearance_count_without_data(self):
        """Test recordings without appearance data count zero."""
        assert Recording(gid="r1", name="Intro").appearance_count == 0
    
    def test_display_name_with_comment(self):
        """Test the disambiguation comment is shown."""
        assert Recording(gid="r1", name="Intro", comment="live").get_display_name() == "Intro (live)"
    
    def test_url(self):
        """Test the recording URL."""
        assert Recording(gid="r1", name="Intro").url == "https://musicbrainz.org/recording/r1"


class TestTrack:
    """Tests for Track class."""
    
    def test_new_track_has_no_snapshots(self):
        """Test a new track has empty snapshots."""
        track = Track(name="Intro", length=1000)
        assert track.name.saved is None
        assert track.length.original is None
        assert track.suggested_recordings.get() == []
        assert track.loading_suggested_recordings.get() is False
    
    def test_saved_track_snapshots(self):
        """Test a track loaded from a release has snapshots."""
        recording = Recording(gid="r1", name="Intro")
        track = Track(name="Intro", length=1000, recording=recording, saved=True)
        
        assert track.name.saved == "Intro"
        assert track.recording.saved is recording
        assert track.recording.original is recording
    
    def test_has_existing_recording(self):
        """Test has_existing_recording requires a recording with an identifier."""
        track = Track(name="Intro")
        assert not track.has_existing_recording()
        
        track.recording.set(Recording(gid="", name="New"))
        assert not track.has_existing_recording()
        
        track.recording.set(Recording(gid="r1", name="Intro"))
        assert track.has_existing_recording()
    
    def test_mark_saved(self):
        """Test mark_saved snapshots current values."""
        track = Track(name="Intro", length=1000)
        track.name.set("Outro")
        track.mark_saved()
        
        assert track.name.saved == "Outro"
        assert track.length.saved == 1000
        assert track.name.original is None
    
    def test_tracks_hash_by_identity(self):
        """Test two tracks with equal values are distinct keys."""
        assert len({Track(name="Intro"), Track(name="Intro")}) == 2

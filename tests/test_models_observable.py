"""
Tests for observable value cells.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tracklink.models.observable import Observable, TrackField


class TestObservable:
    """Tests for Observable class."""
    
    def test_get_and_set(self):
        """Test reading and writing the value."""
        cell = Observable(1)
        cell.set(2)
        assert cell.get() == 2
        assert cell.value == 2
    
    def test_subscribers_notified_on_change(self):
        """Test that subscribers receive new values."""
        cell = Observable("a")
        seen = []
        cell.subscribe(seen.append)
        
        cell.set("b")
        cell.value = "c"
        
        assert seen == ["b", "c"]
    
    def test_no_notification_when_unchanged(self):
        """Test that setting an equal value doesn't notify."""
        cell = Observable([1, 2])
        seen = []
        cell.subscribe(seen.append)
        
        cell.set([1, 2])
        
        assert seen == []
    
    def test_type_change_notifies(self):
        """Test that 0 -> False counts as a change."""
        cell = Observable(0)
        seen = []
        cell.subscribe(seen.append)
        
        cell.set(False)
        
        assert seen == [False]
    
    def test_dispose_stops_notifications(self):
        """Test that disposed subscriptions stop receiving values."""
        cell = Observable(0)
        seen = []
        subscription = cell.subscribe(seen.append)
        
        cell.set(1)
        subscription.dispose()
        subscription.dispose()
        cell.set(2)
        
        assert seen == [1]
        assert cell.subscriber_count == 0
    
    def test_subscriber_may_dispose_itself(self):
        """Test that a callback can dispose its own subscription mid-notification."""
        cell = Observable(0)
        seen = []
        
        def once(value):
            seen.append(value)
            subscription.dispose()
        
        subscription = cell.subscribe(once)
        other = []
        cell.subscribe(other.append)
        
        cell.set(1)
        cell.set(2)
        
        assert seen == [1]
        assert other == [1, 2]


class TestTrackField:
    """Tests for TrackField class."""
    
    def test_snapshots_default_to_none(self):
        """Test a new field has no snapshots."""
        field = TrackField("Intro")
        assert field.get() == "Intro"
        assert field.saved is None
        assert field.original is None
    
    def test_loaded_sets_all_snapshots(self):
        """Test loaded() copies the value into both snapshots."""
        field = TrackField.loaded("Intro")
        field.set("Outro")
        
        assert field.get() == "Outro"
        assert field.saved == "Intro"
        assert field.original == "Intro"

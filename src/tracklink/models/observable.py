"""
Observable value cells.

Track fields, suggestion lists and the selected release group are held in
cells that notify subscribers when their value changes. The suggestion
engine is one subscriber among any number of others (e.g. a UI layer).
"""

from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar('T')


class Subscription:
    """Handle returned by Observable.subscribe; dispose() stops notifications."""
    
    def __init__(self, observable: "Observable", callback: Callable[[Any], None]):
        self._observable = observable
        self._callback = callback
        self.active = True
    
    def dispose(self):
        if self.active:
            self._observable._subscribers.remove(self)
            self.active = False


class Observable(Generic[T]):
    """A value cell that notifies subscribers on change."""
    
    def __init__(self, value: Optional[T] = None):
        self._value = value
        self._subscribers: List[Subscription] = []
    
    def get(self) -> T:
        return self._value
    
    def set(self, value: T) -> None:
        """Set the value, notifying subscribers only if it actually changed."""
        if value is self._value or (
            type(value) is type(self._value) and value == self._value
        ):
            return
        self._value = value
        self.notify()
    
    @property
    def value(self) -> T:
        return self._value
    
    @value.setter
    def value(self, value: T):
        self.set(value)
    
    def notify(self):
        # Copy so callbacks may dispose their own subscription
        for subscription in list(self._subscribers):
            if subscription.active:
                subscription._callback(self._value)
    
    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        subscription = Subscription(self, callback)
        self._subscribers.append(subscription)
        return subscription
    
    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class TrackField(Observable[T]):
    """
    Observable track field with comparison snapshots.
    
    `saved` holds the value last persisted for the track and `original` the
    value the track had when the edit session started. Both are plain
    attributes; only the current value is observable.
    """
    
    def __init__(self, value: Optional[T] = None, saved: Optional[T] = None, original: Optional[T] = None):
        super().__init__(value)
        self.saved = saved
        self.original = original
    
    @classmethod
    def loaded(cls, value: Optional[T]) -> "TrackField[T]":
        """Create a field for a value loaded from storage (all snapshots equal)."""
        return cls(value, saved=value, original=value)

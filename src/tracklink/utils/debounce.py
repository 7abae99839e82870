"""
Trailing-edge debouncing on the asyncio event loop.
"""

import asyncio
from typing import Callable, Optional

from ..core.config import SUGGESTION_CONFIG


class Debouncer:
    """
    Run an action once after a burst of calls settles.
    
    Each call restarts the timer, so the action runs `delay` seconds after
    the last call of a burst. Must be called from within a running loop.
    """
    
    def __init__(self, action: Callable[[], None], delay: Optional[float] = None):
        self.action = action
        self.delay = SUGGESTION_CONFIG["DEBOUNCE_DELAY"] if delay is None else delay
        self._handle: Optional[asyncio.TimerHandle] = None
    
    def __call__(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)
    
    def _fire(self):
        self._handle = None
        self.action()
    
    @property
    def pending(self) -> bool:
        return self._handle is not None
    
    def cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

"""
Retry policy for asynchronous backend calls.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from ..core.config import SUGGESTION_CONFIG
from ..core.exceptions import APIError, NetworkError
from ..core.logger import get_logger

T = TypeVar('T')

logger = get_logger(__name__)


class RetryError(Exception):
    """Exception raised when all retry attempts are exhausted."""
    pass


@dataclass
class RetryPolicy:
    """
    Retry an operation after a fixed delay until it succeeds.
    
    Cancellation is not a failure: asyncio.CancelledError propagates straight
    through, including while waiting for the next attempt.
    
    Attributes:
        delay: Seconds to wait between attempts
        max_attempts: Maximum number of attempts, or None to retry forever
        exceptions: Exception types treated as transient failures
    """
    delay: float = SUGGESTION_CONFIG["RETRY_DELAY"]
    max_attempts: Optional[int] = SUGGESTION_CONFIG["MAX_RETRY_ATTEMPTS"]
    exceptions: Tuple[Type[BaseException], ...] = (APIError, NetworkError, ConnectionError, TimeoutError, OSError)
    
    async def run(self, operation: Callable[[], Awaitable[T]], description: str = "operation") -> T:
        """
        Await `operation()` until it returns, retrying transient failures.
        
        Args:
            operation: Zero-argument callable returning a fresh awaitable per attempt
            description: Label used in log messages
            
        Returns:
            The operation's result
            
        Raises:
            RetryError: If max_attempts is set and every attempt failed
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                return await operation()
            except self.exceptions as e:
                if self.max_attempts is not None and attempt >= self.max_attempts:
                    raise RetryError(
                        f"{description} failed after {attempt} attempts"
                    ) from e
                logger.warning(f"{description} failed (attempt {attempt}): {e}; retrying in {self.delay}s")
                await asyncio.sleep(self.delay)

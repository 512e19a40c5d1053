"""Retry decorator with exponential backoff for unreliable store calls.

Store adapters talking to a remote service wrap their individual requests
with this decorator. Callers above the store (the archetype subsystem) never
retry on their own.

Example:
    @retry_on_failure(max_retries=3, base_delay=0.5)
    def fetch_object(name: str) -> bytes:
        return client.get_object(bucket, name).read()
"""

import logging
import random
import time
from functools import wraps
from typing import Callable, TypeVar

from urllib3.exceptions import MaxRetryError, ProtocolError
from urllib3.exceptions import TimeoutError as Urllib3TimeoutError

from playerdata.lib.logging_config import log_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default exceptions to retry on
RETRYABLE_EXCEPTIONS = (
    ConnectionError,
    TimeoutError,
    MaxRetryError,
    ProtocolError,
    Urllib3TimeoutError,
)


def backoff_delay(attempt: int, base_delay: float, max_delay: float, jitter: bool) -> float:
    """Delay before retry number attempt + 1, doubling from base_delay up to max_delay.

    Jitter adds up to 25% on top so clients that failed together spread out.
    """
    delay = min(base_delay * (2**attempt), max_delay)
    if jitter:
        delay += random.uniform(0, delay * 0.25)
    return delay


def retry_on_failure(
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    exceptions: tuple = RETRYABLE_EXCEPTIONS,
    jitter: bool = True,
) -> Callable:
    """Decorator for retry with exponential backoff.

    Args:
        max_retries: Maximum number of retry attempts (default: 3)
        base_delay: Initial delay in seconds (default: 1.0)
        max_delay: Maximum delay between retries (default: 30.0)
        exceptions: Tuple of exception types to retry on
        jitter: Add random jitter to delay to prevent thundering herd

    Returns:
        Decorated function that retries on failure

    Backoff schedule (with base_delay=1.0):
        Attempt 1: immediate
        Attempt 2: 1s delay (+ jitter)
        Attempt 3: 2s delay (+ jitter)
        Attempt 4: 4s delay (+ jitter)
        (capped at max_delay)
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            attempt = 0
            while True:
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if attempt >= max_retries:
                        log_with_context(
                            logger,
                            "warning",
                            f"{func.__qualname__} failed after {attempt + 1} attempts: {e}",
                            operation=func.__qualname__,
                            attempts=attempt + 1,
                            error_type=type(e).__name__,
                        )
                        raise

                    delay = backoff_delay(attempt, base_delay, max_delay, jitter)
                    log_with_context(
                        logger,
                        "info",
                        f"{func.__qualname__} attempt {attempt + 1} failed: {e}. "
                        f"Retrying in {delay:.1f}s",
                        operation=func.__qualname__,
                        attempt=attempt + 1,
                        delay_seconds=round(delay, 3),
                        error_type=type(e).__name__,
                    )
                    time.sleep(delay)
                    attempt += 1

        return wrapper

    return decorator

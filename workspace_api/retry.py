"""Bounded retry loop for rate-limited Notion API calls.

Only ``ApiRateLimitError`` is retried, after waiting the server-provided
``retry_after``. Every other classified error is returned to the caller
on the first failure, so a create that failed on the transport is never
re-sent automatically.
"""
from __future__ import annotations
import functools
import logging
import time
from typing import Callable, Optional, TypeVar
from .exceptions import ApiRateLimitError, ApiRequestError

logger = logging.getLogger(__name__)

MAX_RETRIES = 3

T = TypeVar('T')
Sleep = Callable[[float], None]


def send_with_retries(operation: Callable[[], T], sleep: Optional[Sleep] = None, max_retries: int = MAX_RETRIES) -> T:
    """Call ``operation`` until it succeeds or a non-retryable error occurs.

    ``sleep`` receives the wait in seconds and defaults to ``time.sleep``;
    pass a custom callable for tests or cooperative schedulers. At most
    ``max_retries`` waits happen, i.e. ``max_retries + 1`` attempts.
    """
    wait = sleep or time.sleep
    retries = 0
    while True:
        try:
            return operation()
        except ApiRateLimitError as e:
            if retries >= max_retries:
                logger.error('Stopping to retry Notion API request after %d retries', max_retries)
                raise
            retries += 1
            logger.warning('Sleeping for %.3fs before retrying Notion API request', e.retry_after)
            wait(e.retry_after)
        except ApiRequestError as e:
            logger.warning('Not retryable Notion API request error: %s', e)
            raise


def retrying(sleep: Optional[Sleep] = None, max_retries: int = MAX_RETRIES):
    """Decorator form of :func:`send_with_retries`."""
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            return send_with_retries(lambda: func(*args, **kwargs), sleep=sleep, max_retries=max_retries)
        return wrapper
    return decorator

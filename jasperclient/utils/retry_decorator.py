"""
Retry decorator with exponential backoff for REST calls.
"""

import logging
import random
import time
from functools import wraps
from typing import Any, Callable, Tuple, Type

from ..exceptions import HttpStatusError, ResourceAccessError

logger = logging.getLogger(__name__)


def retry_with_backoff(
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 60.0,
    exponential_base: float = 2.0,
    jitter: bool = True,
    retryable_exceptions: Tuple[Type[Exception], ...] = (Exception,),
    non_retryable_exceptions: Tuple[Type[Exception], ...] = (),
):
    """
    Decorator for retrying functions with exponential backoff.

    Args:
        max_retries: Maximum number of retry attempts
        base_delay: Base delay between retries in seconds
        max_delay: Maximum delay between retries in seconds
        exponential_base: Base for exponential backoff calculation
        jitter: Whether to add random jitter to delay
        retryable_exceptions: Tuple of exception types that should trigger retries
        non_retryable_exceptions: Tuple of exception types that should never be retried
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            return _execute_with_retry(
                func,
                args,
                kwargs,
                max_retries,
                base_delay,
                max_delay,
                exponential_base,
                jitter,
                retryable_exceptions,
                non_retryable_exceptions,
            )

        return wrapper

    return decorator


def _calculate_delay(attempt: int, base_delay: float, max_delay: float, exponential_base: float, jitter: bool) -> float:
    """Calculate delay for given attempt with exponential backoff and optional jitter."""
    delay = min(base_delay * (exponential_base**attempt), max_delay)

    if jitter:
        # Add random jitter up to 25% of the delay
        delay += delay * 0.25 * random.random()

    return delay


def _should_retry(
    exception: Exception,
    attempt: int,
    max_retries: int,
    retryable_exceptions: Tuple[Type[Exception], ...],
    non_retryable_exceptions: Tuple[Type[Exception], ...],
) -> bool:
    """Determine if an exception should trigger a retry."""
    if attempt >= max_retries:
        return False

    if isinstance(exception, non_retryable_exceptions):
        return False

    return isinstance(exception, retryable_exceptions)


def _execute_with_retry(
    func: Callable,
    args: tuple,
    kwargs: dict,
    max_retries: int,
    base_delay: float,
    max_delay: float,
    exponential_base: float,
    jitter: bool,
    retryable_exceptions: Tuple[Type[Exception], ...],
    non_retryable_exceptions: Tuple[Type[Exception], ...],
) -> Any:
    """Execute function with retry logic."""
    name = getattr(func, "__qualname__", repr(func))
    for attempt in range(max_retries + 1):
        try:
            result = func(*args, **kwargs)

            if attempt > 0:
                logger.info(f"✅ {name} succeeded on attempt {attempt + 1}")

            return result

        except Exception as e:
            if not _should_retry(e, attempt, max_retries, retryable_exceptions, non_retryable_exceptions):
                if attempt > 0:
                    logger.error(f"❌ {name} failed on attempt {attempt + 1}, not retrying: {e}")
                raise

            delay = _calculate_delay(attempt, base_delay, max_delay, exponential_base, jitter)
            logger.warning(f"⚠️ {name} failed on attempt {attempt + 1}/{max_retries + 1}: {e}")
            logger.info(f"⏳ Retrying in {delay:.2f} seconds...")
            time.sleep(delay)


def rest_call_retry(max_retries: int = 2) -> Callable:
    """Retry policy for idempotent REST calls: network failures only, never HTTP status errors."""
    return retry_with_backoff(
        max_retries=max_retries,
        base_delay=0.5,
        max_delay=10.0,
        retryable_exceptions=(ResourceAccessError,),
        non_retryable_exceptions=(HttpStatusError,),
    )

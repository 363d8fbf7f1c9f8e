"""
Retry loop for read-modify-write mutations on a single aggregate.

Repositories refuse stale writes with ConcurrentModification. The operation
passed here must reload the aggregate itself, so each attempt re-applies the
mutation to fresh state. Domain rejections (AlreadyLiked, Forbidden, ...)
propagate on the first attempt.
"""

import asyncio
import logging
import random
from typing import Awaitable, Callable, TypeVar

from ...core.errors import ConcurrentModification


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 5


async def run_with_retries(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_delay: float = 0.01,
    max_delay: float = 0.25,
    exponential_base: float = 2.0,
) -> T:
    """
    Run ``operation`` until it completes without a version conflict.

    Args:
        operation: Coroutine function performing load, mutate and save
        max_attempts: Total attempts before giving up
        initial_delay: Delay before the second attempt (seconds)
        max_delay: Upper bound on any single delay (seconds)
        exponential_base: Base for exponential backoff

    Returns:
        Whatever ``operation`` returns

    Raises:
        ConcurrentModification: If every attempt lost the race
    """
    attempts = max(1, max_attempts)
    attempt = 1
    while True:
        try:
            return await operation()
        except ConcurrentModification as e:
            if attempt >= attempts:
                logger.warning(f"Giving up after {attempts} conflicting attempts: {e}")
                raise ConcurrentModification(
                    "The resource is being modified by another request, please retry"
                ) from e

            delay = min(initial_delay * (exponential_base ** (attempt - 1)), max_delay)
            # Jitter keeps competing writers from retrying in lockstep
            delay = delay * (0.5 + random.random())
            logger.debug(
                f"Attempt {attempt}/{attempts} hit a version conflict: {e}. "
                f"Retrying in {delay:.3f}s..."
            )
            await asyncio.sleep(delay)
            attempt += 1

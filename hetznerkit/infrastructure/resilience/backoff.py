"""Backoff calculation for retried requests.

Honors the server's Retry-After when it is the larger value, otherwise
falls back to exponential growth (100ms * 2^attempt) so repeated retries
still back off when the server gives no hint.
"""

import asyncio
import logging
from typing import Optional

logger = logging.getLogger(__name__)

BASE_BACKOFF_MS = 100


def compute_backoff_ms(retry_after_seconds: Optional[float], attempt: int) -> int:
    """Returns the wait before retry number `attempt` (1-indexed), in milliseconds.

    Pure function: no clock reads, no jitter, no cap.

    Args:
        retry_after_seconds: Server-suggested wait in seconds. None counts as 0.
        attempt: The retry attempt number, starting at 1 for the first retry.
    """
    server_ms = int((retry_after_seconds or 0) * 1000)
    return max(server_ms, BASE_BACKOFF_MS * 2 ** attempt)


async def sleep_ms(milliseconds: float) -> None:
    """Suspends the current task for the given number of milliseconds."""
    await asyncio.sleep(milliseconds / 1000)

"""Pagination engine for collection endpoints.

Turns a paginated, rate-limited collection endpoint into a lazy async
sequence of items. Pages are fetched one at a time, in order, only when the
consumer asks for more items. Rate-limited fetches are retried on the same
page up to MAX_RETRIES times with backoff; every other error propagates.
"""

import logging
from typing import Any, AsyncIterator, Dict, List, Optional

from hetznerkit.domain.errors import RateLimitError
from hetznerkit.domain.events.api_events import PageFetched, RetryScheduled, dispatch_event
from hetznerkit.domain.interfaces.transport import Transport
from hetznerkit.domain.models.common import Page, Pagination, PaginationMeta, QueryParams
from hetznerkit.infrastructure.resilience.backoff import compute_backoff_ms, sleep_ms

logger = logging.getLogger(__name__)

MAX_RETRIES = 3


async def fetch_page(
    client: Transport,
    path: str,
    params: Optional[QueryParams],
    page: int,
) -> Page:
    """Requests a single page. `page` overrides any 'page' key in params."""
    query: Dict[str, Any] = dict(params or {})
    query["page"] = page
    return await client.get(path, query)


def _next_page(response: Page) -> Optional[int]:
    # A response without pagination metadata is treated as the last page.
    meta: Optional[PaginationMeta] = response.get("meta")
    pagination: Optional[Pagination] = meta.get("pagination") if meta else None
    return pagination.get("next_page") if pagination else None


async def paginate(
    client: Transport,
    path: str,
    key: str,
    params: Optional[QueryParams] = None,
) -> AsyncIterator[Any]:
    """Yields every item of a collection, page after page.

    Args:
        client: Transport used for the page requests.
        path: Collection endpoint path, e.g. '/servers'.
        key: Name of the field holding the item list, e.g. 'servers'.
        params: Filters replayed unchanged on every page request.

    Yields:
        Items in server order: page ascending, then position within the page.

    Raises:
        RateLimitError: If the same page is still rate limited after
            MAX_RETRIES retries.
        HetznerAPIError: For any other failed request, without retrying.
    """
    filters: Dict[str, Any] = dict(params or {})
    page = 1
    has_more = True
    retry_count = 0

    while has_more:
        try:
            response = await fetch_page(client, path, filters, page)
        except RateLimitError as e:
            if retry_count >= MAX_RETRIES:
                logger.error(f"Max retries ({MAX_RETRIES}) reached for {path} page {page}. Last error: {e}")
                raise
            retry_count += 1
            delay_ms = compute_backoff_ms(e.retry_after, retry_count)
            logger.warning(
                f"Rate limited fetching {path} page {page} (attempt {retry_count}/{MAX_RETRIES}). "
                f"Waiting {delay_ms}ms..."
            )
            dispatch_event(RetryScheduled(path=path, page=page, attempt_number=retry_count, delay_ms=delay_ms))
            await sleep_ms(delay_ms)
            continue

        items = response.get(key) or []
        dispatch_event(PageFetched(path=path, page=page, item_count=len(items)))
        for item in items:
            yield item

        next_page = _next_page(response)
        has_more = next_page is not None
        if has_more:
            page = next_page
        retry_count = 0


async def fetch_all_pages(
    client: Transport,
    path: str,
    key: str,
    params: Optional[QueryParams] = None,
) -> List[Any]:
    """Collects every item of a collection into a list.

    Either returns the complete result or raises; items already received
    before a failure are discarded.
    """
    items = [item async for item in paginate(client, path, key, params)]
    logger.debug(f"Fetched {len(items)} items from {path}")
    return items

"""Domain Events related to pagination, retries and action polling.

Events are dispatched through the debug logger; there is no subscriber
mechanism.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class DomainEvent:
    """Base class for domain events."""
    pass

# --- Pagination Events ---

@dataclass
class PageFetched(DomainEvent):
    """Event triggered when one page of a collection was received."""
    path: str
    page: int
    item_count: int
    timestamp: float = field(default_factory=time.time)

@dataclass
class RetryScheduled(DomainEvent):
    """Event triggered when a rate-limited page fetch is scheduled for retry."""
    path: str
    page: int
    attempt_number: int
    delay_ms: float
    timestamp: float = field(default_factory=time.time)

# --- Action Events ---

@dataclass
class ActionPolled(DomainEvent):
    """Event triggered each time an action record is re-fetched."""
    action_id: int
    status: str
    elapsed_ms: float
    timestamp: float = field(default_factory=time.time)


def dispatch_event(event: Any) -> None:
    """Publishes an event. Currently this only logs it at debug level."""
    logger.debug(f"EVENT: {event}")

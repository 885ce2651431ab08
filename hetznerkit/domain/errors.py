"""Error taxonomy shared by the transports, the pagination engine and the poller.

HTTP failures are raised as HetznerAPIError (or one of its subclasses).
Rate limiting (HTTP 429) is the only transient failure; it carries the
server-suggested cooldown so callers can back off before retrying.
Action failures and poll timeouts are not HTTP errors and live in their own
branch of the hierarchy.
"""

from typing import Any, Dict, Optional, Union

ErrorCode = Union[str, int]


class HetznerAPIError(Exception):
    """Raised when an API request does not complete successfully."""

    def __init__(self, message: str, code: ErrorCode, status_code: Optional[int]):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(HetznerAPIError):
    """Raised on HTTP 429. `retry_after` is the suggested wait in seconds."""

    def __init__(self, message: str, code: ErrorCode, retry_after: int = 0):
        self.retry_after = retry_after
        super().__init__(message, code, 429)


class HetznerDnsError(HetznerAPIError):
    """Error returned by the DNS API (integer error codes)."""


class DnsRateLimitError(RateLimitError, HetznerDnsError):
    """Rate limit reported by the DNS API."""


class ActionError(Exception):
    """Raised when a polled action finishes with status 'error'."""

    def __init__(self, action: Dict[str, Any]):
        self.action = action
        error_info = action.get("error") or {}
        self.code = error_info.get("code", "unknown")
        self.message = error_info.get("message", "")
        super().__init__(f"Action failed: {self.code} - {self.message}")


class ActionTimeoutError(TimeoutError):
    """Raised when an action is still running after the poll timeout."""

    def __init__(self, action_id: int, timeout_ms: int):
        self.action_id = action_id
        self.timeout_ms = timeout_ms
        super().__init__(f"Action {action_id} timed out after {timeout_ms}ms")

import pytest
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx

from hetznerkit.domain.interfaces.transport import Transport
from hetznerkit.infrastructure.config import settings


def make_page(key: str, items: List[Any], page: int, last_page: int, per_page: int = 25) -> Dict[str, Any]:
    """Builds a page response whose pagination metadata chains correctly."""
    next_page: Optional[int] = page + 1 if page < last_page else None
    return {
        key: items,
        "meta": {
            "pagination": {
                "page": page,
                "per_page": per_page,
                "previous_page": page - 1 if page > 1 else None,
                "next_page": next_page,
                "last_page": last_page,
                "total_entries": per_page * last_page,
            }
        },
    }


def make_action(action_id: int = 1, status: str = "running", **overrides: Any) -> Dict[str, Any]:
    action = {
        "id": action_id,
        "command": "create_server",
        "status": status,
        "progress": 100 if status != "running" else 0,
        "started": "2026-01-01T00:00:00+00:00",
        "finished": None,
        "resources": [{"id": 42, "type": "server"}],
        "error": None,
    }
    action.update(overrides)
    return action


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keeps tests independent of ~/.hetznerkit, .env files and the caller's environment."""
    for env_var in ("HCLOUD_TOKEN", "HETZNER_DNS_TOKEN", "CLOUD_BASE_URL", "DNS_BASE_URL",
                    "HTTP_TIMEOUT", "CLOUD_TOKEN", "DNS_TOKEN"):
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setattr(settings, "_config", {})
    monkeypatch.setattr(settings, "_loaded", True)
    yield
    settings.clear_test_config()


@pytest.fixture
def mock_transport():
    """Transport double; configure `mock_transport.get.side_effect` per test."""
    transport = MagicMock(spec=Transport)
    transport.get = AsyncMock()
    transport.post = AsyncMock()
    transport.put = AsyncMock()
    transport.delete = AsyncMock()
    return transport


@pytest.fixture
def no_sleep(mocker):
    """Replaces the backoff sleep in the pagination engine and the poller."""
    sleep = AsyncMock()
    mocker.patch("hetznerkit.core.pagination.sleep_ms", sleep)
    mocker.patch("hetznerkit.core.services.actions.sleep_ms", sleep)
    return sleep


class MockApi:
    """Serves canned httpx responses and records every request it receives."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: List[httpx.Response] = []
        self.http_client = httpx.AsyncClient(transport=httpx.MockTransport(self._handle))

    def queue(self, status_code: int = 200, **kwargs: Any) -> None:
        self.responses.append(httpx.Response(status_code, **kwargs))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self.responses.pop(0)


@pytest.fixture
def mock_api():
    return MockApi()


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def action_factory():
    return make_action

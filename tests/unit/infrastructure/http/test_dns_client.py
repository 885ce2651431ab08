import pytest

from hetznerkit.domain.errors import DnsRateLimitError, HetznerDnsError, RateLimitError
from hetznerkit.infrastructure.http.dns_client import DEFAULT_DNS_BASE_URL, HetznerDnsClient


@pytest.fixture
def dns_client(mock_api):
    return HetznerDnsClient("dns-token", http_client=mock_api.http_client)


def test_default_base_url():
    assert HetznerDnsClient("t").base_url == DEFAULT_DNS_BASE_URL


@pytest.mark.asyncio
async def test_sends_auth_api_token_header(dns_client, mock_api):
    mock_api.queue(200, json={"zones": []})

    await dns_client.get("/zones")

    request = mock_api.requests[0]
    assert request.headers["Auth-API-Token"] == "dns-token"
    assert "Authorization" not in request.headers
    assert str(request.url) == "https://dns.hetzner.com/api/v1/zones"


@pytest.mark.asyncio
async def test_empty_success_body_returns_none(dns_client, mock_api):
    mock_api.queue(200, content=b"")

    assert await dns_client.delete("/zones/abc") is None


@pytest.mark.asyncio
async def test_nested_error_body(dns_client, mock_api):
    mock_api.queue(422, json={"error": {"message": "invalid zone name", "code": 422}})

    with pytest.raises(HetznerDnsError) as exc_info:
        await dns_client.post("/zones", {"name": "bad"})

    assert str(exc_info.value) == "invalid zone name"
    assert exc_info.value.code == 422
    assert exc_info.value.status_code == 422


@pytest.mark.asyncio
async def test_top_level_message_error_body(dns_client, mock_api):
    mock_api.queue(401, json={"message": "Invalid authentication credentials"})

    with pytest.raises(HetznerDnsError) as exc_info:
        await dns_client.get("/zones")

    assert str(exc_info.value) == "Invalid authentication credentials"
    assert exc_info.value.code == 0


@pytest.mark.asyncio
async def test_unparseable_error_body(dns_client, mock_api):
    mock_api.queue(500, text="oops")

    with pytest.raises(HetznerDnsError, match="HTTP 500: Internal Server Error"):
        await dns_client.get("/zones")


@pytest.mark.asyncio
async def test_rate_limit_is_retryable_rate_limit_error(dns_client, mock_api):
    mock_api.queue(429, json={"message": "Too many requests"}, headers={"Retry-After": "3"})

    with pytest.raises(DnsRateLimitError) as exc_info:
        await dns_client.get("/records", {"zone_id": "z1"})

    error = exc_info.value
    assert isinstance(error, RateLimitError)
    assert isinstance(error, HetznerDnsError)
    assert error.retry_after == 3
    assert error.status_code == 429

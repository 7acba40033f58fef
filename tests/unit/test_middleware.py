"""Raw-ASGI middleware tests (request ID, correlation ID, timeout)."""

import asyncio

from httpx import ASGITransport, AsyncClient

from community_search.middleware import (
    CorrelationIDMiddleware,
    RequestIDMiddleware,
    TimeoutMiddleware,
)
from community_search.middleware.request_id import sanitize_request_id
from community_search.shared.context import get_request_id


async def _ok_app(scope, receive, send) -> None:
    body = (get_request_id() or "").encode()
    await send({"type": "http.response.start", "status": 200, "headers": [(b"content-type", b"text/plain")]})
    await send({"type": "http.response.body", "body": body})


async def _slow_app(scope, receive, send) -> None:
    await asyncio.sleep(5)


def _client(asgi_app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=asgi_app), base_url="http://test")


def test_sanitize_request_id_keeps_safe_values() -> None:
    assert sanitize_request_id(" req_123-abc ") == "req_123-abc"


def test_sanitize_request_id_replaces_unsafe_values() -> None:
    for raw in (None, "", "has space", "x" * 65, "new\nline"):
        value = sanitize_request_id(raw)
        assert value != raw
        assert len(value) == 36


async def test_request_id_forwarded_and_exposed_to_logging_context() -> None:
    async with _client(RequestIDMiddleware(_ok_app)) as client:
        response = await client.get("/", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"
    assert response.text == "abc-123"
    assert get_request_id() is None


async def test_request_id_generated_when_missing() -> None:
    async with _client(RequestIDMiddleware(_ok_app)) as client:
        response = await client.get("/")
    assert len(response.headers["x-request-id"]) == 36


async def test_correlation_id_defaults_to_request_id() -> None:
    app = RequestIDMiddleware(CorrelationIDMiddleware(_ok_app))
    async with _client(app) as client:
        response = await client.get("/", headers={"X-Request-ID": "req-1"})
        forwarded = await client.get(
            "/", headers={"X-Request-ID": "req-2", "X-Correlation-ID": "corr-9"}
        )
    assert response.headers["x-correlation-id"] == "req-1"
    assert forwarded.headers["x-correlation-id"] == "corr-9"


async def test_timeout_returns_504() -> None:
    async with _client(TimeoutMiddleware(_slow_app, timeout_seconds=0)) as client:
        response = await client.get("/search")
    assert response.status_code == 504
    body = response.json()
    assert body["error"] == "GATEWAY_TIMEOUT"
    assert body["details"] == {"timeoutSeconds": 0}

"""Correlation ID middleware.

Propagates X-Correlation-ID across services: the client's value, else the
request ID, else a fresh UUID.
"""

import uuid
from typing import Callable

from community_search.middleware._headers import get_header, with_response_header


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Forward or assign the correlation ID and echo it on the response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        state = scope.setdefault("state", {})
        correlation_id = (
            get_header(scope, header_name)
            or state.get("request_id")
            or str(uuid.uuid4())
        )
        state["correlation_id"] = correlation_id
        await app(scope, receive, with_response_header(send, header_name, correlation_id))

    return asgi_app

"""Request ID middleware.

Forwards a client X-Request-ID (sanitized) or generates one, exposes it on
scope state and in the logging context, and echoes it on the response.
"""

import re
import uuid
from typing import Callable

from community_search.middleware._headers import get_header, with_response_header
from community_search.shared.context import reset_request_id, set_request_id

# Safe for logging: alphanumeric, hyphen, underscore.
REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def sanitize_request_id(raw: str | None) -> str:
    """Return raw (stripped) if it is a safe identifier, otherwise a new UUID."""
    candidate = (raw or "").strip()
    if not REQUEST_ID_ALLOWED_PATTERN.match(candidate):
        return str(uuid.uuid4())
    return candidate


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request ID on each request and response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        token = set_request_id(request_id)
        try:
            await app(scope, receive, with_response_header(send, header_name, request_id))
        finally:
            reset_request_id(token)

    return asgi_app

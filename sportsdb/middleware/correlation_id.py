"""Correlation ID middleware.

Propagates X-Correlation-ID (forward from client, else reuse the request ID).
Uses raw ASGI (no BaseHTTPMiddleware).
"""

import uuid
from typing import Callable

from sportsdb.middleware.headers import get_header, with_header
from sportsdb.middleware.request_id import sanitize_request_id


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Add or forward X-Correlation-ID; fall back to request_id if set on scope state. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        raw = get_header(scope, header_name)
        if raw:
            correlation_id = sanitize_request_id(raw)
        else:
            correlation_id = scope.get("state", {}).get("request_id") or str(uuid.uuid4())
        scope.setdefault("state", {})["correlation_id"] = correlation_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                message = with_header(message, header_name, correlation_id)
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app

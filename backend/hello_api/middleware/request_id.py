"""
Hello API — Request ID Middleware
==================================

What:  Assigns a correlation ID to each request and returns it as X-Request-ID.
How:   Reuses a client-supplied X-Request-ID header or generates a short UUID,
       stores it in a ContextVar (for loggers and exception handlers) and in
       request.state (for route handlers).
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate an 8-character ID
        3. Store it in request_id_var and request.state.request_id
        4. Echo it in the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Client-provided ID first: the demo page or a caller script can tag its own calls.
        # 8 characters is plenty for correlating log lines and reads better than a full UUID.
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        # Each request runs in its own task, so the value never leaks across requests
        request_id_var.set(rid)
        # ContextVar for loggers and exception handlers, request.state for route handlers
        request.state.request_id = rid

        response = await call_next(request)

        # Returned so the client can quote it when reporting a failure
        response.headers["X-Request-ID"] = rid
        return response

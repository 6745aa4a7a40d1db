"""
Hello API — Hello Service (Per-Method Response Builders)
=========================================================

What:  Turns one RequestContext into one HandlerResult for /api/hello.
How:   `dispatch()` maps the request method onto HttpMethod and looks up the
       builder in a dispatch table. Each builder re-checks its own method,
       performs presence checks, and returns a Pydantic envelope.
Who:   Called by the hello route; exercised directly by the service tests.

Dispatch Table:
    GET    → get_hello        200  request metadata
    POST   → create_message   201  {success, data{id, name, message, createdAt}}
    PUT    → update_message   200  {success, data{id, name, message, updatedAt}}
    DELETE → delete_message   200  {success, message, deletedAt}
    PATCH  → patch_message    200  {success, data{id, ...fields, updatedAt}}
    other  → MethodNotAllowedError (405)

The service is stateless: builders read only the context they are given.
"""

import logging
import platform
import secrets
import string
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import BaseModel

from hello_api.config import settings
from hello_api.exceptions import (
    HelloAPIError,
    MethodNotAllowedError,
    ProcessingError,
    ValidationError,
)
from hello_api.schemas.hello import (
    CreatedMessage,
    EnvironmentInfo,
    HelloResponse,
    MessageCreatedResponse,
    MessageDeletedResponse,
    MessagePatchedResponse,
    MessageUpdatedResponse,
    UpdatedMessage,
)

logger = logging.getLogger(__name__)

FEATURES = [
    "API Routes",
    "Middleware Support",
    "Dynamic Routing",
    "Request/Response Helpers",
    "Dependency Injection",
    "Automatic OpenAPI Docs",
    "Type Hints Support",
]

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_LENGTH = 9


class HttpMethod(str, Enum):
    """HTTP methods served by /api/hello."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    @classmethod
    def parse(cls, raw: str) -> Optional["HttpMethod"]:
        """Returns the matching member, or None for unsupported methods."""
        try:
            return cls(raw.upper())
        except ValueError:
            return None


ALLOWED_METHODS = [m.value for m in HttpMethod]


@dataclass
class RequestContext:
    """
    Transport-independent view of one incoming request.

    Attributes:
        method:  Raw method string as received ("GET", "HEAD", ...)
        url:     Path plus query string, e.g. "/api/hello?id=123"
        headers: Lower-cased header names → values
        query:   Query parameters; repeated keys collapse into a list
        body:    Decoded JSON object, or None when absent / not an object
    """

    method: str
    url: str = "/api/hello"
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Dict[str, Any] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None


@dataclass
class HandlerResult:
    """Status code, envelope, and extra response headers produced by a builder."""

    status_code: int
    body: BaseModel
    headers: Dict[str, str] = field(default_factory=dict)

    def content(self) -> Dict[str, Any]:
        return self.body.model_dump(by_alias=True, mode="json")


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_message_id() -> str:
    """Opaque 9-character base-36 identifier. Not collision-resistant."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def _is_absent(value: Any) -> bool:
    """Falsy scalars are absent; containers are present even when empty."""
    if isinstance(value, (list, dict)):
        return False
    return not value


class HelloService:
    """
    Per-method response builders for /api/hello.

    Error Handling Strategy:
        - Absent required fields raise ValidationError (400).
        - A builder invoked for a different method raises MethodNotAllowedError (405).
        - Anything else that goes wrong inside a builder is logged and
          re-raised as ProcessingError (500) with that builder's generic message.
    """

    def __init__(self) -> None:
        self._handlers: Dict[HttpMethod, Callable[[RequestContext], HandlerResult]] = {
            HttpMethod.GET: self.get_hello,
            HttpMethod.POST: self.create_message,
            HttpMethod.PUT: self.update_message,
            HttpMethod.DELETE: self.delete_message,
            HttpMethod.PATCH: self.patch_message,
        }

    def dispatch(self, ctx: RequestContext) -> HandlerResult:
        """
        Route a request to the builder registered for its method.

        Raises:
            MethodNotAllowedError: The method is not one of GET/POST/PUT/DELETE/PATCH
        """
        method = HttpMethod.parse(ctx.method)
        if method is None:
            logger.info("Rejecting unsupported method %s on %s", ctx.method, ctx.url)
            raise MethodNotAllowedError(method=ctx.method, allowed=ALLOWED_METHODS)
        return self._handlers[method](ctx)

    # ── GET ───────────────────────────────────────────────────────────────

    def get_hello(self, ctx: RequestContext) -> HandlerResult:
        """
        Build the request metadata envelope.

        Response headers:
            X-API-Version:   settings.api_version
            X-Response-Time: epoch milliseconds when the response was built
            Cache-Control:   public, max-age=<settings.cache_max_age>
        """
        self._ensure_method(ctx, HttpMethod.GET)
        try:
            body = HelloResponse(
                message="Hello from FastAPI Routes!",
                timestamp=utc_timestamp(),
                method=ctx.method,
                url=ctx.url,
                user_agent=ctx.headers.get("user-agent") or "Unknown",
                host=ctx.headers.get("host") or "localhost",
                query=ctx.query,
                environment=EnvironmentInfo(
                    runtime_version=f"v{platform.python_version()}",
                    environment=settings.environment,
                    platform=sys.platform,
                    arch=platform.machine() or "unknown",
                ),
                features=list(FEATURES),
            )
            headers = {
                "X-API-Version": settings.api_version,
                "X-Response-Time": str(int(time.time() * 1000)),
                "Cache-Control": f"public, max-age={settings.cache_max_age}",
            }
            return HandlerResult(status_code=200, body=body, headers=headers)
        except HelloAPIError:
            raise
        except Exception as exc:
            logger.exception("GET /api/hello failed")
            raise ProcessingError(message="Failed to process request") from exc

    # ── POST ──────────────────────────────────────────────────────────────

    def create_message(self, ctx: RequestContext) -> HandlerResult:
        """Create a message from body.name and body.message (201)."""
        self._ensure_method(ctx, HttpMethod.POST)
        try:
            body = ctx.body or {}
            self._require(body, ["name", "message"], "Name and message are required")

            data = CreatedMessage(
                id=generate_message_id(),
                name=body["name"],
                message=body["message"],
                created_at=utc_timestamp(),
            )
            logger.debug("Created message %s", data.id)
            return HandlerResult(status_code=201, body=MessageCreatedResponse(data=data))
        except HelloAPIError:
            raise
        except Exception as exc:
            logger.exception("POST /api/hello failed")
            raise ProcessingError(message="Failed to process request") from exc

    # ── PUT ───────────────────────────────────────────────────────────────

    def update_message(self, ctx: RequestContext) -> HandlerResult:
        """Replace a message from body.id, body.name and body.message."""
        self._ensure_method(ctx, HttpMethod.PUT)
        try:
            body = ctx.body or {}
            self._require(
                body, ["id", "name", "message"], "ID, name, and message are required"
            )

            data = UpdatedMessage(
                id=body["id"],
                name=body["name"],
                message=body["message"],
                updated_at=utc_timestamp(),
            )
            return HandlerResult(status_code=200, body=MessageUpdatedResponse(data=data))
        except HelloAPIError:
            raise
        except Exception as exc:
            logger.exception("PUT /api/hello failed")
            raise ProcessingError(message="Failed to update message") from exc

    # ── DELETE ────────────────────────────────────────────────────────────

    def delete_message(self, ctx: RequestContext) -> HandlerResult:
        """Acknowledge deletion of the message named by query.id."""
        self._ensure_method(ctx, HttpMethod.DELETE)
        try:
            self._require(ctx.query, ["id"], "ID is required")
            message_id = ctx.query["id"]
            if isinstance(message_id, list):
                # Repeated ?id=1&id=2 reads as "1,2"
                message_id = ",".join(str(v) for v in message_id)

            body = MessageDeletedResponse(
                message=f"Message {message_id} deleted successfully",
                deleted_at=utc_timestamp(),
            )
            return HandlerResult(status_code=200, body=body)
        except HelloAPIError:
            raise
        except Exception as exc:
            logger.exception("DELETE /api/hello failed")
            raise ProcessingError(message="Failed to delete message") from exc

    # ── PATCH ─────────────────────────────────────────────────────────────

    def patch_message(self, ctx: RequestContext) -> HandlerResult:
        """Echo body.id plus any extra fields as a partial update."""
        self._ensure_method(ctx, HttpMethod.PATCH)
        try:
            body = ctx.body or {}
            self._require(body, ["id"], "ID is required")

            update_fields = {k: v for k, v in body.items() if k != "id"}
            data = {"id": body["id"], **update_fields, "updatedAt": utc_timestamp()}
            return HandlerResult(status_code=200, body=MessagePatchedResponse(data=data))
        except HelloAPIError:
            raise
        except Exception as exc:
            logger.exception("PATCH /api/hello failed")
            raise ProcessingError(message="Failed to patch message") from exc

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _ensure_method(ctx: RequestContext, expected: HttpMethod) -> None:
        if HttpMethod.parse(ctx.method) is not expected:
            raise MethodNotAllowedError(method=ctx.method, allowed=[expected.value])

    @staticmethod
    def _require(source: Mapping[str, Any], fields: List[str], message: str) -> None:
        """
        Presence check: a field counts as absent when missing, None, False,
        0 or "". Empty lists and objects count as present.
        """
        missing = [name for name in fields if _is_absent(source.get(name))]
        if missing:
            raise ValidationError(message=message, missing=missing)


# Singleton instance used by the route layer
hello_service = HelloService()

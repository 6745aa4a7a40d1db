"""
Hello API — Pydantic Response Schemas
======================================

What:  Pydantic models defining the JSON envelopes returned by /api/hello.
How:   The hello service builds one of these per request; the route serializes it
       with `by_alias=True`, so Python snake_case fields go out as camelCase keys
       (created_at → createdAt, user_agent → userAgent).
Who:   Built by HelloService, serialized by the hello route, read by the demo clients.

Request bodies are deliberately NOT modelled here: the endpoint only checks
that required fields are present (see HelloService._require).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that emits camelCase keys and accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# GET — request metadata envelope
# ══════════════════════════════════════════════════════════════════════════


class EnvironmentInfo(CamelModel):
    """
    What:  Ambient runtime information echoed in the GET envelope.

    `runtime_version` keeps the `nodeVersion` wire name the demo page reads.
    """
    runtime_version: str = Field(alias="nodeVersion", description="Server runtime version")
    environment: str = Field(description="Deployment environment name")
    platform: str = Field(description="Operating system platform (sys.platform)")
    arch: str = Field(description="Machine architecture")


class HelloResponse(CamelModel):
    """
    What:  Metadata envelope returned by GET /api/hello.
    """
    message: str
    timestamp: str = Field(description="Server time (UTC ISO 8601)")
    method: str
    url: str = Field(description="Request path including the query string")
    user_agent: str
    host: str
    query: Dict[str, Any] = Field(default_factory=dict)
    environment: EnvironmentInfo
    features: List[str]


# ══════════════════════════════════════════════════════════════════════════
# POST / PUT / DELETE / PATCH — message envelopes
# ══════════════════════════════════════════════════════════════════════════


class CreatedMessage(CamelModel):
    id: str
    name: Any
    message: Any
    created_at: str


class UpdatedMessage(CamelModel):
    id: Any
    name: Any
    message: Any
    updated_at: str


class MessageCreatedResponse(CamelModel):
    """Returned by POST /api/hello with HTTP 201."""
    success: bool = True
    data: CreatedMessage
    message: str = "Message created successfully"


class MessageUpdatedResponse(CamelModel):
    """Returned by PUT /api/hello."""
    success: bool = True
    data: UpdatedMessage
    message: str = "Message updated successfully"


class MessageDeletedResponse(CamelModel):
    """Returned by DELETE /api/hello?id=..."""
    success: bool = True
    message: str
    deleted_at: str


class MessagePatchedResponse(CamelModel):
    """
    Returned by PATCH /api/hello.

    `data` is a plain dict: the client's extra fields are echoed verbatim
    between `id` and `updatedAt`, under whatever keys the client chose.
    """
    success: bool = True
    data: Dict[str, Any]
    message: str = "Message partially updated successfully"


# ══════════════════════════════════════════════════════════════════════════
# Error / Health
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error envelope for 400/405/500 responses.

    Example:
        {
            "error": "Bad Request",
            "message": "ID is required",
            "details": {"missing": ["id"]},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Short error title")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for container and load balancer health checks."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    environment: str = Field(description="Deployment environment name")
    uptime_seconds: float = Field(description="Seconds since service started")

"""
Hello API — Hello Route Handler
================================

What:  The single method-polymorphic endpoint /api/hello.
How:   Accepts every common HTTP method, converts the Starlette request into a
       RequestContext, and hands it to HelloService.dispatch(). Unsupported
       methods are rejected by the service (405) instead of by Starlette, so the
       error envelope matches the rest of the API.
Who:   Called by the demo page (static/app.js) and the Python DemoClient.

Request Flow:
    1. Read method, URL, headers, query parameters
    2. Decode the JSON body (absent / malformed / non-object → no fields)
    3. HelloService.dispatch() → HandlerResult
    4. Return JSONResponse(status, envelope, headers)
    5. On error: global exception handlers in main.py format the response
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from hello_api.schemas.hello import (
    ErrorResponse,
    HelloResponse,
    MessageCreatedResponse,
)
from hello_api.services.hello_service import RequestContext, hello_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Hello"])

# Registered explicitly so that HEAD/OPTIONS/TRACE reach the service and get
# the JSON 405 envelope instead of Starlette's plain one.
ROUTE_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS", "TRACE"]


async def build_request_context(request: Request) -> RequestContext:
    """Translate a Starlette request into the service's RequestContext."""
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"

    query: Dict[str, Any] = {}
    for key, value in request.query_params.multi_items():
        if key not in query:
            query[key] = value
        elif isinstance(query[key], list):
            query[key].append(value)
        else:
            query[key] = [query[key], value]

    return RequestContext(
        method=request.method,
        url=url,
        headers={k.lower(): v for k, v in request.headers.items()},
        query=query,
        body=await _read_json_object(request),
    )


async def _read_json_object(request: Request) -> Optional[Dict[str, Any]]:
    raw = await request.body()
    if not raw:
        return None
    try:
        payload = await request.json()
    except ValueError:
        logger.debug("Ignoring undecodable request body (%d bytes)", len(raw))
        return None
    if not isinstance(payload, dict):
        logger.debug("Ignoring non-object JSON body of type %s", type(payload).__name__)
        return None
    return payload


@router.api_route(
    "/hello",
    methods=ROUTE_METHODS,
    responses={
        200: {"description": "GET metadata, or PUT/DELETE/PATCH result", "model": HelloResponse},
        201: {"description": "POST result", "model": MessageCreatedResponse},
        400: {"description": "Required field absent", "model": ErrorResponse},
        405: {"description": "Unsupported method", "model": ErrorResponse},
        500: {"description": "Unexpected processing error", "model": ErrorResponse},
    },
    summary="Echo request metadata under any HTTP method",
    description=(
        "GET returns request metadata. POST {name, message} creates, "
        "PUT {id, name, message} replaces, DELETE ?id= removes and "
        "PATCH {id, ...fields} partially updates an imaginary message. "
        "Nothing is stored."
    ),
)
async def hello(request: Request) -> JSONResponse:
    """Dispatch /api/hello by HTTP method."""
    ctx = await build_request_context(request)
    result = hello_service.dispatch(ctx)
    return JSONResponse(
        status_code=result.status_code,
        content=result.content(),
        headers=result.headers,
    )

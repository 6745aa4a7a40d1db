"""
Hello API — Python Demo Client
===============================

What:  Scriptable counterpart of the browser demo page (static/app.js).
How:   Wraps an httpx.AsyncClient. Each of the five actions sets `loading`,
       clears `error`, sends one request with a fixed example payload, and
       stores either the decoded JSON (`api_response`) or the error text
       (`error`) before clearing `loading` again.
Who:   Scripts and tests. Point it at a running server with `base_url`, or at
       an in-process app with `transport=httpx.ASGITransport(app=app)`.

Like the browser page, non-2xx responses are not errors: their JSON body is
stored as the response. Only transport failures and undecodable bodies set
`error`. There is no retry and no cancellation.

Example:
    async with DemoClient("http://localhost:8000") as client:
        await client.test_post_request()
        print(client.api_response["data"]["id"])
"""

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

ENDPOINT = "/api/hello"

POST_PAYLOAD = {"name": "John Doe", "message": "Hello from the frontend!"}
PUT_PAYLOAD = {"id": "123", "name": "Jane Doe", "message": "Updated message!"}
DELETE_PARAMS = {"id": "123"}
PATCH_PAYLOAD = {"id": "123", "message": "Patched message!"}


class DemoClient:
    """
    Five-button demo client for /api/hello.

    Attributes:
        api_response: Decoded JSON of the last completed request (any status)
        loading:      True while a request is in flight
        error:        Error text of the last failed request, else None
        last_status:  HTTP status of the last completed request
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self.api_response: Optional[Any] = None
        self.loading = False
        self.error: Optional[str] = None
        self.last_status: Optional[int] = None

    async def __aenter__(self) -> "DemoClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ── Actions ───────────────────────────────────────────────────────────

    async def test_get_request(self) -> Optional[Any]:
        return await self._run("GET")

    async def test_post_request(self) -> Optional[Any]:
        return await self._run("POST", json=POST_PAYLOAD)

    async def test_put_request(self) -> Optional[Any]:
        return await self._run("PUT", json=PUT_PAYLOAD)

    async def test_delete_request(self) -> Optional[Any]:
        return await self._run("DELETE", params=DELETE_PARAMS)

    async def test_patch_request(self) -> Optional[Any]:
        return await self._run("PATCH", json=PATCH_PAYLOAD)

    # ── Internals ─────────────────────────────────────────────────────────

    async def _run(
        self,
        method: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Optional[Any]:
        """Send one request and record its outcome. Returns the stored response."""
        self.loading = True
        self.error = None
        try:
            response = await self._http.request(method, ENDPOINT, json=json, params=params)
            self.last_status = response.status_code
            self.api_response = response.json()
            logger.debug("%s %s → %d", method, ENDPOINT, response.status_code)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("%s %s failed: %s", method, ENDPOINT, exc)
            self.error = str(exc) or type(exc).__name__
        finally:
            self.loading = False
        return self.api_response

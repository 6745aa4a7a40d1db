"""
Hello API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped):
    ├── service:      Fresh HelloService instance
    ├── make_ctx:     Factory for RequestContext objects
    ├── test_client:  HTTPX AsyncClient bound to the FastAPI app (no server)
    └── demo_client:  DemoClient bound to the same app through ASGITransport
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from hello_api.services.hello_service import HelloService, RequestContext


@pytest.fixture
def service():
    """A fresh HelloService; the service is stateless, so this is just for isolation."""
    return HelloService()


@pytest.fixture
def make_ctx():
    """
    Builds RequestContext objects with sensible defaults.

    Usage:
        ctx = make_ctx("POST", body={"name": "a", "message": "b"})
    """
    def _make(method="GET", url="/api/hello", headers=None, query=None, body=None):
        return RequestContext(
            method=method,
            url=url,
            headers=headers or {},
            query=query or {},
            body=body,
        )
    return _make


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from hello_api.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def demo_client():
    """DemoClient talking to the in-process app."""
    from hello_api.client import DemoClient
    from hello_api.main import app
    client = DemoClient(base_url="http://test", transport=ASGITransport(app=app))
    yield client
    await client.aclose()

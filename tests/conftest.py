"""
Console Demo API - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── reset_registry (autouse): empties the process-wide employee registry
    ├── registry: a private EmployeeRegistry for unit tests
    ├── app: a freshly built FastAPI app (fresh rate limit counters)
    └── test_client: HTTPX AsyncClient bound to that app
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_KEY"] = ""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from console_demo.main import create_app
from console_demo.services.employee_registry import EmployeeRegistry, employee_registry


@pytest.fixture(autouse=True)
def reset_registry():
    """The registry lives for the whole process; isolate tests from each other."""
    employee_registry.reset()
    yield
    employee_registry.reset()


@pytest.fixture
def registry():
    return EmployeeRegistry()


@pytest.fixture
def app():
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server).

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.text == "Hello Java"
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

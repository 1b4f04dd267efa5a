"""
Pytest fixtures - fresh settings, registry, app and client per test.
No shared module state: every test starts from an empty registry with ids from 1.
"""

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from resident_api.config import Settings
from resident_api.main import create_app
from resident_api.services.resident_registry import ResidentRegistry


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def registry() -> ResidentRegistry:
    return ResidentRegistry()


@pytest.fixture
def app(settings: Settings, registry: ResidentRegistry) -> FastAPI:
    return create_app(settings=settings, registry=registry)


@pytest_asyncio.fixture
async def client(app: FastAPI):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def sync_client(app: FastAPI):
    """Blocking client for pytest-bdd steps."""
    with TestClient(app) as tc:
        yield tc

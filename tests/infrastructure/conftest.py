"""Fixtures for FastAPI integration tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from storeflow_tenancy.infrastructure.fastapi import TenancyServices

from tenancy_app import build_app


@pytest.fixture
def services(settings, mock_directory, tenant_cache):
    return TenancyServices(settings=settings, directory=mock_directory, cache=tenant_cache)


@pytest.fixture
def app(services):
    return build_app(services)


@pytest.fixture
def client(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")

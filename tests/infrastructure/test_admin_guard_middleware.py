"""
Tests for AdminRegionGuardMiddleware.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tenancy_app import build_app


@pytest.mark.asyncio
async def test_cross_tenant_admin_request_is_rejected(app, client, mock_directory, active_tenant):
    mock_directory.lookup_by_subdomain.return_value = active_tenant

    async with client:
        response = await client.get(
            "/admin/products",
            headers={
                "host": "johns-store.azima.store",
                "x-test-admin": "admin_1",
                "x-test-admin-region": "reg_other",
            },
        )

    assert response.status_code == 403
    assert response.json() == {
        "error": "Access denied",
        "message": "You don't have permission to access this resource",
        "code": "CROSS_TENANT_ACCESS",
    }
    assert app.state.handler_calls == 0


@pytest.mark.asyncio
async def test_matching_admin_keeps_tenant_context(client, mock_directory, active_tenant):
    mock_directory.lookup_by_subdomain.return_value = active_tenant

    async with client:
        response = await client.get(
            "/admin/products",
            headers={
                "host": "johns-store.azima.store",
                "x-test-admin": "admin_1",
                "x-test-admin-region": "reg_42",
            },
        )

    assert response.status_code == 200
    assert response.json() == {"tenant_id": "tenant_1", "region_id": "reg_42", "source": "subdomain"}


@pytest.mark.asyncio
async def test_admin_region_synthesizes_context(client):
    async with client:
        response = await client.get(
            "/admin/products",
            headers={"host": "azima.store", "x-test-admin": "admin_1", "x-test-admin-region": "reg_9"},
        )

    assert response.status_code == 200
    assert response.json() == {"tenant_id": "", "region_id": "reg_9", "source": "admin_principal"}


@pytest.mark.asyncio
async def test_admin_without_region_continues_unscoped(client):
    async with client:
        response = await client.get(
            "/admin/products",
            headers={"host": "azima.store", "x-test-admin": "admin_1"},
        )

    assert response.status_code == 200
    assert response.json()["region_id"] is None


@pytest.mark.asyncio
async def test_missing_principal_left_to_auth_layer(client):
    async with client:
        response = await client.get("/admin/products", headers={"host": "azima.store"})

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_missing_principal_rejected_when_required(services):
    app = build_app(services, require_admin_principal=True)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        response = await client.get("/admin/products", headers={"host": "azima.store"})

    assert response.status_code == 401
    assert response.json()["code"] == "ADMIN_AUTH_REQUIRED"


@pytest.mark.asyncio
async def test_non_admin_paths_are_not_guarded(client, mock_directory, active_tenant):
    mock_directory.lookup_by_subdomain.return_value = active_tenant

    async with client:
        response = await client.get(
            "/public",
            headers={
                "host": "johns-store.azima.store",
                "x-test-admin": "admin_1",
                "x-test-admin-region": "reg_other",
            },
        )

    assert response.status_code == 200
    assert response.json()["region_id"] == "reg_42"

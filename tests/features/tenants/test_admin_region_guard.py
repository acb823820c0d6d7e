"""
Tests for the admin region guard.
"""

import logging

import pytest

from storeflow_tenancy.config import AUDIT_LOGGER_NAME
from storeflow_tenancy.core.exceptions import CrossTenantAccessError
from storeflow_tenancy.features.tenants.entities import (
    AdminPrincipal,
    TenantContext,
    TenantSource,
    TenantStatus,
)
from storeflow_tenancy.features.tenants.services import AdminRegionGuard, Continue, Reject


@pytest.fixture
def guard():
    return AdminRegionGuard()


@pytest.fixture
def tenant_context():
    return TenantContext(tenant_id="tenant_1", region_id="reg_1", status=TenantStatus.ACTIVE)


def make_principal(**metadata):
    return AdminPrincipal(id="admin_1", metadata=metadata)


def test_mismatch_is_rejected(guard, tenant_context, caplog):
    with caplog.at_level(logging.ERROR, logger=AUDIT_LOGGER_NAME):
        decision = guard.guard(make_principal(regionId="reg_2"), tenant_context, "/admin/products")

    assert isinstance(decision, Reject)
    assert isinstance(decision.error, CrossTenantAccessError)
    assert decision.error.details["principal_region"] == "reg_2"
    assert decision.error.details["tenant_region"] == "reg_1"

    audit = [r for r in caplog.records if r.name == AUDIT_LOGGER_NAME]
    assert len(audit) == 1
    assert "admin_1" in audit[0].getMessage()
    assert "/admin/products" in audit[0].getMessage()


def test_matching_region_continues_with_existing_context(guard, tenant_context):
    decision = guard.guard(
        make_principal(region_id="reg_1"), tenant_context, "/admin/orders", TenantSource.SUBDOMAIN,
    )

    assert decision == Continue(context=tenant_context, source=TenantSource.SUBDOMAIN)


def test_principal_without_region_continues_unscoped(guard, caplog):
    with caplog.at_level(logging.WARNING):
        decision = guard.guard(make_principal(), None, "/admin/orders")

    assert decision == Continue(context=None, source=None)
    assert any("admin_1" in r.getMessage() for r in caplog.records)


def test_principal_without_region_keeps_resolved_context(guard, tenant_context):
    decision = guard.guard(make_principal(), tenant_context, "/admin/orders", TenantSource.API_KEY)
    assert decision.context is tenant_context


def test_context_synthesized_from_principal(guard):
    decision = guard.guard(make_principal(regionId="reg_9"), None, "/admin/products")

    assert isinstance(decision, Continue)
    assert decision.source == TenantSource.ADMIN_PRINCIPAL
    assert decision.context.tenant_id == ""
    assert decision.context.region_id == "reg_9"
    assert decision.context.status == TenantStatus.ACTIVE


def test_can_access_region(guard):
    assert guard.can_access_region(make_principal(regionId="reg_1"), "reg_1")
    assert not guard.can_access_region(make_principal(regionId="reg_1"), "reg_2")
    assert guard.can_access_region(make_principal(), "reg_2")


def test_get_principal_region(guard):
    assert guard.get_principal_region({"id": "a", "metadata": {"regionId": "reg_3"}}) == "reg_3"
    assert guard.get_principal_region(None) is None

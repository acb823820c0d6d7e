"""
Tests for the exception hierarchy and HTTP mapping.
"""

import pytest

from storeflow_tenancy.core.exceptions import (
    AdminAuthRequiredError,
    BackendUnavailableError,
    CacheUnavailableError,
    CrossTenantAccessError,
    DirectoryUnavailableError,
    InvalidApiKeyError,
    InvalidRegionError,
    InvalidTenantStatusError,
    MissingTenantContextError,
    TenancyError,
    TenantNotFoundError,
    TenantSuspendedError,
    create_error_response,
    get_http_status_code,
)


@pytest.mark.parametrize("error, status, code", [
    (TenantNotFoundError("ghost"), 404, "TENANT_NOT_FOUND"),
    (InvalidTenantStatusError("t1", "provisioning"), 404, "TENANT_NOT_FOUND"),
    (TenantSuspendedError("t1"), 403, "TENANT_SUSPENDED"),
    (MissingTenantContextError(), 400, "MISSING_TENANT_CONTEXT"),
    (InvalidApiKeyError(), 401, "INVALID_API_KEY"),
    (InvalidRegionError("reg_2"), 400, "INVALID_REGION"),
    (CrossTenantAccessError(), 403, "CROSS_TENANT_ACCESS"),
    (AdminAuthRequiredError(), 401, "ADMIN_AUTH_REQUIRED"),
    (BackendUnavailableError(), 500, "TENANT_RESOLUTION_ERROR"),
    (CacheUnavailableError(), 500, "TENANT_RESOLUTION_ERROR"),
    (DirectoryUnavailableError(), 500, "TENANT_RESOLUTION_ERROR"),
    (TenancyError(), 500, "TENANCY_ERROR"),
])
def test_status_and_code(error, status, code):
    assert get_http_status_code(error) == status
    assert error.error_code == code


def test_unknown_exception_maps_to_500():
    assert get_http_status_code(RuntimeError("boom")) == 500


def test_error_response_never_includes_details():
    error = DirectoryUnavailableError(details={"reason": "password authentication failed for user x"})

    body = create_error_response(error)

    assert body == {
        "error": "Internal server error",
        "message": "Failed to resolve tenant context",
        "code": "TENANT_RESOLUTION_ERROR",
    }


def test_invalid_status_keeps_status_in_details():
    error = InvalidTenantStatusError("t1", "provisioning")
    assert error.details == {"status": "provisioning"}
    assert isinstance(error, TenantNotFoundError)


def test_custom_message_and_code():
    error = TenancyError("Something specific", error_code="CUSTOM")
    assert create_error_response(error, error="Custom") == {
        "error": "Custom",
        "message": "Something specific",
        "code": "CUSTOM",
    }

"""Domain exceptions for tenant resolution and isolation."""

from typing import Optional

from .base import TenancyError


# Tenant Errors
class TenantError(TenancyError):
    """Base class for tenant-related errors."""
    title = "Tenant error"


class TenantNotFoundError(TenantError):
    """Raised when no tenant matches the request."""
    status_code = 404
    default_code = "TENANT_NOT_FOUND"
    title = "Tenant not found"

    def __init__(self, identifier: Optional[str] = None, **kwargs):
        message = f"Tenant not found: {identifier}" if identifier else "Tenant not found"
        super().__init__(message, **kwargs)


class InvalidTenantStatusError(TenantNotFoundError):
    """Raised when a tenant exists but is in a transitional or error state.

    Rendered exactly like a missing tenant.
    """

    def __init__(self, identifier: Optional[str] = None, status: Optional[str] = None, **kwargs):
        super().__init__(identifier, details={"status": status}, **kwargs)


class TenantSuspendedError(TenantError):
    """Raised when a tenant has been suspended."""
    status_code = 403
    default_code = "TENANT_SUSPENDED"
    default_message = "This store has been suspended. Please contact support."
    title = "Store suspended"

    def __init__(self, tenant_id: Optional[str] = None, **kwargs):
        super().__init__(details={"tenant_id": tenant_id}, **kwargs)


class MissingTenantContextError(TenantError):
    """Raised when a route requires a tenant and none was resolved."""
    status_code = 400
    default_code = "MISSING_TENANT_CONTEXT"
    default_message = "This endpoint requires a valid tenant context"
    title = "Missing tenant context"


class InvalidApiKeyError(TenantError):
    """Raised when an API key is unknown or inactive."""
    status_code = 401
    default_code = "INVALID_API_KEY"
    default_message = "Invalid or inactive API key"
    title = "Unauthorized"


# Region Errors
class InvalidRegionError(TenancyError):
    """Raised when a region does not belong to the current tenant."""
    status_code = 400
    default_code = "INVALID_REGION"
    title = "Invalid region"

    def __init__(self, region_id: str, **kwargs):
        super().__init__(f"Invalid region: {region_id}", **kwargs)


# Authorization Errors
class CrossTenantAccessError(TenancyError):
    """Raised when an admin principal reaches into another tenant's region."""
    status_code = 403
    default_code = "CROSS_TENANT_ACCESS"
    default_message = "You don't have permission to access this resource"
    title = "Access denied"


class AdminAuthRequiredError(TenancyError):
    """Raised when an admin route is reached without a principal."""
    status_code = 401
    default_code = "ADMIN_AUTH_REQUIRED"
    default_message = "Admin authentication required"
    title = "Unauthorized"

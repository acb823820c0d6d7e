"""Middleware and FastAPI dependencies for tenant-scoped applications."""

from .tenant_middleware import TenantContextMiddleware, error_response, path_has_prefix
from .admin_guard_middleware import AdminRegionGuardMiddleware
from .exception_handlers import register_exception_handlers
from .dependencies import (
    get_tenant_context,
    get_tenant_source,
    get_region_id,
    get_tenant_id,
    get_principal,
    require_tenant_context,
    require_admin_auth,
    get_admin_region_guard,
    require_admin_region,
)

__all__ = [
    "TenantContextMiddleware",
    "AdminRegionGuardMiddleware",
    "register_exception_handlers",
    "error_response",
    "path_has_prefix",
    "get_tenant_context",
    "get_tenant_source",
    "get_region_id",
    "get_tenant_id",
    "get_principal",
    "require_tenant_context",
    "require_admin_auth",
    "get_admin_region_guard",
    "require_admin_region",
]

"""storeflow-tenancy - tenant resolution and isolation for a shared commerce backend.

Identifies the tenant behind each request (API key, override header,
subdomain or custom domain), enforces its lifecycle status and keeps admin
principals inside their assigned region.
"""

from .__version__ import __version__

# Configuration
from .config import TenancySettings, get_settings, setup_logging

from .core.exceptions import (
    TenancyError,
    TenantNotFoundError,
    InvalidTenantStatusError,
    TenantSuspendedError,
    MissingTenantContextError,
    InvalidApiKeyError,
    InvalidRegionError,
    CrossTenantAccessError,
    AdminAuthRequiredError,
    BackendUnavailableError,
    CacheUnavailableError,
    DirectoryUnavailableError,
    get_http_status_code,
    create_error_response,
)

# Tenant feature
from .features.tenants import (
    TenantStatus,
    TenantSource,
    TenantRecord,
    TenantContext,
    CachedTenant,
    RequestSignals,
    FailureKind,
    Resolved,
    Failed,
    Suspended,
    AdminPrincipal,
    PostgresTenantDirectory,
    TenantCache,
    TenantResolver,
    AdminRegionGuard,
)

# FastAPI integration
from .infrastructure.middleware import (
    TenantContextMiddleware,
    AdminRegionGuardMiddleware,
    register_exception_handlers,
    get_tenant_context,
    require_tenant_context,
    require_admin_region,
)
from .infrastructure.fastapi import TenancyServices, install_tenancy

__all__ = [
    "__version__",
    "TenancySettings",
    "get_settings",
    "setup_logging",
    "TenancyError",
    "TenantNotFoundError",
    "InvalidTenantStatusError",
    "TenantSuspendedError",
    "MissingTenantContextError",
    "InvalidApiKeyError",
    "InvalidRegionError",
    "CrossTenantAccessError",
    "AdminAuthRequiredError",
    "BackendUnavailableError",
    "CacheUnavailableError",
    "DirectoryUnavailableError",
    "get_http_status_code",
    "create_error_response",
    "TenantStatus",
    "TenantSource",
    "TenantRecord",
    "TenantContext",
    "CachedTenant",
    "RequestSignals",
    "FailureKind",
    "Resolved",
    "Failed",
    "Suspended",
    "AdminPrincipal",
    "PostgresTenantDirectory",
    "TenantCache",
    "TenantResolver",
    "AdminRegionGuard",
    "TenantContextMiddleware",
    "AdminRegionGuardMiddleware",
    "register_exception_handlers",
    "get_tenant_context",
    "require_tenant_context",
    "require_admin_region",
    "TenancyServices",
    "install_tenancy",
]

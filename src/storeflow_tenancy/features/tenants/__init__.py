"""Tenants feature module - request tenant resolution and isolation.

Entities and protocols describe tenants and resolution outcomes; the
repository reads the PostgreSQL tenant directory; services resolve tenants
through the Redis cache and guard admin access by region.
"""

# Domain entities and protocols
from .entities import (
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
    ResolutionResult,
    AdminPrincipal,
    TenantDirectory,
    TenantCacheProtocol,
)

# Repository implementations
from .repositories import PostgresTenantDirectory

# Service implementations
from .services import (
    TenantCache,
    TenantResolver,
    hash_api_key,
    AdminRegionGuard,
    Continue,
    Reject,
    GuardDecision,
)

__all__ = [
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
    "ResolutionResult",
    "AdminPrincipal",
    "TenantDirectory",
    "TenantCacheProtocol",
    "PostgresTenantDirectory",
    "TenantCache",
    "TenantResolver",
    "hash_api_key",
    "AdminRegionGuard",
    "Continue",
    "Reject",
    "GuardDecision",
]

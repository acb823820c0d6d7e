from .tenant import (
    TenantStatus,
    TenantSource,
    TenantRecord,
    TenantContext,
    CachedTenant,
)
from .resolution import (
    RequestSignals,
    FailureKind,
    Resolved,
    Failed,
    Suspended,
    ResolutionResult,
)
from .principal import (
    AdminPrincipal,
    REGION_METADATA_KEYS,
    get_principal_region,
    get_principal_id,
)
from .protocols import TenantDirectory, TenantCacheProtocol

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
    "REGION_METADATA_KEYS",
    "get_principal_region",
    "get_principal_id",
    "TenantDirectory",
    "TenantCacheProtocol",
]

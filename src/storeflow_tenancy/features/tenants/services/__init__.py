"""Tenant services."""

from .tenant_cache import TenantCache
from .tenant_resolver import TenantResolver, hash_api_key
from .admin_region_guard import AdminRegionGuard, Continue, Reject, GuardDecision

__all__ = [
    "TenantCache",
    "TenantResolver",
    "hash_api_key",
    "AdminRegionGuard",
    "Continue",
    "Reject",
    "GuardDecision",
]

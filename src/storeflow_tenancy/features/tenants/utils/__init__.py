"""Tenant utilities."""

from .hostname import (
    normalize_hostname,
    is_local_address,
    extract_subdomain,
    is_custom_domain,
)
from .region_filter import (
    get_region_filter,
    scope_to_region,
    validate_region_access,
    has_tenant_context,
    get_safe_region_id,
    build_region_query_params,
    validate_entities_region,
)

__all__ = [
    "normalize_hostname",
    "is_local_address",
    "extract_subdomain",
    "is_custom_domain",
    "get_region_filter",
    "scope_to_region",
    "validate_region_access",
    "has_tenant_context",
    "get_safe_region_id",
    "build_region_query_params",
    "validate_entities_region",
]

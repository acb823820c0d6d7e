"""Exceptions module for storeflow-tenancy.

Domain errors describe tenant resolution and isolation outcomes;
infrastructure errors describe cache and directory failures.
"""

from .base import TenancyError, create_error_response
from .domain import (
    TenantError,
    TenantNotFoundError,
    InvalidTenantStatusError,
    TenantSuspendedError,
    MissingTenantContextError,
    InvalidApiKeyError,
    InvalidRegionError,
    CrossTenantAccessError,
    AdminAuthRequiredError,
)
from .infrastructure import (
    BackendUnavailableError,
    CacheUnavailableError,
    DirectoryUnavailableError,
)
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "TenancyError",
    "create_error_response",
    "get_http_status_code",
    "HTTP_STATUS_MAP",

    # Tenant Errors
    "TenantError",
    "TenantNotFoundError",
    "InvalidTenantStatusError",
    "TenantSuspendedError",
    "MissingTenantContextError",
    "InvalidApiKeyError",

    # Region / Authorization Errors
    "InvalidRegionError",
    "CrossTenantAccessError",
    "AdminAuthRequiredError",

    # Infrastructure Errors
    "BackendUnavailableError",
    "CacheUnavailableError",
    "DirectoryUnavailableError",
]

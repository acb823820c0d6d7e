"""Infrastructure exceptions for the cache and directory backends."""

from .base import TenancyError


class BackendUnavailableError(TenancyError):
    """Base class for cache or directory I/O failures."""
    status_code = 500
    default_code = "TENANT_RESOLUTION_ERROR"
    default_message = "Failed to resolve tenant context"
    title = "Internal server error"


class CacheUnavailableError(BackendUnavailableError):
    """Raised when the tenant cache cannot be reached or decoded."""
    pass


class DirectoryUnavailableError(BackendUnavailableError):
    """Raised when the tenant directory query fails or times out."""
    pass

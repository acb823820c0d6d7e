"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import TenancyError
from .domain import (
    AdminAuthRequiredError,
    CrossTenantAccessError,
    InvalidApiKeyError,
    InvalidRegionError,
    InvalidTenantStatusError,
    MissingTenantContextError,
    TenantError,
    TenantNotFoundError,
    TenantSuspendedError,
)
from .infrastructure import (
    BackendUnavailableError,
    CacheUnavailableError,
    DirectoryUnavailableError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    MissingTenantContextError: 400,
    InvalidRegionError: 400,

    # 401 Unauthorized
    InvalidApiKeyError: 401,
    AdminAuthRequiredError: 401,

    # 403 Forbidden
    TenantSuspendedError: 403,
    CrossTenantAccessError: 403,

    # 404 Not Found
    TenantNotFoundError: 404,
    InvalidTenantStatusError: 404,

    # 500 Internal Server Error
    TenantError: 500,
    BackendUnavailableError: 500,
    CacheUnavailableError: 500,
    DirectoryUnavailableError: 500,
    TenancyError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Walks the exception's MRO so subclasses inherit their parent's mapping.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500

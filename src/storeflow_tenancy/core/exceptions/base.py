"""Base exceptions for storeflow-tenancy.

Every error raised by this package inherits from TenancyError and carries an
error code, a fixed user-facing message and optional details. Details are for
logs only and are never rendered into responses.
"""

from typing import Any, Dict, Optional


class TenancyError(Exception):
    """Base exception for all storeflow-tenancy errors."""

    status_code: int = 500
    default_code: str = "TENANCY_ERROR"
    default_message: str = "Tenant resolution failed"
    title: str = "Request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.error_code = error_code or self.default_code
        self.details = details or {}


def create_error_response(exception: TenancyError, error: Optional[str] = None) -> Dict[str, Any]:
    """Create the JSON body returned to clients for a tenancy error.

    Args:
        exception: The tenancy exception
        error: Short error title; defaults to the exception's title

    Returns:
        Error response dictionary
    """
    return {
        "error": error or exception.title,
        "message": exception.message,
        "code": exception.error_code,
    }

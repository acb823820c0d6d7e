"""Exception handlers rendering tenancy errors raised inside route handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ...core.exceptions import TenancyError, create_error_response, get_http_status_code

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register the TenancyError handler on an application.

    Errors raised by dependencies (``require_tenant_context``,
    ``require_admin_region``) and by region helpers get the same JSON body as
    middleware rejections.
    """

    @app.exception_handler(TenancyError)
    async def tenancy_exception_handler(request: Request, exc: TenancyError):
        status_code = get_http_status_code(exc)
        if status_code >= 500:
            logger.error(f"Tenancy error on {request.url.path}: {exc.error_code} {exc.details}")
        else:
            logger.info(f"Tenancy error on {request.url.path}: {exc.error_code}")
        return JSONResponse(status_code=status_code, content=create_error_response(exc))

"""Tenant context middleware for multi-tenant FastAPI applications.

Resolves the tenant for every request and stores the result on
``request.state.tenant_context`` / ``request.state.tenant_source``. Whether a
failed resolution ends the request depends on the path.
"""

import logging
from typing import Iterable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ...core.exceptions import (
    BackendUnavailableError,
    InvalidApiKeyError,
    InvalidTenantStatusError,
    MissingTenantContextError,
    TenancyError,
    TenantNotFoundError,
    TenantSuspendedError,
    create_error_response,
    get_http_status_code,
)
from ...features.tenants.entities import (
    Failed,
    FailureKind,
    RequestSignals,
    Resolved,
    Suspended,
)
from ...features.tenants.services import TenantResolver

logger = logging.getLogger(__name__)

DEFAULT_EXEMPT_PATHS = ("/health", "/healthz", "/static", "/_next")


def error_response(error: TenancyError) -> JSONResponse:
    """Render a tenancy error as the public JSON error body."""
    return JSONResponse(
        status_code=get_http_status_code(error),
        content=create_error_response(error),
    )


def path_has_prefix(path: str, prefix: str) -> bool:
    """Segment-aware prefix check: ``/store`` matches ``/store/x`` but not ``/storefront``."""
    if not prefix:
        return False
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


class TenantContextMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware resolving and attaching the request's tenant."""

    def __init__(
        self,
        app,
        resolver: TenantResolver,
        api_key_header: str = "x-api-key",
        override_header: str = "x-tenant-subdomain",
        exempt_paths: Optional[Iterable[str]] = None,
        admin_prefix: str = "/admin",
        store_prefix: str = "/store",
    ):
        super().__init__(app)
        self.resolver = resolver
        self.api_key_header = api_key_header
        self.override_header = override_header
        self.exempt_paths = tuple(exempt_paths) if exempt_paths is not None else DEFAULT_EXEMPT_PATHS
        self.admin_prefix = admin_prefix
        self.store_prefix = store_prefix

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process tenant context for incoming requests."""
        request.state.tenant_context = None
        request.state.tenant_source = None

        signals = self._extract_signals(request)
        result = await self.resolver.resolve(signals)
        path = request.url.path

        if isinstance(result, Resolved):
            request.state.tenant_context = result.context
            request.state.tenant_source = result.source
            logger.debug(
                f"Tenant context configured: tenant_id={result.context.tenant_id}, "
                f"region_id={result.context.region_id}, source={result.source.value}, path={path}"
            )
            return await call_next(request)

        if isinstance(result, Suspended):
            return error_response(TenantSuspendedError(result.tenant_id))

        return await self._handle_failure(request, call_next, result)

    async def _handle_failure(self, request: Request, call_next, result: Failed) -> Response:
        path = request.url.path

        if result.kind == FailureKind.BACKEND_UNAVAILABLE:
            return error_response(BackendUnavailableError())

        if self._is_exempt(path) or path_has_prefix(path, self.admin_prefix):
            return await call_next(request)

        if path_has_prefix(path, self.store_prefix):
            logger.info(f"Rejecting store request without tenant: {result.reason} (path={path})")
            if result.kind == FailureKind.NO_SIGNALS:
                return error_response(MissingTenantContextError())
            if result.kind == FailureKind.INVALID_API_KEY:
                return error_response(InvalidApiKeyError())
            if result.kind == FailureKind.INVALID_STATUS:
                return error_response(InvalidTenantStatusError())
            return error_response(TenantNotFoundError())

        return await call_next(request)

    def _extract_signals(self, request: Request) -> RequestSignals:
        return RequestSignals(
            hostname=request.headers.get("host", ""),
            api_key=request.headers.get(self.api_key_header) or None,
            override_subdomain=request.headers.get(self.override_header) or None,
        )

    def _is_exempt(self, path: str) -> bool:
        return any(path.startswith(exempt) for exempt in self.exempt_paths)

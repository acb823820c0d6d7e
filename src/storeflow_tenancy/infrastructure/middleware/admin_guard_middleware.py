"""Admin region guard middleware.

Runs after authentication has placed the principal on ``request.state.user``
and after TenantContextMiddleware has resolved the tenant.
"""

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ...core.exceptions import AdminAuthRequiredError
from ...features.tenants.services import AdminRegionGuard, Reject
from .tenant_middleware import error_response, path_has_prefix

logger = logging.getLogger(__name__)


class AdminRegionGuardMiddleware(BaseHTTPMiddleware):
    """Rejects admin requests whose principal region differs from the tenant's."""

    def __init__(
        self,
        app,
        guard: AdminRegionGuard,
        admin_prefix: str = "/admin",
        require_principal: bool = False,
    ):
        super().__init__(app)
        self.guard = guard
        self.admin_prefix = admin_prefix
        self.require_principal = require_principal

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if not path_has_prefix(path, self.admin_prefix):
            return await call_next(request)

        principal = getattr(request.state, "user", None)
        if principal is None:
            if self.require_principal:
                return error_response(AdminAuthRequiredError())
            return await call_next(request)

        decision = self.guard.guard(
            principal,
            getattr(request.state, "tenant_context", None),
            path,
            getattr(request.state, "tenant_source", None),
        )
        if isinstance(decision, Reject):
            return error_response(decision.error)

        request.state.tenant_context = decision.context
        request.state.tenant_source = decision.source
        return await call_next(request)

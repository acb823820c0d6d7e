"""FastAPI dependency helpers for tenant-scoped route handlers.

Everything here reads what the middleware stack left on ``request.state``;
nothing performs a lookup of its own.
"""

from typing import Any, Optional

from fastapi import Depends, Request

from ...core.exceptions import AdminAuthRequiredError, MissingTenantContextError
from ...features.tenants.entities import TenantContext, TenantSource
from ...features.tenants.services import AdminRegionGuard, Reject


# Basic Context Dependencies

def get_tenant_context(request: Request) -> Optional[TenantContext]:
    """Get tenant context from middleware."""
    return getattr(request.state, "tenant_context", None)


def get_tenant_source(request: Request) -> Optional[TenantSource]:
    """Get how the tenant was resolved."""
    return getattr(request.state, "tenant_source", None)


def get_region_id(request: Request) -> Optional[str]:
    context = get_tenant_context(request)
    return context.region_id if context and context.region_id else None


def get_tenant_id(request: Request) -> Optional[str]:
    context = get_tenant_context(request)
    return context.tenant_id if context and context.tenant_id else None


def get_principal(request: Request) -> Optional[Any]:
    """Get the admin principal set by the authentication layer."""
    return getattr(request.state, "user", None)


# Required Context Dependencies

def require_tenant_context(request: Request) -> TenantContext:
    """Require tenant context, raise 400 if not available."""
    context = get_tenant_context(request)
    if context is None:
        raise MissingTenantContextError()
    return context


def require_admin_auth(request: Request) -> Any:
    """Require an authenticated admin principal, raise 401 if missing."""
    principal = get_principal(request)
    if principal is None:
        raise AdminAuthRequiredError()
    return principal


def get_admin_region_guard(request: Request) -> AdminRegionGuard:
    """Guard installed on the application, or a fresh one."""
    guard = getattr(request.app.state, "admin_region_guard", None)
    return guard if guard is not None else AdminRegionGuard()


def require_admin_region(
    request: Request,
    principal: Any = Depends(require_admin_auth),
    guard: AdminRegionGuard = Depends(get_admin_region_guard),
) -> Optional[TenantContext]:
    """Route-level admin region check.

    Usage:
        @router.get("/admin/products")
        async def list_products(context = Depends(require_admin_region)):
            ...

    Returns the context the handler should scope to, which may be
    synthesized from the principal's region.
    """
    decision = guard.guard(
        principal,
        get_tenant_context(request),
        request.url.path,
        get_tenant_source(request),
    )
    if isinstance(decision, Reject):
        raise decision.error

    request.state.tenant_context = decision.context
    request.state.tenant_source = decision.source
    return decision.context

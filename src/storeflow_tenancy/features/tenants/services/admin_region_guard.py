"""Region guard for administrative callers.

An admin principal may carry a scoping key (``regionId`` in its metadata).
The guard checks that key against whatever tenant context the request
already resolved and rejects any mismatch before a handler runs.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from ....config.logging_config import get_audit_logger
from ....core.exceptions import CrossTenantAccessError
from ..entities import TenantContext, TenantSource, TenantStatus
from ..entities.principal import get_principal_id, get_principal_region

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Continue:
    """Let the request through, scoped to ``context`` when it is set."""

    context: Optional[TenantContext]
    source: Optional[TenantSource]


@dataclass(frozen=True)
class Reject:
    error: CrossTenantAccessError


GuardDecision = Union[Continue, Reject]


class AdminRegionGuard:
    """Cross-validates an admin principal's region against the tenant context."""

    def __init__(self):
        self._audit = get_audit_logger()

    def get_principal_region(self, principal: Any) -> Optional[str]:
        return get_principal_region(principal)

    def can_access_region(self, principal: Any, region_id: Optional[str]) -> bool:
        """Whether the principal may act on ``region_id``.

        A principal without an assigned region is not restricted here.
        """
        principal_region = get_principal_region(principal)
        if not principal_region:
            return True
        return principal_region == region_id

    def guard(
        self,
        principal: Any,
        existing_context: Optional[TenantContext],
        path: str = "",
        existing_source: Optional[TenantSource] = None,
    ) -> GuardDecision:
        """Decide whether an admin request may continue.

        Args:
            principal: Authenticated admin principal
            existing_context: Context resolved earlier in the request, if any
            path: Request path, for audit logging
            existing_source: How ``existing_context`` was resolved

        Returns:
            Continue with the context to use, or Reject with the error to raise
        """
        principal_id = get_principal_id(principal)
        principal_region = get_principal_region(principal)

        if not principal_region:
            logger.warning(f"Admin principal {principal_id} has no region assigned; continuing unscoped")
            return Continue(context=existing_context, source=existing_source)

        if existing_context is None:
            logger.debug(f"Scoping admin principal {principal_id} to region {principal_region}")
            context = TenantContext(
                tenant_id="",
                region_id=principal_region,
                status=TenantStatus.ACTIVE,
            )
            return Continue(context=context, source=TenantSource.ADMIN_PRINCIPAL)

        if existing_context.region_id != principal_region:
            self._audit.error(
                f"Cross-tenant access blocked: principal={principal_id} "
                f"principal_region={principal_region} "
                f"tenant_region={existing_context.region_id} path={path}"
            )
            return Reject(
                error=CrossTenantAccessError(
                    details={
                        "principal_id": principal_id,
                        "principal_region": principal_region,
                        "tenant_region": existing_context.region_id,
                        "path": path,
                    }
                )
            )

        return Continue(context=existing_context, source=existing_source)

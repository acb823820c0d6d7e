"""Region scoping helpers for downstream query builders.

Handlers use these to make sure every query they send to the commerce
backend is restricted to the tenant's region.
"""

from typing import Any, Dict, Iterable, Mapping, MutableMapping, Optional, Sequence

from ....core.exceptions import InvalidRegionError
from ..entities import TenantContext, TenantStatus


def get_region_filter(
    context: Optional[TenantContext],
    throw_if_missing: bool = False,
    allowed_regions: Optional[Sequence[str]] = None,
) -> Dict[str, str]:
    """Build the ``region_id`` filter for a query.

    Raises:
        InvalidRegionError: if the context is missing and throw_if_missing is set,
            or the region is not in allowed_regions
    """
    region_id = context.region_id if context else None

    if not region_id:
        if throw_if_missing:
            raise InvalidRegionError("missing")
        return {}

    if allowed_regions is not None and region_id not in allowed_regions:
        raise InvalidRegionError(region_id)

    return {"region_id": region_id}


def scope_to_region(context: Optional[TenantContext], filters: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Force the tenant's region onto a filter mapping, in place."""
    if context and context.region_id:
        filters["region_id"] = context.region_id
    return filters


def validate_region_access(
    context: Optional[TenantContext],
    region_id: str,
    throw_on_mismatch: bool = False,
) -> bool:
    """Check a region against the request's tenant; no context means no restriction."""
    if not context or not context.region_id:
        return True

    is_valid = context.region_id == region_id
    if not is_valid and throw_on_mismatch:
        raise InvalidRegionError(region_id)
    return is_valid


def has_tenant_context(context: Optional[TenantContext]) -> bool:
    """True when the context exists, carries a region and is active."""
    return bool(context and context.region_id and context.status == TenantStatus.ACTIVE)


def get_safe_region_id(context: Optional[TenantContext]) -> Optional[str]:
    if not has_tenant_context(context):
        return None
    return context.region_id


def build_region_query_params(context: Optional[TenantContext]) -> Dict[str, str]:
    region_id = get_safe_region_id(context)
    if not region_id:
        return {}
    return {"region_id": region_id}


def validate_entities_region(
    context: Optional[TenantContext],
    entities: Iterable[Any],
    throw_on_mismatch: bool = False,
) -> bool:
    """Check that every entity with a region belongs to the tenant's region.

    Entities may be mappings or objects exposing ``region_id``; entities
    without a region are accepted.
    """
    if not context or not context.region_id:
        return True

    def _region_of(entity: Any) -> Optional[str]:
        if isinstance(entity, Mapping):
            return entity.get("region_id")
        return getattr(entity, "region_id", None)

    all_valid = all(
        not _region_of(entity) or _region_of(entity) == context.region_id
        for entity in entities
    )

    if not all_valid and throw_on_mismatch:
        raise InvalidRegionError("Entity region mismatch")
    return all_valid

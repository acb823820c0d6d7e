"""Admin principal as handed over by the authentication layer."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

# Metadata keys holding a principal's region, in lookup order
REGION_METADATA_KEYS = ("regionId", "region_id")


@dataclass(frozen=True)
class AdminPrincipal:
    """Authenticated administrative actor."""

    id: str
    metadata: Dict[str, Any] = field(default_factory=dict)


def get_principal_region(principal: Any) -> Optional[str]:
    """Read the scoping key assigned to a principal.

    Accepts any object with a ``metadata`` attribute, or a mapping with a
    ``metadata`` key, so principals from other authentication layers work
    unchanged.
    """
    if principal is None:
        return None

    if isinstance(principal, Mapping):
        metadata = principal.get("metadata")
    else:
        metadata = getattr(principal, "metadata", None)

    if not isinstance(metadata, Mapping):
        return None

    for key in REGION_METADATA_KEYS:
        value = metadata.get(key)
        if value:
            return str(value)
    return None


def get_principal_id(principal: Any) -> Optional[str]:
    if principal is None:
        return None
    if isinstance(principal, Mapping):
        value = principal.get("id")
    else:
        value = getattr(principal, "id", None)
    return str(value) if value is not None else None

"""Tenant domain entities.

TenantRecord is the authoritative row from the tenant directory.
TenantContext is the read-only projection attached to a request, and
CachedTenant is the serializable subset kept in the tenant cache.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class TenantStatus(str, Enum):
    """Tenant lifecycle status."""
    PROVISIONING = "provisioning"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    ERROR = "error"
    DELETED = "deleted"


class TenantSource(str, Enum):
    """How the tenant for a request was identified."""
    API_KEY = "api_key"
    HEADER_OVERRIDE = "header_override"
    SUBDOMAIN = "subdomain"
    CUSTOM_DOMAIN = "custom_domain"
    ADMIN_PRINCIPAL = "admin_principal"
    UNKNOWN = "unknown"


@dataclass
class TenantRecord:
    """Tenant row as stored in the directory.

    Created by provisioning and mutated only through status transitions;
    deletion moves the status to DELETED.
    """

    id: str
    region_id: str
    status: TenantStatus
    subdomain: Optional[str] = None
    custom_domain: Optional[str] = None
    business_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        """Check if tenant is active."""
        return self.status == TenantStatus.ACTIVE

    @property
    def is_suspended(self) -> bool:
        """Check if tenant is suspended."""
        return self.status == TenantStatus.SUSPENDED


@dataclass(frozen=True)
class TenantContext:
    """Request-scoped, read-only view of a resolved tenant."""

    tenant_id: str
    region_id: str
    status: TenantStatus
    subdomain: Optional[str] = None
    custom_domain: Optional[str] = None
    business_name: Optional[str] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata or {})))

    @classmethod
    def from_record(cls, record: TenantRecord, custom_domain: Optional[str] = None) -> "TenantContext":
        """Project a directory record into a context.

        Args:
            record: Tenant record from the directory
            custom_domain: Domain the request arrived on, when it was a custom domain
        """
        return cls(
            tenant_id=record.id,
            region_id=record.region_id,
            status=record.status,
            subdomain=record.subdomain,
            custom_domain=custom_domain or record.custom_domain,
            business_name=record.business_name,
            metadata=record.metadata,
        )

    @property
    def is_active(self) -> bool:
        return self.status == TenantStatus.ACTIVE

    def core_fields(self) -> Dict[str, Any]:
        """Every field except metadata, in a JSON-friendly form."""
        return {
            "tenant_id": self.tenant_id,
            "region_id": self.region_id,
            "subdomain": self.subdomain,
            "custom_domain": self.custom_domain,
            "business_name": self.business_name,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class CachedTenant:
    """Time-stamped TenantContext without metadata, as stored in the cache."""

    tenant_id: str
    region_id: str
    status: TenantStatus
    cached_at: int
    subdomain: Optional[str] = None
    custom_domain: Optional[str] = None
    business_name: Optional[str] = None

    @classmethod
    def from_context(cls, context: TenantContext, cached_at: Optional[int] = None) -> "CachedTenant":
        """Build a cache entry from a context; metadata is dropped."""
        return cls(
            tenant_id=context.tenant_id,
            region_id=context.region_id,
            status=context.status,
            cached_at=cached_at if cached_at is not None else int(time.time() * 1000),
            subdomain=context.subdomain,
            custom_domain=context.custom_domain,
            business_name=context.business_name,
        )

    def to_context(self) -> TenantContext:
        """Rebuild a context from a cache entry; metadata comes back empty."""
        return TenantContext(
            tenant_id=self.tenant_id,
            region_id=self.region_id,
            status=self.status,
            subdomain=self.subdomain,
            custom_domain=self.custom_domain,
            business_name=self.business_name,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tenantId": self.tenant_id,
            "regionId": self.region_id,
            "subdomain": self.subdomain,
            "customDomain": self.custom_domain,
            "businessName": self.business_name,
            "status": self.status.value,
            "cachedAt": self.cached_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CachedTenant":
        """Parse a cache payload.

        Raises:
            KeyError, ValueError, TypeError: if the payload is malformed
        """
        tenant_id = data["tenantId"]
        region_id = data["regionId"]
        if tenant_id is None or region_id is None:
            raise ValueError("Cache entry has no tenant or region id")

        return cls(
            tenant_id=str(tenant_id),
            region_id=str(region_id),
            status=TenantStatus(data["status"]),
            cached_at=int(data["cachedAt"]),
            subdomain=data.get("subdomain"),
            custom_domain=data.get("customDomain"),
            business_name=data.get("businessName"),
        )

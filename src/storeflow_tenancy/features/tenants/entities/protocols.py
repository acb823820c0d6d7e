"""Protocol interfaces for tenant lookups and caching.

Resolver collaborators are injected through these protocols so the
PostgreSQL and Redis implementations can be swapped in tests.
"""

from abc import abstractmethod
from typing import Optional, Protocol, runtime_checkable

from .tenant import CachedTenant, TenantContext, TenantRecord


@runtime_checkable
class TenantDirectory(Protocol):
    """Authoritative tenant lookups.

    Implementations return None when nothing matches and raise
    DirectoryUnavailableError when the store cannot answer.
    """

    @abstractmethod
    async def lookup_by_subdomain(self, subdomain: str) -> Optional[TenantRecord]:
        """Find tenant by subdomain."""
        ...

    @abstractmethod
    async def lookup_by_domain(self, domain: str) -> Optional[TenantRecord]:
        """Find tenant owning an active custom domain."""
        ...

    @abstractmethod
    async def lookup_by_api_key_hash(self, key_hash: str) -> Optional[TenantRecord]:
        """Find tenant by active API key hash."""
        ...

    @abstractmethod
    async def record_api_key_usage(self, key_hash: str) -> bool:
        """Record a use of an API key. Best effort; never raises."""
        ...


@runtime_checkable
class TenantCacheProtocol(Protocol):
    """Protocol for the advisory tenant cache."""

    @abstractmethod
    def cache_key(self, method: str, value: str) -> str:
        """Logical key for a lookup method and value."""
        ...

    @abstractmethod
    async def get(self, key: str) -> Optional[CachedTenant]:
        """Get cached tenant; failures are a miss."""
        ...

    @abstractmethod
    async def put(self, key: str, context: TenantContext, ttl_seconds: Optional[int] = None) -> None:
        """Cache tenant; failures are logged and dropped."""
        ...

    @abstractmethod
    async def invalidate(self, *keys: str) -> int:
        """Remove cache entries."""
        ...

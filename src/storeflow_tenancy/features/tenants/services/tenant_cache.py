"""Cache-aside store for resolved tenants.

Entries are keyed by lookup method and value, e.g. ``tenant:subdomain:johns-store``.
The cache is advisory: a failed read is a miss and a failed write is dropped,
so Redis being down never blocks resolution.
"""

import json
import logging
from typing import Optional

from ....cache import CacheManager
from ....core.exceptions import CacheUnavailableError
from ..entities.tenant import CachedTenant, TenantContext

logger = logging.getLogger(__name__)


class TenantCache:
    """Tenant cache over Redis."""

    def __init__(self, cache_manager: CacheManager, ttl: int = 300, prefix: str = "tenant"):
        """
        Initialize tenant cache.

        Args:
            cache_manager: Redis connection owner
            ttl: Default time-to-live for entries in seconds
            prefix: Namespace prepended to every key
        """
        self._cache = cache_manager
        self._ttl = ttl
        self._prefix = prefix

    @property
    def ttl(self) -> int:
        return self._ttl

    def cache_key(self, method: str, value: str) -> str:
        """Logical key for a lookup method and value."""
        return f"{method}:{value}"

    def _make_key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    async def connect(self) -> None:
        await self._cache.connect()

    async def disconnect(self) -> None:
        await self._cache.disconnect()

    async def get(self, key: str) -> Optional[CachedTenant]:
        """Get cached tenant, or None on miss or any read failure."""
        full_key = self._make_key(key)
        try:
            raw = await self._cache.get(full_key)
        except CacheUnavailableError as e:
            logger.warning(f"Tenant cache read failed for {full_key}: {e.details}")
            return None

        if raw is None:
            return None

        try:
            return CachedTenant.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Discarding malformed tenant cache entry {full_key}: {e}")
            return None

    async def put(self, key: str, context: TenantContext, ttl_seconds: Optional[int] = None) -> None:
        """Cache a tenant context. Failures are logged and dropped."""
        full_key = self._make_key(key)
        entry = CachedTenant.from_context(context)
        try:
            await self._cache.setex(full_key, ttl_seconds or self._ttl, json.dumps(entry.to_dict()))
        except CacheUnavailableError as e:
            logger.warning(f"Tenant cache write failed for {full_key}: {e.details}")

    async def invalidate(self, *keys: str) -> int:
        """Remove entries by logical key."""
        if not keys:
            return 0
        full_keys = [self._make_key(key) for key in keys]
        try:
            deleted = await self._cache.delete(*full_keys)
        except CacheUnavailableError as e:
            logger.warning(f"Tenant cache invalidation failed for {full_keys}: {e.details}")
            return 0
        logger.debug(f"Invalidated {deleted} tenant cache entries")
        return deleted

    async def invalidate_tenant(self, subdomain: Optional[str] = None, domain: Optional[str] = None) -> int:
        """Drop the entries a tenant mutation makes stale."""
        keys = []
        if subdomain:
            keys.append(self.cache_key("subdomain", subdomain.lower()))
        if domain:
            keys.append(self.cache_key("domain", domain.lower()))
        return await self.invalidate(*keys)

    async def health_check(self) -> bool:
        return await self._cache.health_check()

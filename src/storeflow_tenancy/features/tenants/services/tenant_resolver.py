"""Tenant resolution for inbound requests.

Strategies are tried in strict order and the first one that applies decides
the outcome:

1. API key (hashed, always read from the directory)
2. ``x-tenant-subdomain`` override header
3. Subdomain of the base domain
4. Custom domain

A found tenant is checked against its lifecycle status on every request,
whether it came from the cache or the directory.
"""

import asyncio
import hashlib
import logging
from typing import Optional

from ....core.exceptions import BackendUnavailableError
from ..entities import (
    Failed,
    FailureKind,
    RequestSignals,
    Resolved,
    ResolutionResult,
    Suspended,
    TenantCacheProtocol,
    TenantContext,
    TenantDirectory,
    TenantSource,
    TenantStatus,
)
from ..utils.hostname import extract_subdomain, is_custom_domain, normalize_hostname

logger = logging.getLogger(__name__)

SUBDOMAIN_METHOD = "subdomain"
DOMAIN_METHOD = "domain"


def hash_api_key(api_key: str) -> str:
    """SHA-256 hex digest of a raw API key, as stored in the directory."""
    return hashlib.sha256(api_key.encode("utf-8")).hexdigest()


class TenantResolver:
    """Maps request signals to a tenant resolution result."""

    def __init__(
        self,
        directory: TenantDirectory,
        cache: TenantCacheProtocol,
        base_domain: str,
        directory_timeout: float = 5.0,
        allow_override: bool = True,
        cache_ttl: Optional[int] = None,
    ):
        """
        Initialize the resolver.

        Args:
            directory: Authoritative tenant lookups
            cache: Advisory cache for host-based lookups
            base_domain: Platform domain that tenant subdomains hang off
            directory_timeout: Seconds allowed for one directory call
            allow_override: Honor the subdomain override header
            cache_ttl: TTL for new cache entries, cache default when None
        """
        self.directory = directory
        self.cache = cache
        self.base_domain = base_domain.strip().lower().rstrip(".")
        self.directory_timeout = directory_timeout
        self.allow_override = allow_override
        self.cache_ttl = cache_ttl

    async def resolve(self, signals: RequestSignals) -> ResolutionResult:
        """Resolve the tenant for a request."""
        if signals.api_key:
            return await self._resolve_api_key(signals.api_key)

        override = (signals.override_subdomain or "").strip().lower()
        if override and self.allow_override:
            return await self._resolve_cached(SUBDOMAIN_METHOD, override, TenantSource.HEADER_OVERRIDE)

        hostname = normalize_hostname(signals.hostname)

        subdomain = extract_subdomain(hostname, self.base_domain)
        if subdomain:
            return await self._resolve_cached(SUBDOMAIN_METHOD, subdomain, TenantSource.SUBDOMAIN)

        if is_custom_domain(hostname, self.base_domain):
            return await self._resolve_cached(DOMAIN_METHOD, hostname, TenantSource.CUSTOM_DOMAIN)

        logger.debug(f"No tenant signals for host '{hostname}'")
        return Failed(
            reason="No tenant identifier in request",
            source=TenantSource.UNKNOWN,
            kind=FailureKind.NO_SIGNALS,
        )

    async def _resolve_api_key(self, api_key: str) -> ResolutionResult:
        source = TenantSource.API_KEY
        key_hash = hash_api_key(api_key)
        try:
            record = await self._call_directory(self.directory.lookup_by_api_key_hash(key_hash))
        except BackendUnavailableError as e:
            return self._backend_failure(source, e)

        if record is None:
            logger.info("Rejected request with unknown or inactive API key")
            return Failed(reason="Invalid API key", source=source, kind=FailureKind.INVALID_API_KEY)

        # Recorded for every matched key, whatever the tenant's status
        await self._record_api_key_usage(key_hash)
        return self._validate(TenantContext.from_record(record), source)

    async def _resolve_cached(self, method: str, value: str, source: TenantSource) -> ResolutionResult:
        key = self.cache.cache_key(method, value)

        cached = await self.cache.get(key)
        if cached is not None:
            logger.debug(f"Tenant cache hit for {key}")
            return self._validate(cached.to_context(), source)

        logger.debug(f"Tenant cache miss for {key}")
        try:
            if method == DOMAIN_METHOD:
                record = await self._call_directory(self.directory.lookup_by_domain(value))
            else:
                record = await self._call_directory(self.directory.lookup_by_subdomain(value))
        except BackendUnavailableError as e:
            return self._backend_failure(source, e)

        if record is None:
            logger.info(f"No tenant found for {method} '{value}'")
            return Failed(reason=f"Tenant not found for {method} '{value}'", source=source)

        custom_domain = value if method == DOMAIN_METHOD else None
        context = TenantContext.from_record(record, custom_domain=custom_domain)
        await self.cache.put(key, context, self.cache_ttl)
        return self._validate(context, source)

    async def _record_api_key_usage(self, key_hash: str) -> None:
        try:
            await asyncio.wait_for(self.directory.record_api_key_usage(key_hash), timeout=self.directory_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"API key usage update timed out after {self.directory_timeout}s")

    async def _call_directory(self, lookup):
        try:
            return await asyncio.wait_for(lookup, timeout=self.directory_timeout)
        except asyncio.TimeoutError as e:
            raise BackendUnavailableError(details={"reason": "directory timeout"}) from e

    def _validate(self, context: TenantContext, source: TenantSource) -> ResolutionResult:
        if context.status == TenantStatus.ACTIVE:
            return Resolved(context=context, source=source)

        if context.status == TenantStatus.SUSPENDED:
            logger.warning(f"Request for suspended tenant {context.tenant_id} via {source.value}")
            return Suspended(tenant_id=context.tenant_id, source=source)

        logger.warning(
            f"Tenant {context.tenant_id} is not active (status: {context.status.value}) via {source.value}"
        )
        return Failed(
            reason=f"Tenant is not active (status: {context.status.value})",
            source=source,
            kind=FailureKind.INVALID_STATUS,
        )

    @staticmethod
    def _backend_failure(source: TenantSource, error: BackendUnavailableError) -> Failed:
        logger.error(f"Tenant directory unavailable during {source.value} resolution: {error.details}")
        return Failed(
            reason="Tenant directory unavailable",
            source=source,
            kind=FailureKind.BACKEND_UNAVAILABLE,
        )

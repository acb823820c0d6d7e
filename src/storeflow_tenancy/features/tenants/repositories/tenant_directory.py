"""Tenant directory backed by PostgreSQL.

Three read paths (subdomain, custom domain, API key hash) plus the
best-effort API key usage update. Every query is bounded by a timeout, and
any database failure is raised as DirectoryUnavailableError so it is never
mistaken for a missing tenant.
"""

import asyncio
import json
import logging
from typing import Any, Mapping, Optional

import asyncpg

from ....core.exceptions import DirectoryUnavailableError
from ....database import DatabaseManager
from ..entities.tenant import TenantRecord, TenantStatus


logger = logging.getLogger(__name__)


class PostgresTenantDirectory:
    """Directory lookups over the tenants, domains and api_keys tables."""

    def __init__(self, database: DatabaseManager, schema: str = "public", timeout: float = 5.0):
        """Initialize with a database manager.

        Args:
            database: Owner of the asyncpg pool
            schema: Schema holding the directory tables
            timeout: Seconds allowed for each query
        """
        self._db = database
        self._schema = schema
        self._timeout = timeout
        self._tenants = f"{schema}.tenants"
        self._domains = f"{schema}.domains"
        self._api_keys = f"{schema}.api_keys"

    def _tenant_select(self, where: str) -> str:
        return f"""
            SELECT
                t.id, t.business_name, t.subdomain, t.medusa_region_id, t.status, t.metadata,
                (
                    SELECT d.domain FROM {self._domains} d
                    WHERE d.tenant_id = t.id AND d.status = 'active'
                    ORDER BY d.domain
                    LIMIT 1
                ) AS custom_domain
            FROM {self._tenants} t
            WHERE {where}
        """

    async def _fetchrow(self, operation: str, query: str, *args) -> Optional[Mapping[str, Any]]:
        try:
            return await asyncio.wait_for(
                self._db.fetchrow(query, *args, timeout=self._timeout),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Tenant directory {operation} timed out after {self._timeout}s")
            raise DirectoryUnavailableError(details={"operation": operation, "reason": "timeout"}) from e
        except (asyncpg.PostgresError, OSError) as e:
            logger.error(f"Tenant directory {operation} failed: {e}")
            raise DirectoryUnavailableError(details={"operation": operation, "reason": str(e)}) from e

    async def lookup_by_subdomain(self, subdomain: str) -> Optional[TenantRecord]:
        """Find tenant by subdomain."""
        row = await self._fetchrow(
            "lookup_by_subdomain",
            self._tenant_select("t.subdomain = $1"),
            subdomain,
        )
        if row is None:
            logger.debug(f"No tenant for subdomain {subdomain}")
            return None
        return self._map_row_to_record(row)

    async def lookup_by_domain(self, domain: str) -> Optional[TenantRecord]:
        """Find tenant owning an active custom domain.

        The domains table is consulted first; the tenant row is only fetched
        when the domain is active.
        """
        domain_row = await self._fetchrow(
            "lookup_domain",
            f"SELECT tenant_id, status FROM {self._domains} WHERE domain = $1 AND status = 'active'",
            domain,
        )
        if domain_row is None:
            logger.debug(f"Domain {domain} not found or not active")
            return None

        row = await self._fetchrow(
            "lookup_by_domain",
            self._tenant_select("t.id = $1"),
            domain_row["tenant_id"],
        )
        if row is None:
            logger.warning(f"Domain {domain} points at missing tenant {domain_row['tenant_id']}")
            return None

        record = self._map_row_to_record(row)
        if record is not None:
            record.custom_domain = domain
        return record

    async def lookup_by_api_key_hash(self, key_hash: str) -> Optional[TenantRecord]:
        """Find tenant by active API key hash.

        Usage is recorded separately through record_api_key_usage.
        """
        key_row = await self._fetchrow(
            "lookup_api_key",
            f"SELECT tenant_id FROM {self._api_keys} WHERE key_hash = $1 AND is_active = true",
            key_hash,
        )
        if key_row is None:
            return None

        row = await self._fetchrow(
            "lookup_by_api_key",
            self._tenant_select("t.id = $1"),
            key_row["tenant_id"],
        )
        if row is None:
            logger.warning(f"API key points at missing tenant {key_row['tenant_id']}")
            return None

        return self._map_row_to_record(row)

    async def record_api_key_usage(self, key_hash: str) -> bool:
        """Bump last_used_at and usage_count for a key. Never raises."""
        query = f"""
            UPDATE {self._api_keys}
            SET last_used_at = now(), usage_count = COALESCE(usage_count, 0) + 1
            WHERE key_hash = $1
        """
        try:
            await asyncio.wait_for(
                self._db.execute(query, key_hash, timeout=self._timeout),
                timeout=self._timeout,
            )
            return True
        except Exception as e:
            logger.warning(f"Failed to record API key usage: {e}")
            return False

    def _map_row_to_record(self, row: Mapping[str, Any]) -> Optional[TenantRecord]:
        """Map database row to TenantRecord.

        Rows without a region cannot be scoped and are treated as missing.
        Unknown status values map to ERROR.
        """
        if not row.get("medusa_region_id"):
            logger.error(f"Tenant {row['id']} has no region assigned")
            return None

        try:
            status = TenantStatus(row["status"])
        except ValueError:
            logger.warning(f"Tenant {row['id']} has unknown status '{row['status']}'")
            status = TenantStatus.ERROR

        metadata = row.get("metadata") or {}
        if isinstance(metadata, str):
            metadata = json.loads(metadata)

        return TenantRecord(
            id=str(row["id"]),
            region_id=str(row["medusa_region_id"]),
            status=status,
            subdomain=row.get("subdomain"),
            custom_domain=row.get("custom_domain"),
            business_name=row.get("business_name"),
            metadata=dict(metadata),
        )

"""Pytest configuration and fixtures for storeflow-tenancy tests."""

import pytest
from unittest.mock import AsyncMock

from storeflow_tenancy.cache import CacheManager
from storeflow_tenancy.config import TenancySettings
from storeflow_tenancy.features.tenants.entities import TenantRecord, TenantStatus
from storeflow_tenancy.features.tenants.services import TenantCache, TenantResolver


class FakeRedis:
    """In-memory stand-in for redis.asyncio.Redis covering the calls CacheManager makes."""

    def __init__(self):
        self.store = {}
        self.ttls = {}

    async def get(self, key):
        return self.store.get(key)

    async def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    async def delete(self, *keys):
        deleted = 0
        for key in keys:
            if key in self.store:
                del self.store[key]
                self.ttls.pop(key, None)
                deleted += 1
        return deleted

    async def ping(self):
        return True

    async def aclose(self):
        return None


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def cache_manager(fake_redis):
    return CacheManager("redis://localhost:6379/0", timeout=1.0, redis_client=fake_redis)


@pytest.fixture
def tenant_cache(cache_manager):
    return TenantCache(cache_manager, ttl=300, prefix="tenant")


@pytest.fixture
def active_tenant():
    """Sample active tenant record."""
    return TenantRecord(
        id="tenant_1",
        region_id="reg_42",
        status=TenantStatus.ACTIVE,
        subdomain="johns-store",
        business_name="John's Store",
        metadata={"plan": "pro"},
    )


@pytest.fixture
def suspended_tenant():
    """Sample suspended tenant record."""
    return TenantRecord(
        id="tenant_2",
        region_id="reg_7",
        status=TenantStatus.SUSPENDED,
        subdomain="closed-shop",
        business_name="Closed Shop",
    )


@pytest.fixture
def mock_directory():
    """Create mock tenant directory; every lookup misses by default."""
    directory = AsyncMock()
    directory.lookup_by_subdomain.return_value = None
    directory.lookup_by_domain.return_value = None
    directory.lookup_by_api_key_hash.return_value = None
    directory.record_api_key_usage.return_value = True
    return directory


@pytest.fixture
def resolver(mock_directory, tenant_cache):
    return TenantResolver(
        directory=mock_directory,
        cache=tenant_cache,
        base_domain="azima.store",
        directory_timeout=1.0,
    )


@pytest.fixture
def settings():
    return TenancySettings(_env_file=None, base_domain="azima.store", environment="development")

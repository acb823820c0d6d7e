"""
Redis cache client for the tenant cache.

Owns the Redis connection and bounds every call with a timeout. Errors are
raised as CacheUnavailableError; deciding whether they are fatal is left to
the caller.
"""
import asyncio
import logging
from typing import Optional

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

from ..core.exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)


class CacheManager:
    """Manages the Redis connection used for tenant caching."""

    def __init__(
        self,
        redis_url: str,
        timeout: float = 1.0,
        pool_size: int = 10,
        redis_client: Optional[Redis] = None,
    ):
        self.redis_url = redis_url
        self.timeout = timeout
        self.pool_size = pool_size
        self.pool: Optional[ConnectionPool] = None
        self.redis_client: Optional[Redis] = redis_client

    async def connect(self) -> Redis:
        """Create the Redis connection pool if it does not exist yet."""
        if self.redis_client is None:
            logger.info("Creating Redis connection pool...")
            self.pool = ConnectionPool.from_url(
                self.redis_url,
                max_connections=self.pool_size,
                decode_responses=True,
                health_check_interval=30,
            )
            self.redis_client = Redis(connection_pool=self.pool)
        return self.redis_client

    async def disconnect(self) -> None:
        """Close Redis connection."""
        if self.redis_client:
            try:
                await self.redis_client.aclose()
            except RedisError as e:
                logger.error(f"Error closing Redis connection: {e}")
            finally:
                self.redis_client = None
            if self.pool:
                await self.pool.disconnect()
                self.pool = None
            logger.info("Redis connection closed")

    async def _call(self, operation: str, key: str, coro_factory):
        client = await self.connect()
        try:
            return await asyncio.wait_for(coro_factory(client), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise CacheUnavailableError(details={"operation": operation, "key": key, "reason": "timeout"}) from e
        except (RedisError, OSError) as e:
            raise CacheUnavailableError(details={"operation": operation, "key": key, "reason": str(e)}) from e
        except UnicodeDecodeError as e:
            raise CacheUnavailableError(details={"operation": operation, "key": key, "reason": "undecodable value"}) from e

    async def get(self, key: str) -> Optional[str]:
        """Get raw value by key."""
        return await self._call("get", key, lambda client: client.get(key))

    async def setex(self, key: str, ttl: int, value: str) -> None:
        """Set raw value with a TTL in seconds."""
        await self._call("setex", key, lambda client: client.setex(key, ttl, value))

    async def delete(self, *keys: str) -> int:
        """Delete keys and return how many existed."""
        if not keys:
            return 0
        return await self._call("delete", ",".join(keys), lambda client: client.delete(*keys))

    async def health_check(self) -> bool:
        """Check Redis health."""
        try:
            return bool(await self._call("ping", "", lambda client: client.ping()))
        except CacheUnavailableError as e:
            logger.error(f"Redis health check failed: {e.details}")
            return False

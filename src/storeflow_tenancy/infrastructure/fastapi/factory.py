"""Application wiring for tenant resolution.

``TenancyServices`` owns every long-lived handle (asyncpg pool, Redis client,
directory, cache, resolver, admin guard). It is built explicitly and attached
to one application by ``install_tenancy``; nothing here is a module-level
singleton.
"""

import logging
from contextlib import asynccontextmanager
from typing import Dict, Optional

from fastapi import FastAPI

from ...cache import CacheManager
from ...config import TenancySettings, get_settings
from ...database import DatabaseManager
from ...features.tenants.entities import TenantCacheProtocol, TenantDirectory
from ...features.tenants.repositories import PostgresTenantDirectory
from ...features.tenants.services import AdminRegionGuard, TenantCache, TenantResolver
from ..middleware import (
    AdminRegionGuardMiddleware,
    TenantContextMiddleware,
    register_exception_handlers,
)

logger = logging.getLogger(__name__)


class TenancyServices:
    """Container for the tenant resolution stack."""

    def __init__(
        self,
        settings: TenancySettings,
        directory: TenantDirectory,
        cache: TenantCacheProtocol,
        database: Optional[DatabaseManager] = None,
        cache_manager: Optional[CacheManager] = None,
        guard: Optional[AdminRegionGuard] = None,
    ):
        self.settings = settings
        self.database = database
        self.cache_manager = cache_manager
        self.directory = directory
        self.cache = cache
        self.guard = guard or AdminRegionGuard()
        self.resolver = TenantResolver(
            directory=directory,
            cache=cache,
            base_domain=settings.base_domain,
            directory_timeout=settings.directory_timeout,
            allow_override=settings.override_header_enabled(),
            cache_ttl=settings.tenant_cache_ttl,
        )

    @classmethod
    def from_settings(cls, settings: Optional[TenancySettings] = None) -> "TenancyServices":
        """Build the PostgreSQL and Redis backed stack from settings."""
        settings = settings or get_settings()

        database = DatabaseManager(
            settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )
        cache_manager = CacheManager(settings.redis_url, timeout=settings.cache_timeout)

        return cls(
            settings=settings,
            directory=PostgresTenantDirectory(
                database,
                schema=settings.directory_schema,
                timeout=settings.directory_timeout,
            ),
            cache=TenantCache(
                cache_manager,
                ttl=settings.tenant_cache_ttl,
                prefix=settings.cache_key_prefix,
            ),
            database=database,
            cache_manager=cache_manager,
        )

    async def startup(self) -> None:
        """Open the database pool and Redis connection."""
        if self.database is not None:
            await self.database.create_pool()
        if self.cache_manager is not None:
            await self.cache_manager.connect()
        logger.info(f"Tenancy services started (base domain: {self.settings.base_domain})")

    async def shutdown(self) -> None:
        """Close connections opened by startup."""
        if self.cache_manager is not None:
            await self.cache_manager.disconnect()
        if self.database is not None:
            await self.database.close_pool()
        logger.info("Tenancy services stopped")

    async def health_check(self) -> Dict[str, bool]:
        """Report backend availability."""
        database_ok = await self.database.health_check() if self.database is not None else False
        cache_ok = await self.cache.health_check() if hasattr(self.cache, "health_check") else False
        return {"database": database_ok, "cache": cache_ok}


def install_tenancy(
    app: FastAPI,
    services: TenancyServices,
    require_admin_principal: bool = False,
    manage_lifespan: bool = True,
) -> FastAPI:
    """Attach tenant resolution to an application.

    Middleware order, outermost first: TenantContextMiddleware, then
    AdminRegionGuardMiddleware. Authentication middleware that sets
    ``request.state.user`` must be added after this call so it runs before
    the guard.

    Args:
        app: FastAPI application instance
        services: Tenancy stack to install
        require_admin_principal: Answer 401 on admin paths without a principal
        manage_lifespan: Run services startup/shutdown in the app lifespan
    """
    settings = services.settings

    app.state.tenancy = services
    app.state.admin_region_guard = services.guard

    register_exception_handlers(app)

    # Starlette runs the last added middleware first
    app.add_middleware(
        AdminRegionGuardMiddleware,
        guard=services.guard,
        admin_prefix=settings.admin_prefix,
        require_principal=require_admin_principal,
    )
    app.add_middleware(
        TenantContextMiddleware,
        resolver=services.resolver,
        api_key_header=settings.api_key_header,
        override_header=settings.override_header,
        exempt_paths=settings.exempt_paths,
        admin_prefix=settings.admin_prefix,
        store_prefix=settings.store_prefix,
    )

    if manage_lifespan:
        app_lifespan = app.router.lifespan_context

        @asynccontextmanager
        async def lifespan(application):
            await services.startup()
            try:
                async with app_lifespan(application) as state:
                    yield state
            finally:
                await services.shutdown()

        app.router.lifespan_context = lifespan

    logger.info("Tenant resolution installed")
    return app

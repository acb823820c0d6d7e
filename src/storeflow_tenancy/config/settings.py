"""
Configuration for the tenant resolution layer.

Values come from environment variables (or a `.env` file) and are matched to
field names case-insensitively, so `BASE_DOMAIN` populates `base_domain`.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TenancySettings(BaseSettings):
    """Settings for tenant resolution, caching and request scoping."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    environment: str = Field(default="development")

    # Hostname resolution
    base_domain: str = Field(default="azima.store")

    # Tenant directory (PostgreSQL)
    database_url: str = Field(default="postgresql://localhost:5432/storeflow")
    directory_schema: str = Field(default="public")
    db_pool_min_size: int = Field(default=2)
    db_pool_max_size: int = Field(default=10)
    directory_timeout: float = Field(default=5.0, gt=0)

    # Tenant cache (Redis)
    redis_url: str = Field(default="redis://localhost:6379/0")
    tenant_cache_ttl: int = Field(default=300, gt=0)  # 5 minutes
    cache_timeout: float = Field(default=1.0, gt=0)
    cache_key_prefix: str = Field(default="tenant")

    # Request signals
    api_key_header: str = Field(default="x-api-key")
    override_header: str = Field(default="x-tenant-subdomain")
    allow_override_header: bool = Field(default=True)

    # Path policy
    exempt_paths: List[str] = Field(default=["/health", "/healthz", "/static", "/_next"])
    admin_prefix: str = Field(default="/admin")
    store_prefix: str = Field(default="/store")

    # Logging
    tenant_debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="simple")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def override_header_enabled(self) -> bool:
        """The override header is a development escape hatch, never honoured in production."""
        return self.allow_override_header and not self.is_production


@lru_cache()
def get_settings(env_file: Optional[str] = ".env") -> TenancySettings:
    """Get cached settings instance."""
    return TenancySettings(_env_file=env_file)

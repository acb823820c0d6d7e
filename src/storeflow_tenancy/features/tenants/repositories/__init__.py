"""Tenant directory implementations."""

from .tenant_directory import PostgresTenantDirectory

__all__ = ["PostgresTenantDirectory"]

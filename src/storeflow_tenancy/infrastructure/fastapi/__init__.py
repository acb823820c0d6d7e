"""FastAPI integration."""

from .factory import TenancyServices, install_tenancy

__all__ = ["TenancyServices", "install_tenancy"]

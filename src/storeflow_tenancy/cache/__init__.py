"""Redis cache access."""

from .client import CacheManager

__all__ = ["CacheManager"]

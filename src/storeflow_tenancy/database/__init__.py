"""Database access for the tenant directory."""

from .connection import DatabaseManager

__all__ = ["DatabaseManager"]

"""Configuration and logging setup."""

from .settings import TenancySettings, get_settings
from .logging_config import (
    AUDIT_LOGGER_NAME,
    LogFormat,
    LoggingConfig,
    get_audit_logger,
    setup_logging,
)

__all__ = [
    "TenancySettings",
    "get_settings",
    "AUDIT_LOGGER_NAME",
    "LogFormat",
    "LoggingConfig",
    "get_audit_logger",
    "setup_logging",
]

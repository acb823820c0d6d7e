"""Centralized logging configuration for storeflow-tenancy.

Provides environment-driven control over log level and format. Cross-tenant
access rejections are written to a dedicated audit logger so they can be
routed separately.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Optional


AUDIT_LOGGER_NAME = "storeflow_tenancy.audit"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that should only log warnings and above
    QUIET_MODULES = [
        "asyncpg",
        "redis",
        "httpx",
        "httpcore",
    ]

    @classmethod
    def build(
        cls,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        tenant_debug: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Build a dictConfig mapping, falling back to environment variables."""
        log_level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
        log_format = (log_format or os.getenv("LOG_FORMAT", LogFormat.SIMPLE.value)).lower()
        if tenant_debug is None:
            tenant_debug = os.getenv("TENANT_DEBUG", "false").lower() == "true"

        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format)]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": log_level,
                "handlers": ["console"],
            },
            "loggers": {
                "storeflow_tenancy": {
                    "level": "DEBUG" if tenant_debug else log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
                # Audit events are never filtered below warning
                AUDIT_LOGGER_NAME: {
                    "level": "WARNING",
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        for module in cls.QUIET_MODULES:
            logging_config["loggers"][module] = {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(
        cls,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        tenant_debug: Optional[bool] = None,
    ) -> None:
        """Apply logging configuration."""
        logging.config.dictConfig(cls.build(log_level, log_format, tenant_debug))

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={log_level}, format={log_format}")


def setup_logging(settings: Optional[Any] = None) -> None:
    """Setup logging configuration.

    It should be called once at application startup. When settings are given,
    their log_level, log_format and tenant_debug values win over the environment.
    """
    if settings is None:
        LoggingConfig.configure()
        return
    LoggingConfig.configure(
        log_level=settings.log_level,
        log_format=settings.log_format,
        tenant_debug=settings.tenant_debug,
    )


def get_audit_logger() -> logging.Logger:
    """Get the logger used for security audit events."""
    return logging.getLogger(AUDIT_LOGGER_NAME)

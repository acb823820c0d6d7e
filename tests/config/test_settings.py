"""
Tests for settings and logging configuration.
"""

from storeflow_tenancy.config import AUDIT_LOGGER_NAME, LoggingConfig, TenancySettings


def test_defaults():
    settings = TenancySettings(_env_file=None)

    assert settings.base_domain == "azima.store"
    assert settings.tenant_cache_ttl == 300
    assert settings.directory_schema == "public"
    assert settings.exempt_paths == ["/health", "/healthz", "/static", "/_next"]
    assert settings.override_header_enabled()


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("BASE_DOMAIN", "shops.example.org")
    monkeypatch.setenv("TENANT_CACHE_TTL", "60")
    monkeypatch.setenv("TENANT_DEBUG", "true")

    settings = TenancySettings(_env_file=None)

    assert settings.base_domain == "shops.example.org"
    assert settings.tenant_cache_ttl == 60
    assert settings.tenant_debug is True


def test_override_header_disabled_in_production():
    settings = TenancySettings(_env_file=None, environment="Production")
    assert settings.is_production
    assert not settings.override_header_enabled()


def test_logging_config_levels():
    config = LoggingConfig.build(log_level="warning", log_format="json", tenant_debug=True)

    assert config["root"]["level"] == "WARNING"
    assert config["loggers"]["storeflow_tenancy"]["level"] == "DEBUG"
    assert config["loggers"][AUDIT_LOGGER_NAME]["level"] == "WARNING"
    assert config["loggers"]["asyncpg"]["level"] == "WARNING"
    assert config["formatters"]["default"]["format"].startswith('{"time"')


def test_logging_config_unknown_format_falls_back():
    config = LoggingConfig.build(log_level="INFO", log_format="xml", tenant_debug=False)

    assert config["loggers"]["storeflow_tenancy"]["level"] == "INFO"
    assert "%(levelname)s" in config["formatters"]["default"]["format"]

"""Hostname parsing for subdomain and custom-domain resolution.

Examples with base domain ``azima.store``:

- ``johns-store.azima.store`` -> subdomain ``johns-store``
- ``azima.store`` -> no subdomain
- ``localhost:9000`` -> no subdomain (development)
- ``shop.example.com`` -> custom domain
"""

import ipaddress
from typing import Optional

LOCAL_HOSTNAMES = frozenset({"localhost", "ip6-localhost", "ip6-loopback"})
PRIVATE_PREFIXES = ("127.", "10.", "192.168.")


def normalize_hostname(hostname: Optional[str]) -> str:
    """Lowercase a Host value and strip its port.

    Bracketed IPv6 literals (``[::1]:9000``) keep their address part.
    """
    if not hostname:
        return ""
    host = hostname.strip().lower()

    if host.startswith("["):
        end = host.find("]")
        return host[1:end] if end != -1 else host[1:]

    # A bare IPv6 literal has several colons and no port
    if host.count(":") == 1:
        host = host.split(":", 1)[0]
    return host.rstrip(".")


def is_local_address(host: str) -> bool:
    """Whether a normalized host is loopback or a private network address."""
    if not host:
        return False
    if host in LOCAL_HOSTNAMES or host.endswith(".localhost"):
        return True
    if host.startswith(PRIVATE_PREFIXES):
        return True
    try:
        address = ipaddress.ip_address(host)
    except ValueError:
        return False
    return address.is_loopback or address.is_private or address.is_link_local


def extract_subdomain(hostname: Optional[str], base_domain: str) -> Optional[str]:
    """Return the subdomain part of a hostname under the base domain.

    Never returns an empty string: the bare base domain, local addresses and
    foreign hosts all return None.
    """
    host = normalize_hostname(hostname)
    base = base_domain.strip().lower().rstrip(".")
    if not host or not base:
        return None

    suffix = f".{base}"
    if host.endswith(suffix):
        subdomain = host[: -len(suffix)]
        return subdomain or None

    return None


def is_custom_domain(hostname: Optional[str], base_domain: str) -> bool:
    """Whether a hostname should be looked up as a tenant's custom domain."""
    host = normalize_hostname(hostname)
    base = base_domain.strip().lower().rstrip(".")
    if not host:
        return False
    if host == base or host.endswith(f".{base}"):
        return False
    return not is_local_address(host)

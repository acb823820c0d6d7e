"""Resolution inputs and outcomes.

A resolution ends in exactly one of three tags: Resolved, Failed or
Suspended. Suspended is its own tag because callers answer it with a
different response than an ordinary failure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .tenant import TenantContext, TenantSource


@dataclass(frozen=True)
class RequestSignals:
    """Tenant-identifying values extracted from an inbound request."""

    hostname: str = ""
    api_key: Optional[str] = None
    override_subdomain: Optional[str] = None


class FailureKind(str, Enum):
    """Why a resolution failed."""
    NOT_FOUND = "not_found"
    INVALID_STATUS = "invalid_status"
    INVALID_API_KEY = "invalid_api_key"
    NO_SIGNALS = "no_signals"
    BACKEND_UNAVAILABLE = "backend_unavailable"


@dataclass(frozen=True)
class Resolved:
    context: TenantContext
    source: TenantSource


@dataclass(frozen=True)
class Failed:
    reason: str
    source: TenantSource
    kind: FailureKind = FailureKind.NOT_FOUND


@dataclass(frozen=True)
class Suspended:
    tenant_id: str
    source: TenantSource


ResolutionResult = Union[Resolved, Failed, Suspended]

"""Client configuration.

Endpoint settings are fixed per client. Debug output and the page size are
read from the environment on every call, so they can be changed on a running
process without rebuilding the client.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEBUG_ENV_VAR = "RECURLY_DEBUG"
PAGE_SIZE_ENV_VAR = "RECURLY_PAGE_SIZE"

DEFAULT_HOST = "api.recurly.com"
DEFAULT_PORT = 443
DEFAULT_VERSION = "v2"
DEFAULT_PAGE_SIZE = 200

_TRUTHY = frozenset(["1", "true", "yes", "on"])


@dataclass(frozen=True)
class ClientSettings:
    """Where the API lives."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    version: str = DEFAULT_VERSION

    @property
    def base_url(self) -> str:
        return f"https://{self.host}:{self.port}/{self.version}"


def debug_enabled() -> bool:
    """Whether request/response bodies should be logged."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY


def page_size() -> int:
    """Page size requested on the first page of list calls."""
    raw = os.environ.get(PAGE_SIZE_ENV_VAR)
    if raw is None:
        return DEFAULT_PAGE_SIZE
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {PAGE_SIZE_ENV_VAR}={raw!r}, using {DEFAULT_PAGE_SIZE}")
        return DEFAULT_PAGE_SIZE
    if value <= 0:
        logger.warning(f"Ignoring non-positive {PAGE_SIZE_ENV_VAR}={value}, using {DEFAULT_PAGE_SIZE}")
        return DEFAULT_PAGE_SIZE
    return value

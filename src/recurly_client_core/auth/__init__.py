"""Authentication components for the Recurly client.

This module provides:
- Per-call credential resolution (explicit → context override → default)
- The `Credential` wrapper used to build the Basic-Auth header

Example:
    ```python
    from recurly_client_core.auth import CredentialResolver

    resolver = CredentialResolver()
    with resolver.override("tenant-key"):
        ...
    ```
"""

from recurly_client_core.auth.credentials import Credential, CredentialResolver
from recurly_client_core.auth.exceptions import (
    CredentialError,
    CredentialNotFoundError,
)

__all__ = [
    "Credential",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
]

"""Exceptions raised while resolving API credentials.

Example:
    ```python
    from recurly_client_core.auth.exceptions import CredentialNotFoundError

    if not api_key:
        raise CredentialNotFoundError("API key not found", env_var_name="RECURLY_API_KEY")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when no credential is available for a call.

    Neither an explicit per-call credential, a context override nor a
    library-wide default could be found.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name

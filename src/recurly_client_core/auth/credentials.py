"""Credential resolution for Recurly API calls.

Every call is authenticated with exactly one API key, chosen in this order:

1. A credential passed explicitly to the call
2. A context-scoped override installed with `CredentialResolver.override`
3. The library-wide default set when the resolver was built

The default itself comes from the constructor argument, then the
``RECURLY_API_KEY`` environment variable (a ``.env`` file is loaded into the
environment with python-dotenv).

Overrides are stored in a `contextvars.ContextVar`, so each asyncio task and
each thread sees only the override it installed itself.

Example:
    ```python
    from recurly_client_core.auth import CredentialResolver

    resolver = CredentialResolver(api_key="default-key")

    with resolver.override("tenant-key"):
        assert resolver.resolve().secret == "tenant-key"

    assert resolver.resolve().secret == "default-key"
    ```

Security Considerations:
    - Secrets are never logged; `Credential` renders as ``***``
    - Only the source of a key is logged (env var name or .env file)
"""

import base64
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from threading import Lock

from dotenv import load_dotenv

from recurly_client_core.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_API_KEY_ENV_VAR = "RECURLY_API_KEY"


@dataclass(frozen=True)
class Credential:
    """An API key. The secret never appears in `repr` or `str`."""

    secret: str = field(repr=False)

    def basic_token(self) -> str:
        """Return the base64 token sent in the ``Authorization: Basic`` header."""
        return base64.b64encode(self.secret.encode("utf-8")).decode("ascii")

    def __str__(self) -> str:
        return "***"


def as_credential(value: "Credential | str | None") -> Credential | None:
    if value is None or isinstance(value, Credential):
        return value
    return Credential(value)


class CredentialResolver:
    """Resolve which API key applies to the call in progress.

    Attributes:
        env_var_name: Environment variable consulted for the default key.
        _dotenv_loaded: Whether the .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(
        self,
        api_key: "Credential | str | None" = None,
        *,
        env_var_name: str = DEFAULT_API_KEY_ENV_VAR,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ):
        """Initialize the resolver.

        Args:
            api_key: Library-wide default key. When omitted, the key is looked
                up in ``env_var_name`` at resolution time.
            env_var_name: Environment variable holding the default key.
            dotenv_path: Path to a .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self.env_var_name = env_var_name
        self._default = as_credential(api_key)
        self._override: ContextVar[Credential | None] = ContextVar(
            f"recurly_credential_override_{id(self)}", default=None
        )
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    @property
    def default(self) -> Credential | None:
        """The library-wide default credential, if any."""
        if self._default is not None:
            return self._default
        value = os.environ.get(self.env_var_name)
        if value:
            logger.debug(f"Resolved default credential from environment variable '{self.env_var_name}': ***")
            return Credential(value)
        return None

    def resolve(self, credential: "Credential | str | None" = None) -> Credential:
        """Return the credential for the current call.

        Args:
            credential: Explicit per-call credential; wins over everything else.

        Raises:
            CredentialNotFoundError: If no credential is available.
        """
        explicit = as_credential(credential)
        if explicit is not None:
            return explicit

        override = self._override.get()
        if override is not None:
            return override

        default = self.default
        if default is None:
            raise CredentialNotFoundError(
                f"No Recurly API key available (checked env var: {self.env_var_name})",
                env_var_name=self.env_var_name,
            )
        return default

    def set_override(self, credential: "Credential | str") -> Token:
        """Install an override for the current context.

        Returns:
            Token to pass to `clear_override` to restore the previous state.
        """
        return self._override.set(as_credential(credential))

    def clear_override(self, token: Token | None = None) -> None:
        """Remove the override of the current context.

        With a token from `set_override`, the previous override (if any) is
        restored; without one, the context simply has no override afterwards.
        """
        if token is not None:
            self._override.reset(token)
        else:
            self._override.set(None)

    @contextmanager
    def override(self, credential: "Credential | str") -> Iterator[Credential]:
        """Use ``credential`` for every call made inside the block.

        The override is removed on exit, including when the block raises.
        """
        token = self.set_override(credential)
        try:
            yield self._override.get()
        finally:
            self.clear_override(token)

"""Recurly Client Core - typed request execution for the Recurly v2 XML API.

This library provides the machinery resource methods are built on:
- Authenticated HTTPS calls with per-call / per-context API keys
- XML payload encoding and typed response decoding
- ``Link``-header pagination merged into one collection
- Typed errors for every failure (API status, codec, transport)

Example:
    ```python
    from recurly_client_core import RecurlyClient
    from recurly_client_core.models import Accounts

    async with RecurlyClient(api_key="...") as client:
        accounts = await client.get_list("/accounts", Accounts)

        # Another tenant's key for this call only
        with client.resolver.override("other-key"):
            accounts = await client.get_list("/accounts", Accounts)
    ```
"""

__version__ = "0.1.0"

from recurly_client_core.api import RecurlyAPI
from recurly_client_core.client import RecurlyClient, quote_segment

__all__ = ["RecurlyAPI", "RecurlyClient", "__version__", "quote_segment"]

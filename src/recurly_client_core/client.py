"""Request execution for the Recurly v2 API.

`RecurlyClient` sends authenticated XML requests, follows ``Link`` pagination
for list calls and translates error responses into typed exceptions.

Example:
    ```python
    from recurly_client_core import RecurlyClient
    from recurly_client_core.client import quote_segment
    from recurly_client_core.models import Account, Accounts

    async with RecurlyClient("default-key") as client:
        accounts = await client.get_list("/accounts", Accounts)
        account = await client.get(f"/accounts/{quote_segment(code)}", Account, credential="tenant-key")
    ```
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, TypeVar
from urllib.parse import quote

import httpx

from recurly_client_core.auth.credentials import Credential, CredentialResolver
from recurly_client_core.config import ClientSettings, debug_enabled, page_size
from recurly_client_core.errors.exceptions import APIError, TransportError
from recurly_client_core.errors.handler import is_absent_resource, raise_for_status
from recurly_client_core.models.base import RecurlyObject, RecurlyObjects
from recurly_client_core.payload import XmlPayload
from recurly_client_core.serialize.codec import decode, encode
from recurly_client_core.transport.pagination import Page, merge_pages, page_from_response

logger = logging.getLogger(__name__)

PER_PAGE_PARAM = "per_page"

T = TypeVar("T")

Payload = XmlPayload | RecurlyObject
CredentialLike = Credential | str | None


def quote_segment(value: Any) -> str:
    """Percent-encode one caller-supplied path segment (account code, UUID, ...).

    Every reserved character is escaped, including ``/``.
    """
    return quote(str(value), safe="")


def is_collection(target_type: type | None) -> bool:
    return isinstance(target_type, type) and issubclass(target_type, RecurlyObjects)


class RecurlyClient:
    """Executor for Recurly API calls.

    The underlying `httpx.AsyncClient` is shared by every call and must be
    opened before first use and closed at shutdown (or use ``async with``).
    Calls may run concurrently from independent tasks; each call resolves
    its own credential.

    Args:
        api_key: Library-wide default API key. Falls back to ``RECURLY_API_KEY``.
        settings: Endpoint settings (host, port, API version).
        resolver: Credential resolver; built from ``api_key`` when omitted.
        transport: Optional httpx transport (connection pool, mock, ...).
    """

    def __init__(
        self,
        api_key: CredentialLike = None,
        *,
        settings: ClientSettings | None = None,
        resolver: CredentialResolver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self.resolver = resolver or CredentialResolver(api_key)
        self._transport = transport
        self._http: httpx.AsyncClient | None = None
        self._state_lock = asyncio.Lock()

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    @property
    def is_open(self) -> bool:
        return self._http is not None

    async def open(self) -> None:
        """Open the shared HTTP client. Does nothing if already open."""
        async with self._state_lock:
            if self._http is not None:
                return
            self._http = httpx.AsyncClient(transport=self._transport)
            logger.debug(f"Opened Recurly client for {self.base_url}")

    async def close(self) -> None:
        """Close the shared HTTP client. Does nothing if already closed."""
        async with self._state_lock:
            if self._http is None:
                return
            http, self._http = self._http, None
            await http.aclose()
            logger.debug(f"Closed Recurly client for {self.base_url}")

    async def __aenter__(self) -> "RecurlyClient":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def build_url(self, path: str) -> str:
        """Full URL for a resource path; absolute URLs are returned unchanged.

        ``path`` is used as given: callers quote their own segments with
        `quote_segment` so literal segments such as ``/accounts/`` stay readable.
        """
        if path.startswith(("https://", "http://")):
            return path
        return f"{self.base_url}{path}"

    # /////////////////////////////////////////////////////////////////////////
    # Collaborator interface

    async def create(
        self, path: str, payload: Payload, target_type: type[T] | None = None, credential: CredentialLike = None
    ) -> T | None:
        return await self.execute("POST", path, payload, target_type, credential=credential)

    async def update(
        self, path: str, payload: Payload, target_type: type[T] | None = None, credential: CredentialLike = None
    ) -> T | None:
        return await self.execute("PUT", path, payload, target_type, credential=credential)

    async def get(
        self,
        path: str,
        target_type: type[T],
        credential: CredentialLike = None,
        *,
        params: Mapping[str, Any] | None = None,
        absent_phrase: str | None = None,
    ) -> T | None:
        """GET a resource.

        Args:
            absent_phrase: When the error message of a failed lookup contains
                this phrase, None is returned instead of raising.
        """
        try:
            return await self.execute("GET", path, target_type=target_type, credential=credential, params=params)
        except APIError as e:
            if absent_phrase and is_absent_resource(e, absent_phrase):
                logger.debug(f"Treating {e.status_code} from {path} as absent resource")
                return None
            raise

    async def get_list(
        self,
        path: str,
        target_type: type[T],
        credential: CredentialLike = None,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> T | None:
        """GET every page of a list and merge them into one collection."""
        if not is_collection(target_type):
            raise TypeError(f"{target_type!r} is not a list type")
        return await self.execute("GET", path, target_type=target_type, credential=credential, params=params)

    async def get_by_url(self, url: str, target_type: type[T], credential: CredentialLike = None) -> T | None:
        """GET an absolute URL, such as the ``href`` of a nested resource."""
        return await self.execute("GET", url, target_type=target_type, credential=credential)

    async def delete(
        self, path: str, credential: CredentialLike = None, params: Mapping[str, Any] | None = None
    ) -> None:
        await self.execute("DELETE", path, credential=credential, params=params)

    # /////////////////////////////////////////////////////////////////////////
    # Execution

    async def execute(
        self,
        method: str,
        path: str,
        payload: Payload | None = None,
        target_type: type[T] | None = None,
        *,
        credential: CredentialLike = None,
        params: Mapping[str, Any] | None = None,
    ) -> T | None:
        """Run one logical API call.

        GET follows every linked page; list types are merged, singular types
        use the first page. POST/PUT send ``payload`` and decode one
        response. DELETE sends no body and returns None.

        Raises:
            EncodingError: Payload could not be serialized (no request sent).
            APIError: The server answered with status >= 300.
            DecodingError: A response body did not match ``target_type``.
            TransportError: The exchange failed or the client is not open.
            CredentialNotFoundError: No API key is available.
        """
        method = method.upper()
        url = self.build_url(path)

        if method == "GET":
            key = self.resolver.resolve(credential)
            pages = await self._collect_pages(url, key, params)
            if target_type is None:
                return None
            if is_collection(target_type):
                return merge_pages(pages, target_type)
            return self._single_result(pages, target_type)

        if method in ("POST", "PUT"):
            content = encode(payload) if payload is not None else None
            key = self.resolver.resolve(credential)
            if debug_enabled() and content is not None:
                logger.info(f"Payload for [{method}]:: {content.decode('utf-8')}")
            response = await self._send(method, url, key, content=content, params=params)
            if target_type is None:
                return None
            return decode(response.content, target_type)

        if method == "DELETE":
            key = self.resolver.resolve(credential)
            await self._send(method, url, key, params=params)
            return None

        raise ValueError(f"Unsupported HTTP method: {method}")

    async def _collect_pages(self, url: str, key: Credential, params: Mapping[str, Any] | None) -> list[Page]:
        # Page size goes on the first request only; next links carry their own cursor
        first_params = {PER_PAGE_PARAM: page_size(), **(params or {})}
        response = await self._send("GET", url, key, params=first_params)
        pages = [page_from_response(response)]

        while pages[-1].has_next:
            response = await self._send("GET", pages[-1].next_url, key)
            pages.append(page_from_response(response))

        return pages

    def _single_result(self, pages: list[Page], target_type: type[T]) -> T:
        if len(pages) > 1:
            logger.warning("Received multiple results from Recurly when only one was expected.")
        return decode(pages[0].body, target_type)

    async def _send(
        self,
        method: str,
        url: str,
        key: Credential,
        *,
        content: bytes | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        http = self._http
        if http is None:
            raise TransportError("Recurly client is not open; call open() first")

        headers = {
            "Authorization": f"Basic {key.basic_token()}",
            "Accept": "application/xml",
            "Content-Type": "application/xml; charset=utf-8",
        }
        if debug_enabled():
            logger.info(f"Msg to Recurly API [{method}] :: URL : {url}")

        try:
            response = await http.request(method, url, headers=headers, content=content, params=params)
        except httpx.RequestError as e:
            logger.warning(f"Error while calling Recurly [{method}] {url}: {e}")
            raise TransportError(f"Error while calling Recurly: {e}") from e

        if response.status_code >= 300:
            logger.debug(f"Recurly error whilst calling: status[{response.status_code}] {method} {response.url}")
            logger.debug(f"Recurly error: {response.text}")
            raise_for_status(response)

        if debug_enabled():
            logger.info(f"Msg from Recurly API :: {response.text}")
        return response

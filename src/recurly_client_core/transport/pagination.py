"""Cursor pagination for list responses.

Recurly returns lists one page at a time and links the pages through the
``Link`` response header::

    Link: <https://api.recurly.com/v2/transactions>; rel="start",
          <https://api.recurly.com/v2/transactions?cursor=124142>; rel="next"

The ``rel="next"`` URL is already fully qualified and is requested verbatim.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

import httpx

from recurly_client_core.models.base import RecurlyObjects
from recurly_client_core.serialize.codec import decode

logger = logging.getLogger(__name__)

PAGINATION_HEADER = "Link"

C = TypeVar("C", bound=RecurlyObjects)


@dataclass(frozen=True)
class Page:
    """One response body and the URL of the page after it, if any."""

    body: bytes
    next_url: str | None = None

    @property
    def has_next(self) -> bool:
        return self.next_url is not None


def next_page_url(response: httpx.Response) -> str | None:
    """Return the ``rel="next"`` URL of the response's Link header, if any."""
    if PAGINATION_HEADER not in response.headers:
        return None
    link = response.links.get("next")
    if not link or not link.get("url"):
        return None
    return link["url"]


def page_from_response(response: httpx.Response) -> Page:
    return Page(body=response.content, next_url=next_page_url(response))


def merge_pages(pages: Sequence[Page], target_type: type[C]) -> C | None:
    """Decode every page and concatenate their objects into the first page's list.

    Order is page order, then in-page order. No pages gives None rather than
    an empty collection.

    Raises:
        DecodingError: If any page cannot be decoded. Nothing is returned
            for the pages already decoded.
    """
    if not pages:
        return None

    merged = decode(pages[0].body, target_type)
    for page in pages[1:]:
        merged.objects.extend(decode(page.body, target_type).objects)

    if len(pages) > 1:
        logger.debug(f"Merged {len(pages)} pages into {len(merged.objects)} {target_type.__name__} objects")
    return merged

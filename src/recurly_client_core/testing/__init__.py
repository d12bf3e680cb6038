"""Testing utilities for code built on the Recurly client.

Example:
    ```python
    from recurly_client_core import RecurlyClient
    from recurly_client_core.testing import RecordingTransport, responses_in_order, xml_response

    transport = RecordingTransport(responses_in_order(xml_response("<account/>")))
    async with RecurlyClient("test-key", transport=transport) as client:
        ...
    assert transport.requests[0].method == "GET"
    ```
"""

from collections.abc import Callable, Iterable

import httpx

Handler = Callable[[httpx.Request], httpx.Response]


def xml_response(
    body: str | bytes = "",
    status_code: int = 200,
    *,
    next_url: str | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build an XML response, optionally linking to a next page."""
    all_headers = {"content-type": "application/xml; charset=utf-8"}
    if next_url is not None:
        all_headers["Link"] = f'<{next_url}>; rel="next"'
    if headers:
        all_headers.update(headers)
    content = body.encode("utf-8") if isinstance(body, str) else body
    return httpx.Response(status_code, headers=all_headers, content=content)


def responses_in_order(*responses: httpx.Response) -> Handler:
    """Handler answering successive requests with ``responses``.

    Raises AssertionError on more requests than responses.
    """
    remaining: Iterable[httpx.Response] = iter(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        try:
            return next(remaining)
        except StopIteration:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}") from None

    return handler


class RecordingTransport(httpx.MockTransport):
    """`httpx.MockTransport` that keeps every request it handled."""

    def __init__(self, handler: Handler):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


__all__ = ["RecordingTransport", "responses_in_order", "xml_response"]

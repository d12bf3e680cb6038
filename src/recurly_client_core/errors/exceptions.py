"""Structured exceptions for Recurly API calls."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from recurly_client_core.errors.models import ErrorDetail


class RecurlyError(Exception):
    """Base exception for everything raised by this library."""

    pass


class APIError(RecurlyError):
    """The API answered with a status >= 300.

    ``message`` is the raw response body text.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.detail = detail


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class PaymentRequiredError(ClientError):
    """402 Payment Required."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity (field validation errors)."""

    def __init__(self, message: str, validation_errors: list[dict] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass


class DecodingError(APIError):
    """A response body could not be parsed into the expected type."""

    pass


class EncodingError(RecurlyError):
    """A payload could not be serialized to XML. Raised before any I/O."""

    pass


class TransportError(RecurlyError):
    """The HTTP exchange itself failed (connection, timeout, closed client)."""

    pass

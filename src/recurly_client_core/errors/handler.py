"""Error handling utilities for HTTP responses."""

import httpx

from recurly_client_core.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from recurly_client_core.errors.models import ErrorDetail

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    402: PaymentRequiredError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def exception_class_for_status(status_code: int) -> type[APIError]:
    if status_code in EXCEPTION_MAP:
        return EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching `APIError` for any response with status >= 300.

    The exception message is the raw body text. Recurly XML error documents
    are additionally parsed into ``exc.detail``.

    Args:
        response: HTTP response object (body already read)

    Raises:
        APIError subclass based on status code
    """
    status_code = response.status_code
    if status_code < 300:
        return

    body = response.text
    detail = ErrorDetail.from_text(body)
    exc_class = exception_class_for_status(status_code)

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(
            message=body,
            retry_after=retry_after,
            status_code=status_code,
            response=response,
            detail=detail,
        )

    if exc_class is ValidationError:
        raise ValidationError(
            message=body,
            validation_errors=detail.errors if detail else None,
            status_code=status_code,
            response=response,
            detail=detail,
        )

    raise exc_class(
        message=body,
        status_code=status_code,
        response=response,
        detail=detail,
    )


def is_absent_resource(error: APIError, phrase: str) -> bool:
    """Whether ``error`` is the server's "not found" answer for a lookup.

    Recurly exposes no dedicated error code for these lookups, so the match
    is on the free-text message.
    """
    return phrase in (error.message or "")

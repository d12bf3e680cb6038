"""Error types and HTTP error translation for the Recurly client."""

from recurly_client_core.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    DecodingError,
    EncodingError,
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
    RateLimitError,
    RecurlyError,
    ServerError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from recurly_client_core.errors.handler import is_absent_resource, raise_for_status
from recurly_client_core.errors.models import ErrorDetail

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "DecodingError",
    "EncodingError",
    "ErrorDetail",
    "ForbiddenError",
    "NotFoundError",
    "PaymentRequiredError",
    "RateLimitError",
    "RecurlyError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
    "is_absent_resource",
    "raise_for_status",
]

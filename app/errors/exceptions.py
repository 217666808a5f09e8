"""
Description:
Exception types for the interview question generator.

HTTP-facing errors subclass FastAPI's HTTPException and are rendered by the
handlers in app.errors.handlers. Provider, persistence and configuration errors
are plain exceptions raised by the lower layers and translated into HTTP errors
at the request handler boundary.

Dependencies:
- fastapi: For the HTTPException base class.
- starlette.status: For status code constants.
"""
import math
from typing import Optional
from fastapi import HTTPException
from starlette.status import (
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
    HTTP_503_SERVICE_UNAVAILABLE,
)

DEFAULT_RETRY_AFTER = "60s"


class ConfigMissing(RuntimeError):
    """Required configuration is absent. Raised only during startup."""


class ProviderError(Exception):
    """The completion provider failed in a way that is not otherwise classified."""


class ProviderUnavailable(ProviderError):
    """Transport, timeout or authentication failure talking to the provider."""


class ProviderThrottled(ProviderError):
    """The provider rejected the call for quota or rate-limit reasons."""

    def __init__(self, message: str = "Provider quota exceeded", retry_after: Optional[str] = None):
        super().__init__(message)
        self.retry_after = retry_after


class PersistenceError(Exception):
    """Saving a generated batch to storage failed."""


class InternalServerError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class BadGateway(HTTPException):
    def __init__(self, detail: str = "Bad gateway"):
        super().__init__(status_code=HTTP_502_BAD_GATEWAY, detail=detail)


class ServiceUnavailable(HTTPException):
    def __init__(self, detail: str = "Service unavailable", retry_after: str = DEFAULT_RETRY_AFTER):
        super().__init__(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
            headers={"Retry-After": retry_after_seconds(retry_after)},
        )
        self.retry_after = retry_after


class GenerationFailed(InternalServerError):
    def __init__(self, detail: str = "Failed to generate interview questions."):
        super().__init__(detail=detail)


class ParseEmpty(InternalServerError):
    def __init__(self, detail: str = "Failed to parse AI provider response properly."):
        super().__init__(detail=detail)


class SaveFailed(InternalServerError):
    def __init__(self, detail: str = "Failed to save interview questions"):
        super().__init__(detail=detail)


class ProviderUnreachable(BadGateway):
    def __init__(self, detail: str = "AI provider is unavailable."):
        super().__init__(detail=detail)


class ProviderQuotaExceeded(ServiceUnavailable):
    def __init__(self, retry_after: Optional[str] = None):
        super().__init__(
            detail="AI provider quota exceeded. Please try again later.",
            retry_after=retry_after or DEFAULT_RETRY_AFTER,
        )


def retry_after_seconds(hint: str) -> str:
    """Convert a hint such as "37s" or "1.5s" into an integral Retry-After header value."""
    value = hint.strip().rstrip("s")
    try:
        return str(max(0, math.ceil(float(value))))
    except (ValueError, OverflowError):
        return retry_after_seconds(DEFAULT_RETRY_AFTER)

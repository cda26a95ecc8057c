"""
Exception classes for the DigitalOcean API client.

Every failure surfaces as a subclass of DigitalOceanError, raised from the
call that failed. Nothing is retried inside the client.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from doclient.core.response import Response


class DigitalOceanError(Exception):
    """
    Base exception for all client errors.

    Attributes:
        message: Human-readable error message
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class TransportError(DigitalOceanError):
    """Raised when the HTTP exchange itself fails (connection, protocol)."""


class RequestTimeoutError(TransportError):
    """Raised when a request exceeds the configured timeout."""

    def __init__(
        self,
        timeout_seconds: float | None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Request timed out after {timeout_seconds}s", details)


class APIError(TransportError):
    """
    Raised when the API answers with a non-2xx status.

    The error body, when it is JSON, looks like
    {"id": "not_found", "message": "...", "request_id": "..."}.

    Attributes:
        response: Transport metadata of the failed call
        status_code: HTTP status code
        error_id: Machine-readable error identifier from the body
        request_id: Server-side request identifier, useful for support
    """

    def __init__(
        self,
        response: "Response",
        message: str | None = None,
        error_id: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.response = response
        self.status_code = response.status_code
        self.error_id = error_id
        self.request_id = request_id
        request = response.http_response.request
        text = f"{request.method} {request.url}: {self.status_code}"
        if request_id:
            text += f" (request {request_id!r})"
        if message:
            text += f" {message}"
        super().__init__(
            text,
            {"status_code": self.status_code, "error_id": error_id, "request_id": request_id},
        )
        self.api_message = message


class EncodeError(DigitalOceanError):
    """Raised when a request body cannot be serialized to JSON."""


class DecodeError(DigitalOceanError):
    """Raised when a response body is not the JSON shape the call expects."""

    def __init__(
        self,
        message: str,
        response: "Response",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.response = response
        super().__init__(message, details)

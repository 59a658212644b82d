"""
Typed errors raised by the seafileclient core.

Every error is a CommandError so the CLI can map it straight to an exit
code. Errors caused by a remote-side rejection keep the HTTP status and
the raw response body, so the failure can be diagnosed without
re-issuing the request.
"""

from typing import Optional

from .exit_codes import (
    CommandError,
    NOT_FOUND,
    API_ERROR,
    NETWORK_ERROR,
    DATA_ERROR,
)


class SeafileError(CommandError):
    """Base class for all errors raised while talking to the server."""


class TransportError(SeafileError):
    """The request failed below the HTTP layer (network, TLS, DNS)."""
    def __init__(self, message: str):
        super().__init__(message, NETWORK_ERROR)


class _ResponseError(SeafileError):
    """Error that carries the HTTP status and body of the response."""
    def __init__(self, message: str, status: Optional[int], body: str, exit_code: int):
        super().__init__(message, exit_code)
        self.message = message
        self.status = status
        self.body = body

    def __str__(self) -> str:
        parts = [self.message]
        if self.status is not None:
            parts.append(f"(HTTP {self.status})")
        if self.body:
            parts.append(self.body)
        return " ".join(parts)


class DecodeError(_ResponseError):
    """Response body did not match the expected JSON shape."""
    def __init__(self, message: str, status: Optional[int] = None, body: str = ""):
        super().__init__(message, status, body, DATA_ERROR)


class OperationFailedError(_ResponseError):
    """A mutating call was answered with a non-success status."""
    def __init__(self, message: str, status: Optional[int] = None, body: str = ""):
        super().__init__(message, status, body, API_ERROR)


class NotFoundError(SeafileError):
    """The default library is unset, or a named library does not exist."""
    def __init__(self, message: str = "library not found"):
        super().__init__(message, NOT_FOUND)

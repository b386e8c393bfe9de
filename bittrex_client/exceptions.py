"""
Custom exceptions for the Bittrex client library.
"""

from typing import Optional


class BittrexClientError(Exception):
    """Base exception for Bittrex client errors."""
    pass


class ApiError(BittrexClientError):
    """Raised when the server returns a structurally invalid payload."""
    pass


class ResultError(BittrexClientError):
    """Raised when the server reports a failed call (``success`` is false)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class HTTPError(BittrexClientError):
    """Raised when the HTTP request fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EncodingError(BittrexClientError):
    """Raised when request data cannot be encoded for signing."""
    pass


class InternalError(BittrexClientError):
    """Raised when the HMAC primitive cannot be built from the key material."""
    pass


class NotAuthenticatedError(BittrexClientError):
    """Raised when a private call is attempted before login."""
    pass


class ConfigurationError(BittrexClientError):
    """Raised when client configuration is invalid."""
    pass

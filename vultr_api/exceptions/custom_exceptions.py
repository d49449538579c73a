"""Custom exception types for clearer error handling."""
from __future__ import annotations


class VultrError(Exception):
    """Base exception for the client."""


class RemoteFetchError(VultrError):
    """Raised when a call to the Vultr API fails."""


class ApiRequestError(RemoteFetchError):
    """Raised when the API answers with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int, body: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TransportError(RemoteFetchError):
    """Raised on connection, DNS or timeout failures."""


class DataValidationError(VultrError):
    """Raised when expected data is missing or malformed."""


class ResourceNotFoundError(DataValidationError):
    """Raised when an identifier is absent from a fetched collection."""

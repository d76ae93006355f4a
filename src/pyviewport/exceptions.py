"""Custom exception hierarchy for pyviewport."""

from __future__ import annotations


class ViewportError(Exception):
    """Base exception for all pyviewport errors."""


class ViewportConfigError(ViewportError):
    """Invalid or missing configuration."""


class InvalidArgumentError(ViewportError, ValueError):
    """An input contract was broken.

    Raised for bounds over an empty point-set (a programming error) and for
    blank record addresses handed to the API layer.
    """


class HexDecodeError(ViewportError, ValueError):
    """An encoded hex-spatial-index cell could not be decoded."""

    def __init__(self, message: str, *, value: object = None) -> None:
        self.value = value
        super().__init__(message)


class ViewportTransportError(ViewportError):
    """HTTP-level failure (network, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class ViewportApiError(ViewportError):
    """API answered, but the body did not have the expected shape."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class RecordNotFoundError(ViewportApiError):
    """The requested record (hotspot, witness list) does not exist (HTTP 404)."""

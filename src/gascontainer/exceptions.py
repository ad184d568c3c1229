"""Custom exception hierarchy for gascontainer."""

from __future__ import annotations


class GasError(Exception):
    """Base exception for all gascontainer errors."""


class GasConfigError(GasError):
    """Invalid configuration value."""


class GasTransportError(GasError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

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


class GasApiError(GasError):
    """Response body does not match the wire contract."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)

"""Custom exception hierarchy for pixelgrid."""

from __future__ import annotations


class GridError(Exception):
    """Base exception for all pixelgrid errors."""


class GridConfigError(GridError):
    """Invalid or missing configuration."""


class GridModeError(GridError):
    """Unknown grid mode, or a mode with no upstream address configured."""


class GridTransportError(GridError):
    """HTTP-level failure (network, non-200, invalid JSON, timeout)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class GridPayloadError(GridError):
    """Upstream returned JSON that is not a color object."""

    def __init__(self, message: str, *, url: str = "") -> None:
        self.url = url
        super().__init__(message)


class GridInvalidEditError(GridError):
    """An edit was rejected (coordinate out of bounds or unknown team).

    ``reason`` is safe to show to the caller; the store is left untouched.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

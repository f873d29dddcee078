"""Custom exception hierarchy for pydragonball."""

from __future__ import annotations


class DragonBallError(Exception):
    """Base exception for all pydragonball errors."""


class DragonBallConfigError(DragonBallError):
    """Invalid or missing configuration."""


class DragonBallTransportError(DragonBallError):
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


class DragonBallNotFoundError(DragonBallTransportError):
    """The requested resource does not exist (HTTP 404).

    Detail lookups treat this as an absent record rather than a failure.
    """


class DragonBallResponseError(DragonBallError):
    """The API answered with a payload of an unexpected shape."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)

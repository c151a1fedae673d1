"""Exception hierarchy for the wall-network engine."""

from __future__ import annotations


class WallNetError(Exception):
    """Base exception for all engine errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidGeometry(WallNetError):
    """Raised when user input cannot form valid geometry.

    The operation that raises it has not touched the network; the caller
    can re-prompt and try again.
    """


class UnknownElement(WallNetError, KeyError):
    """Raised when a wall or opening id is not part of the network."""

"""Exceptions raised by the HeliaLux integration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .dispatcher import WriteStage


class HeliaLuxError(Exception):
    """Base class for all errors raised while talking to the controller."""


class TransportError(HeliaLuxError):
    """Raised when a request fails to complete or returns a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Record the HTTP status code when the device answered at all."""

        super().__init__(message)
        self.status_code = status_code


class ParseError(HeliaLuxError):
    """Raised when a status payload cannot be normalised to four channels."""


class CommunicationError(HeliaLuxError):
    """Raised when the two-step write protocol fails part way through."""

    def __init__(self, message: str, *, stage: WriteStage) -> None:
        """Remember which step of the write was in progress."""

        super().__init__(message)
        self.stage = stage

"""Exception types raised by clipcheck."""

from __future__ import annotations


class ClipcheckError(Exception):
    """Base class for all clipcheck errors."""


class ConfigurationError(ClipcheckError):
    """Missing credential or an unusable setting; raised before any network call."""


class TransportError(ClipcheckError):
    """The completion endpoint could not be reached."""


class ProviderError(ClipcheckError):
    """The completion endpoint answered with an error payload."""

    def __init__(self, type: str | None, message: str) -> None:
        super().__init__(f"{type}: {message}")
        self.type = type
        self.message = message

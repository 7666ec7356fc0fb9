"""Exceptions raised by locale bundle sources."""

from __future__ import annotations


class BundleError(Exception):
    """Base class for failures while retrieving a locale bundle."""

    def __init__(self, lang: str, message: str) -> None:
        super().__init__(message)
        self.lang = lang


class FetchError(BundleError):
    """Raised when a bundle cannot be retrieved from its source."""

    def __init__(self, lang: str, message: str, *, status: int | None = None) -> None:
        super().__init__(lang, message)
        self.status = status


class ParseError(BundleError):
    """Raised when a retrieved bundle is not a JSON object."""


__all__ = ["BundleError", "FetchError", "ParseError"]

"""In-memory bundle source used by the async unit tests."""

from __future__ import annotations

import asyncio
from typing import Any

from langswitch.i18n import BundleSource, FetchError, ParseError


class RecordingSource(BundleSource):
    """Serve canned bundles, failing for the languages listed in ``errors``."""

    def __init__(
        self,
        bundles: dict[str, dict[str, Any]] | None = None,
        *,
        errors: dict[str, Exception] | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.bundles = bundles or {}
        self.errors = errors or {}
        self.gate = gate
        self.calls: list[str] = []

    async def fetch(self, lang: str) -> dict[str, Any]:
        self.calls.append(lang)
        if self.gate is not None:
            await self.gate.wait()
        if lang in self.errors:
            raise self.errors[lang]
        if lang not in self.bundles:
            raise FetchError(lang, "HTTP error! status: 404", status=404)
        return self.bundles[lang]


def not_found(lang: str) -> FetchError:
    return FetchError(lang, "HTTP error! status: 404", status=404)


def malformed(lang: str) -> ParseError:
    return ParseError(lang, "Expecting value: line 1 column 1 (char 0)")

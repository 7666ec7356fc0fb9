"""Bundle sources producing translation dictionaries for a language."""

from __future__ import annotations

import asyncio
import json
from abc import ABC, abstractmethod
from functools import cache
from importlib import resources
from typing import Any
from urllib.parse import quote

import httpx

from .errors import FetchError, ParseError

TRANSLATIONS_PACKAGE = "langswitch.translations"
DEFAULT_PATH_TEMPLATE = "/mock/{lang}.json"


def _decode_bundle(lang: str, raw: str | bytes) -> dict[str, Any]:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(lang, f"Malformed bundle for {lang!r}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ParseError(lang, f"Bundle for {lang!r} must be a JSON object")
    return payload


class BundleSource(ABC):
    """Produce the raw translation dictionary for a language."""

    @abstractmethod
    async def fetch(self, lang: str) -> dict[str, Any]:
        """Return the bundle for ``lang`` or raise a ``BundleError``."""


class HttpBundleSource(BundleSource):
    """Fetch bundles from an HTTP endpoint addressed by language id."""

    def __init__(
        self,
        base_url: str,
        *,
        path_template: str = DEFAULT_PATH_TEMPLATE,
        timeout: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.path_template = path_template
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=min(timeout, 5.0)),
            headers={"Accept": "application/json"},
        )

    def url_for(self, lang: str) -> str:
        # A language id fills exactly one path segment.
        segment = quote(lang, safe="")
        return f"{self.base_url}{self.path_template.format(lang=segment)}"

    async def fetch(self, lang: str) -> dict[str, Any]:
        url = self.url_for(lang)
        try:
            response = await self.client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(lang, f"Could not fetch {url}: {exc}") from exc

        if response.is_error:
            raise FetchError(
                lang,
                f"HTTP error! status: {response.status_code}",
                status=response.status_code,
            )

        return _decode_bundle(lang, response.content)

    async def aclose(self) -> None:
        """Close the underlying client when this source created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> HttpBundleSource:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


@cache
def available_locales(package: str = TRANSLATIONS_PACKAGE) -> tuple[str, ...]:
    """Return the languages with a packaged bundle."""

    root = resources.files(package)
    locales = sorted(
        entry.name.removesuffix(".json")
        for entry in root.iterdir()
        if entry.name.endswith(".json")
    )
    return tuple(locales)


def read_bundle(lang: str, package: str = TRANSLATIONS_PACKAGE) -> dict[str, Any]:
    """Read a packaged bundle synchronously."""

    resource = resources.files(package).joinpath(f"{lang}.json")
    if not resource.is_file():
        raise FetchError(lang, f"No packaged bundle for {lang!r}", status=404)

    return _decode_bundle(lang, resource.read_bytes())


class PackageBundleSource(BundleSource):
    """Serve bundles shipped as package resources."""

    def __init__(self, package: str = TRANSLATIONS_PACKAGE) -> None:
        self.package = package

    async def fetch(self, lang: str) -> dict[str, Any]:
        # Resource reads can touch the filesystem; keep them off the loop.
        return await asyncio.to_thread(read_bundle, lang, self.package)


__all__ = [
    "BundleSource",
    "DEFAULT_PATH_TEMPLATE",
    "HttpBundleSource",
    "PackageBundleSource",
    "TRANSLATIONS_PACKAGE",
    "available_locales",
    "read_bundle",
]

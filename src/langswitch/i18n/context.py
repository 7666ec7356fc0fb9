"""Locale services owned by the application root and injected into components."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

from .loader import LocaleBundleLoader
from .registry import TranslationRegistry
from .sources import BundleSource

logger = logging.getLogger(__name__)

Revalidator = Callable[[], Any]


class LocaleContext:
    """Bundle the registry, the loader and the language-change hooks."""

    def __init__(self, registry: TranslationRegistry, loader: LocaleBundleLoader) -> None:
        self.registry = registry
        self.loader = loader
        self._revalidators: list[Revalidator] = []

    @property
    def locale(self) -> str:
        return self.registry.locale.value

    def t(self, key: str, params: Mapping[str, Any] | None = None) -> str:
        return self.registry.t(key, params)

    async def ensure_loaded(self, lang: str) -> None:
        await self.loader.ensure_loaded(lang)

    def add_revalidator(self, revalidator: Revalidator) -> Callable[[], None]:
        """Register a hook re-run after every language change."""

        self._revalidators.append(revalidator)

        def remove() -> None:
            if revalidator in self._revalidators:
                self._revalidators.remove(revalidator)

        return remove

    async def change_language(self, lang: str) -> None:
        """Load ``lang``, make it active, then re-run pending validation."""

        await self.loader.ensure_loaded(lang)
        self.registry.locale.set(lang)
        logger.debug("Active locale is now %s", lang)

        for revalidator in list(self._revalidators):
            result = revalidator()
            if inspect.isawaitable(result):
                await result


def create_locale_context(
    source: BundleSource,
    *,
    locale: str = "en",
    fallback_locale: str = "en",
) -> LocaleContext:
    registry = TranslationRegistry(locale=locale, fallback_locale=fallback_locale)
    return LocaleContext(registry, LocaleBundleLoader(registry, source))


__all__ = ["LocaleContext", "Revalidator", "create_locale_context"]

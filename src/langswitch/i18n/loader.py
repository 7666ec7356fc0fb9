"""Load locale bundles into a translation registry at most once per language."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any

from .errors import BundleError
from .registry import TranslationRegistry
from .sources import BundleSource

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"


def _retrieve_exception(task: asyncio.Task[None]) -> None:
    # Mark the error retrieved even when every waiter was cancelled.
    if not task.cancelled() and task.exception() is not None:
        logger.debug("Locale bundle load failed", exc_info=task.exception())


class LocaleBundleLoader:
    """Fetch bundles from ``source`` and register them with ``registry``.

    A failing source never propagates to callers: fetch and parse errors are
    logged and the language is registered with an empty bundle, so lookups
    fall back to the fallback locale or to the raw keys.

    Concurrent calls for a language that is still loading wait on the same
    fetch instead of issuing a second request.
    """

    def __init__(self, registry: TranslationRegistry, source: BundleSource) -> None:
        self.registry = registry
        self.source = source
        self._loaded: set[str] = set()
        self._pending: dict[str, asyncio.Task[None]] = {}

    @property
    def loaded(self) -> frozenset[str]:
        return frozenset(self._loaded)

    def state(self, lang: str) -> LoadState:
        if lang in self._loaded:
            return LoadState.LOADED
        if lang in self._pending:
            return LoadState.LOADING
        return LoadState.UNLOADED

    async def ensure_loaded(self, lang: str) -> None:
        """Make sure a bundle for ``lang`` is registered."""

        if lang in self._loaded:
            return

        task = self._pending.get(lang)
        if task is None:
            task = asyncio.ensure_future(self._load(lang))
            task.add_done_callback(_retrieve_exception)
            self._pending[lang] = task
        # Cancelling one waiter must not abort the fetch the others share.
        await asyncio.shield(task)

    async def _load(self, lang: str) -> None:
        try:
            messages = await self._fetch(lang)
            self.registry.set_locale_message(lang, messages)
            self._loaded.add(lang)
        finally:
            self._pending.pop(lang, None)
        logger.info("Loaded locale bundle %s (%d top-level keys)", lang, len(messages))

    async def _fetch(self, lang: str) -> dict[str, Any]:
        try:
            return await self.source.fetch(lang)
        except BundleError as exc:
            logger.warning("Could not fetch localization data for %s: %s", lang, exc)
            return {}


__all__ = ["LoadState", "LocaleBundleLoader"]

"""Server-side translators backed by the packaged locale bundles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cache
from typing import Any, Mapping

from langswitch.backend.config import load_settings
from langswitch.i18n import BundleError, TranslationRegistry, available_locales, read_bundle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Translator:
    """Callable helper for retrieving localized strings."""

    locale: str
    registry: TranslationRegistry

    def __call__(self, key: str, params: Mapping[str, Any] | None = None) -> str:
        return self.registry.t(key, params, locale=self.locale)


def _base_locale() -> str:
    return load_settings().fallback_locale


@cache
def load_bundle(locale: str) -> Mapping[str, Any]:
    """Return the packaged bundle, or an empty one when it is missing or broken."""

    try:
        return read_bundle(locale)
    except BundleError as exc:
        logger.warning("Serving empty catalogue for %s: %s", locale, exc)
        return {}


def normalise_locale(locale: str | None) -> str:
    """Normalise requested locale to a supported catalogue key."""

    if not locale:
        return load_settings().default_locale

    normalized = locale.strip().lower().split("-")[0].split("_")[0]
    return normalized if normalized in available_locales() else _base_locale()


@cache
def _translator_for(locale: str, base_locale: str) -> Translator:
    registry = TranslationRegistry(locale=locale, fallback_locale=base_locale)
    registry.set_locale_message(base_locale, load_bundle(base_locale))
    if locale != base_locale:
        registry.set_locale_message(locale, load_bundle(locale))
    return Translator(locale=locale, registry=registry)


def get_translator(locale: str | None = None) -> Translator:
    """Return a translator instance for the requested locale."""

    return _translator_for(normalise_locale(locale), _base_locale())


def load_translations(locale: str | None = None) -> dict[str, Any]:
    """Expose a bundle and its fallback for API consumers."""

    normalized = normalise_locale(locale)
    base_locale = _base_locale()

    return {
        "locale": normalized,
        "available_locales": list(available_locales()),
        "messages": dict(load_bundle(normalized)),
        "fallback": {
            "locale": base_locale,
            "messages": dict(load_bundle(base_locale)),
        },
    }


__all__ = [
    "Translator",
    "get_translator",
    "load_bundle",
    "load_translations",
    "normalise_locale",
]

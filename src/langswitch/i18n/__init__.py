"""Runtime-switchable localisation: bundle sources, registry and loader."""

from .context import LocaleContext, create_locale_context
from .errors import BundleError, FetchError, ParseError
from .loader import LoadState, LocaleBundleLoader
from .registry import ActiveLocale, TranslationRegistry
from .sources import (
    BundleSource,
    HttpBundleSource,
    PackageBundleSource,
    available_locales,
    read_bundle,
)

__all__ = [
    "ActiveLocale",
    "BundleError",
    "BundleSource",
    "FetchError",
    "HttpBundleSource",
    "LoadState",
    "LocaleBundleLoader",
    "LocaleContext",
    "PackageBundleSource",
    "ParseError",
    "TranslationRegistry",
    "available_locales",
    "create_locale_context",
    "read_bundle",
]

"""Translation registry with an observable active locale."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

LocaleListener = Callable[[str, str], None]

_PLACEHOLDER = re.compile(r"{\s*([A-Za-z0-9_]+)\s*}")


class ActiveLocale:
    """Mutable cell holding the currently selected language."""

    def __init__(self, value: str) -> None:
        self._value = value
        self._listeners: list[LocaleListener] = []

    @property
    def value(self) -> str:
        return self._value

    def set(self, value: str) -> None:
        previous = self._value
        if value == previous:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(value, previous)

    def subscribe(self, listener: LocaleListener) -> Callable[[], None]:
        """Call ``listener(new, old)`` on every change; return an unsubscribe hook."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


def _lookup(messages: Mapping[str, Any], key: str) -> str | None:
    value = messages.get(key)
    if isinstance(value, str):
        return value

    cursor: Any = messages
    for part in key.split("."):
        if not isinstance(cursor, Mapping) or part not in cursor:
            return None
        cursor = cursor[part]
    return cursor if isinstance(cursor, str) else None


def _interpolate(message: str, params: Mapping[str, Any]) -> str:
    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        return str(params[name]) if name in params else match.group(0)

    return _PLACEHOLDER.sub(replace, message)


class TranslationRegistry:
    """Hold one translation dictionary per language and resolve message keys."""

    def __init__(self, locale: str = "en", fallback_locale: str = "en") -> None:
        self.locale = ActiveLocale(locale)
        self.fallback_locale = fallback_locale
        self._messages: dict[str, dict[str, Any]] = {}

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(sorted(self._messages))

    def set_locale_message(self, lang: str, messages: Mapping[str, Any]) -> None:
        """Register or replace the bundle for ``lang``."""

        self._messages[lang] = dict(messages)
        logger.debug("Registered %d messages for locale %s", len(messages), lang)

    def get_locale_message(self, lang: str) -> dict[str, Any]:
        return self._messages.get(lang, {})

    def has_locale(self, lang: str) -> bool:
        return lang in self._messages

    def t(
        self,
        key: str,
        params: Mapping[str, Any] | None = None,
        *,
        locale: str | None = None,
    ) -> str:
        """Return the message for ``key``, falling back to the key itself."""

        requested = locale or self.locale.value
        message = _lookup(self._messages.get(requested, {}), key)
        if message is None and requested != self.fallback_locale:
            message = _lookup(self._messages.get(self.fallback_locale, {}), key)
        if message is None:
            return key
        return _interpolate(message, params) if params else message


__all__ = ["ActiveLocale", "LocaleListener", "TranslationRegistry"]

"""Helpers for normalising incoming JSON requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Request
from werkzeug.exceptions import BadRequest

from langswitch.backend.localization import normalise_locale


def resolve_locale(req: Request, payload: Mapping[str, Any] | None = None) -> str:
    """Pick the locale from the payload, the query string or ``Accept-Language``."""

    locale = (payload or {}).get("locale")
    if isinstance(locale, str) and locale.strip():
        return normalise_locale(locale)

    locale_param = req.args.get("locale")
    if locale_param:
        return normalise_locale(locale_param)

    accept_language = req.headers.get("Accept-Language")
    if accept_language:
        primary = accept_language.split(",")[0].split(";")[0].strip()
        if primary:
            return normalise_locale(primary)

    return normalise_locale(None)


def parse_json_object(req: Request) -> dict[str, Any]:
    """Extract a JSON object from ``req`` and stamp the resolved locale on it."""

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")

    payload = dict(data)
    payload["locale"] = resolve_locale(req, payload)
    return payload


def parse_page_argument(req: Request, name: str = "page") -> int:
    raw = req.args.get(name)
    if raw is None or not raw.strip():
        return 1
    try:
        return int(raw)
    except ValueError as exc:
        raise BadRequest(f"Query parameter '{name}' must be an integer") from exc


__all__ = ["parse_json_object", "parse_page_argument", "resolve_locale"]

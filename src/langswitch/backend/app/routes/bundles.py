"""Serve packaged locale bundles at the address the HTTP bundle source expects."""

from __future__ import annotations

import re
from importlib import resources

from flask import Blueprint, Response

from langswitch.backend.app.http import not_found
from langswitch.i18n.sources import TRANSLATIONS_PACKAGE

blueprint = Blueprint("bundles", __name__, url_prefix="/mock")

_LANGUAGE_ID = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*$")


@blueprint.get("/<lang>.json")
def get_bundle(lang: str):
    """Return the raw bundle file so clients parse exactly what is shipped."""

    if not _LANGUAGE_ID.match(lang):
        return not_found(f"Unknown locale: {lang}").to_response()

    resource = resources.files(TRANSLATIONS_PACKAGE).joinpath(f"{lang}.json")
    if not resource.is_file():
        return not_found(f"Unknown locale: {lang}").to_response()

    return Response(resource.read_bytes(), status=200, mimetype="application/json")

"""Paginated, localised view over the demo people table."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from langswitch.backend.app.models import PeoplePage
from langswitch.backend.config import load_settings
from langswitch.backend.localization import get_translator
from langswitch.backend.services import parse_page_argument, resolve_locale
from langswitch.ui.datatable import DEFAULT_COLUMNS, DEMO_ROWS, Datatable

blueprint = Blueprint("people", __name__, url_prefix="/api/v1")


@blueprint.get("/people")
def list_people() -> tuple[Any, int]:
    """Return one page of rows with column labels in the requested locale."""

    translator = get_translator(resolve_locale(request))
    table = Datatable(DEFAULT_COLUMNS, DEMO_ROWS, load_settings().page_size, translator)
    # Out-of-range pages raise ValueError, rendered as a 400 by the app.
    table.go_to(parse_page_argument(request))

    page = PeoplePage(
        locale=translator.locale,
        columns=[
            {"key": column.key, "label": column.label} for column in table.translated_columns
        ],
        rows=[dict(row) for row in table.paginated_rows],
        page=table.current_page,
        total_pages=table.total_pages,
        page_info=table.page_info,
        previous_label=translator("PreviousPage"),
        next_label=translator("NextPage"),
    )
    return jsonify(page.model_dump()), 200

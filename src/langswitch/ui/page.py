"""Application root wiring the locale context into the table and the form."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from langswitch.i18n import BundleSource, LocaleContext, create_locale_context

from .datatable import DEFAULT_COLUMNS, DEMO_ROWS, Column, Datatable
from .form import ContactForm

logger = logging.getLogger(__name__)


class DemoPage:
    """Own the locale services and the components that render with them."""

    def __init__(
        self,
        context: LocaleContext,
        *,
        columns: Sequence[Column] = DEFAULT_COLUMNS,
        rows: Sequence[Mapping[str, Any]] = DEMO_ROWS,
        page_size: int = 2,
    ) -> None:
        self.context = context
        self.table = Datatable(columns, rows, page_size, context.t)
        self.form = ContactForm(context.t)
        self.submitted: list[dict[str, str]] = []
        context.add_revalidator(self.form.validate)

    @classmethod
    def create(
        cls,
        source: BundleSource,
        *,
        locale: str = "en",
        fallback_locale: str = "en",
        page_size: int = 2,
    ) -> DemoPage:
        context = create_locale_context(source, locale=locale, fallback_locale=fallback_locale)
        return cls(context, page_size=page_size)

    @property
    def locale(self) -> str:
        return self.context.locale

    async def start(self) -> None:
        """Load the bundle for the initial locale."""

        await self.context.ensure_loaded(self.context.locale)

    async def change_language(self, lang: str) -> None:
        await self.context.change_language(lang)

    def submit(self) -> dict[str, str] | None:
        return self.form.handle_submit(self._record_submission)

    def _record_submission(self, values: dict[str, str]) -> dict[str, str]:
        logger.info("Contact form submitted in locale %s", self.locale)
        self.submitted.append(values)
        return values

    def render(self) -> dict[str, Any]:
        """Return a plain snapshot of everything the page displays."""

        t = self.context.t
        table = self.table
        return {
            "locale": self.locale,
            "title": t("Title"),
            "language_label": t("ChangeLanguage"),
            "table": {
                "columns": [
                    {"key": column.key, "label": column.label}
                    for column in table.translated_columns
                ],
                "rows": [dict(row) for row in table.paginated_rows],
                "page_info": table.page_info,
                "current_page": table.current_page,
                "total_pages": table.total_pages,
                "previous": {"label": t("PreviousPage"), "disabled": not table.has_previous},
                "next": {"label": t("NextPage"), "disabled": not table.has_next},
            },
            "form": {
                "labels": {
                    "name": t("Form.Name"),
                    "email": t("Form.Email"),
                    "submit": t("Form.Submit"),
                },
                "values": dict(self.form.values),
                "errors": dict(self.form.errors),
            },
        }


__all__ = ["DemoPage"]

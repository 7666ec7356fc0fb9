"""Paginated table whose column labels and page caption are localised."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

Translate = Callable[..., str]


@dataclass(frozen=True)
class Column:
    """Table column keyed into each row; ``label`` is a message key."""

    key: str
    label: str


DEFAULT_COLUMNS: tuple[Column, ...] = (
    Column(key="id", label="Table.Id"),
    Column(key="name", label="Table.Name"),
    Column(key="age", label="Table.Age"),
    Column(key="country", label="Table.Country"),
)

DEMO_ROWS: tuple[dict[str, Any], ...] = (
    {"id": 1, "name": "John Doe", "age": 30, "country": "USA"},
    {"id": 2, "name": "Jane Smith", "age": 25, "country": "Canada"},
    {"id": 3, "name": "Bob Johnson", "age": 35, "country": "UK"},
)


class Datatable:
    def __init__(
        self,
        columns: Sequence[Column],
        rows: Sequence[Mapping[str, Any]],
        page_size: int,
        translate: Translate,
    ) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be a positive integer")
        self.columns = tuple(columns)
        self.rows = tuple(rows)
        self.page_size = page_size
        self.translate = translate
        self.current_page = 1

    @property
    def translated_columns(self) -> list[Column]:
        return [replace(column, label=self.translate(column.label)) for column in self.columns]

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.rows) / self.page_size)

    @property
    def paginated_rows(self) -> list[Mapping[str, Any]]:
        start = (self.current_page - 1) * self.page_size
        return list(self.rows[start : start + self.page_size])

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def page_info(self) -> str:
        return self.translate(
            "pageInfo", {"current": self.current_page, "total": self.total_pages}
        )

    def next_page(self) -> None:
        if self.has_next:
            self.current_page += 1

    def previous_page(self) -> None:
        if self.has_previous:
            self.current_page -= 1

    def go_to(self, page: int) -> None:
        """Jump to ``page``; out-of-range pages raise ``ValueError``."""

        if page < 1 or page > max(self.total_pages, 1):
            raise ValueError(f"Page {page} is out of range (1-{max(self.total_pages, 1)})")
        self.current_page = page


__all__ = ["Column", "DEFAULT_COLUMNS", "DEMO_ROWS", "Datatable", "Translate"]

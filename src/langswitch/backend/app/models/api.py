"""Pydantic models describing the public API surface."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from langswitch.ui.form import CONTACT_RULES, first_failure

__all__ = [
    "CONTACT_RULE_ERROR",
    "ContactSubmission",
    "PeoplePage",
    "format_validation_error",
    "localise_validation_errors",
]

CONTACT_RULE_ERROR = "contact_rule"


class ContactSubmission(BaseModel):
    """Contact form payload checked with the same rules as the page form."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="", validate_default=True)
    email: str = Field(default="", validate_default=True)
    locale: str | None = None

    @field_validator("name", "email", mode="before")
    @classmethod
    def _coerce_missing(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("name", "email")
    @classmethod
    def _apply_contact_rules(cls, value: str, info: ValidationInfo) -> str:
        key = first_failure(value, CONTACT_RULES[info.field_name])
        if key is not None:
            raise PydanticCustomError(CONTACT_RULE_ERROR, "{key}", {"key": key})
        return value


class PeoplePage(BaseModel):
    """Serialised view of one page of the localised people table."""

    locale: str
    columns: list[dict[str, str]]
    rows: list[dict[str, Any]]
    page: int = Field(ge=1)
    total_pages: int = Field(ge=0)
    page_info: str
    previous_label: str
    next_label: str


def _field_of(issue: Mapping[str, Any]) -> str:
    return ".".join(str(part) for part in issue.get("loc", ()))


def localise_validation_errors(
    error: ValidationError, translate: Callable[[str], str]
) -> dict[str, str]:
    """Map each invalid field to a message in the caller's language."""

    messages: dict[str, str] = {}
    for issue in error.errors():
        field = _field_of(issue) or "__root__"
        if issue.get("type") == CONTACT_RULE_ERROR:
            messages.setdefault(field, translate(issue["ctx"]["key"]))
        else:
            messages.setdefault(field, issue.get("msg", "Invalid value"))
    return messages


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    parts: list[str] = []
    for issue in error.errors():
        location = _field_of(issue)
        message = issue.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)

"""Contact form with rule-based, localised validation."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .datatable import Translate

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# A rule returns ``True`` when the value passes, otherwise the message key.
Rule = Callable[[str], "bool | str"]


def required(message_key: str) -> Rule:
    def rule(value: str) -> bool | str:
        return bool(value) or message_key

    return rule


def matches(pattern: re.Pattern[str], message_key: str) -> Rule:
    def rule(value: str) -> bool | str:
        return bool(pattern.fullmatch(value)) or message_key

    return rule


CONTACT_RULES: Mapping[str, Sequence[Rule]] = {
    "name": (required("Form.NameRequired"),),
    "email": (
        required("Form.EmailRequired"),
        matches(EMAIL_PATTERN, "Form.EmailInvalid"),
    ),
}


def first_failure(value: str, rules: Sequence[Rule]) -> str | None:
    """Return the message key of the first failing rule, if any."""

    for rule in rules:
        outcome = rule(value)
        if outcome is not True:
            return str(outcome)
    return None


class ContactForm:
    """Hold field values and the errors currently on display."""

    def __init__(
        self,
        translate: Translate,
        rules: Mapping[str, Sequence[Rule]] = CONTACT_RULES,
    ) -> None:
        self.translate = translate
        self.rules = rules
        self.values: dict[str, str] = {field: "" for field in rules}
        self.errors: dict[str, str] = {}

    def set_value(self, field: str, value: str | None) -> None:
        if field not in self.rules:
            raise KeyError(f"Unknown form field: {field}")
        self.values[field] = value or ""

    def validate(self) -> bool:
        errors: dict[str, str] = {}
        for field, rules in self.rules.items():
            key = first_failure(self.values[field], rules)
            if key is not None:
                errors[field] = self.translate(key)
        self.errors = errors
        return not errors

    def handle_submit(self, callback: Callable[[dict[str, str]], Any]) -> Any:
        if not self.validate():
            return None
        return callback(dict(self.values))


__all__ = [
    "CONTACT_RULES",
    "ContactForm",
    "EMAIL_PATTERN",
    "Rule",
    "first_failure",
    "matches",
    "required",
]

"""Rule evaluation and localised errors of the contact form."""

from __future__ import annotations

import pytest

from langswitch.ui import EMAIL_PATTERN, ContactForm


def _form() -> ContactForm:
    return ContactForm(lambda key: f"<{key}>")


def test_empty_form_reports_required_fields() -> None:
    form = _form()

    assert form.validate() is False
    assert form.errors == {"name": "<Form.NameRequired>", "email": "<Form.EmailRequired>"}


def test_invalid_email_reports_the_pattern_rule() -> None:
    form = _form()
    form.set_value("name", "Jane")
    form.set_value("email", "jane@example")

    assert form.validate() is False
    assert form.errors == {"email": "<Form.EmailInvalid>"}


@pytest.mark.parametrize(
    ("value", "valid"),
    [
        ("jane@example.com", True),
        ("a@b.c", True),
        ("jane smith@example.com", False),
        ("jane@@example.com", False),
        ("@example.com", False),
        ("jane@example.com\n", False),
    ],
)
def test_email_pattern(value: str, valid: bool) -> None:
    assert bool(EMAIL_PATTERN.fullmatch(value)) is valid


def test_trailing_newline_in_email_is_invalid() -> None:
    form = _form()
    form.set_value("name", "Jane")
    form.set_value("email", "jane@example.com\n")

    assert form.validate() is False
    assert form.errors == {"email": "<Form.EmailInvalid>"}


def test_validate_again_refreshes_displayed_errors() -> None:
    messages = {"Form.NameRequired": "Name is required"}
    form = ContactForm(lambda key: messages.get(key, key))
    form.validate()

    messages["Form.NameRequired"] = "Le nom est obligatoire"
    form.validate()

    assert form.errors["name"] == "Le nom est obligatoire"


def test_handle_submit_only_calls_back_when_valid() -> None:
    form = _form()
    received: list[dict[str, str]] = []

    assert form.handle_submit(received.append) is None
    assert received == []

    form.set_value("name", "Jane")
    form.set_value("email", "jane@example.com")
    form.handle_submit(received.append)

    assert received == [{"name": "Jane", "email": "jane@example.com"}]


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(KeyError):
        _form().set_value("phone", "123")

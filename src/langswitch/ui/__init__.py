"""Localised table, form and page components."""

from .datatable import DEFAULT_COLUMNS, DEMO_ROWS, Column, Datatable
from .form import CONTACT_RULES, EMAIL_PATTERN, ContactForm, first_failure
from .page import DemoPage

__all__ = [
    "CONTACT_RULES",
    "Column",
    "ContactForm",
    "DEFAULT_COLUMNS",
    "DEMO_ROWS",
    "Datatable",
    "DemoPage",
    "EMAIL_PATTERN",
    "first_failure",
]

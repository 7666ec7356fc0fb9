"""Typed request/response models for the HTTP API."""

from .api import (
    CONTACT_RULE_ERROR,
    ContactSubmission,
    PeoplePage,
    format_validation_error,
    localise_validation_errors,
)

__all__ = [
    "CONTACT_RULE_ERROR",
    "ContactSubmission",
    "PeoplePage",
    "format_validation_error",
    "localise_validation_errors",
]

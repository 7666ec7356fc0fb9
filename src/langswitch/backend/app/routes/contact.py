"""Validate contact form submissions in the submitter's language."""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from langswitch.backend.app.http import validation_failed
from langswitch.backend.app.models import ContactSubmission, localise_validation_errors
from langswitch.backend.localization import get_translator
from langswitch.backend.services import parse_json_object

blueprint = Blueprint("contact", __name__, url_prefix="/api/v1")

logger = logging.getLogger(__name__)


@blueprint.post("/contact")
def submit_contact() -> tuple[Any, int]:
    payload = parse_json_object(request)
    translator = get_translator(payload["locale"])

    try:
        submission = ContactSubmission.model_validate(payload)
    except ValidationError as error:
        errors = localise_validation_errors(error, translator)
        logger.debug("Rejected contact submission: %s", sorted(errors))
        return validation_failed("Contact form is invalid", errors).to_response()

    values = submission.model_dump(exclude={"locale"})
    logger.info("Accepted contact submission in locale %s", translator.locale)
    return jsonify({"locale": translator.locale, "values": values}), 200

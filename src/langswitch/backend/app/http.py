"""HTTP helper utilities shared across Flask blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Mapping

from flask import jsonify


@dataclass(frozen=True)
class ProblemResponse:
    """Lightweight representation of an RFC 7807-style error payload."""

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        if self.extra:
            payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    """Convenience factory mirroring Flask's ``jsonify`` interface."""

    return ProblemResponse(error=error, status=status, message=message, extra=extra or None)


def not_found(message: str) -> ProblemResponse:
    return problem_response("not_found", status=HTTPStatus.NOT_FOUND, message=message)


def validation_failed(message: str, errors: Mapping[str, str]) -> ProblemResponse:
    """Problem payload carrying per-field messages for form clients."""

    return problem_response(
        "validation_error",
        status=HTTPStatus.UNPROCESSABLE_ENTITY,
        message=message,
        errors=dict(errors),
    )


__all__ = ["ProblemResponse", "not_found", "problem_response", "validation_failed"]

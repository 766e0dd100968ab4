"""Helpers shared by the API views for the ``{"error": ...}`` response shape."""

from __future__ import annotations

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.domain.exceptions import DomainError


def error_response(message: str, status_code: int = status.HTTP_400_BAD_REQUEST, details=None) -> Response:
    payload = {"error": message}
    if details is not None:
        payload["details"] = details
    return Response(payload, status=status_code)


def domain_error_response(exc: DomainError) -> Response:
    return error_response(exc.message, exc.status_code)


def first_error(errors) -> str:
    """Flatten DRF serializer errors to the first human-readable message."""
    if isinstance(errors, dict):
        for field, value in errors.items():
            message = first_error(value)
            return message if field == "non_field_errors" else f"{field}: {message}"
    if isinstance(errors, (list, tuple)) and errors:
        return first_error(errors[0])
    return str(errors)


def invalid_input_response(serializer) -> Response:
    return error_response(first_error(serializer.errors), details=serializer.errors)

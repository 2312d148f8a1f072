"""Validation Step: status code classification."""

from __future__ import annotations

from core.domain.models import Response, StatusClass
from core.errors import ClientError, ServerError


def classify_status(status_code: int) -> StatusClass:
    if 200 <= status_code <= 299:
        return StatusClass.SUCCESS
    if 400 <= status_code <= 499:
        return StatusClass.CLIENT_ERROR
    if 500 <= status_code <= 599:
        return StatusClass.SERVER_ERROR
    return StatusClass.OTHER


def validate_response(response: Response) -> Response:
    """Halt on 4xx/5xx, otherwise hand the response back unchanged.

    Codes outside the two error ranges (1xx, 3xx, anything unusual) pass.
    """

    status = classify_status(response.status_code)
    if status is StatusClass.CLIENT_ERROR:
        raise ClientError(response.status_code)
    if status is StatusClass.SERVER_ERROR:
        raise ServerError(response.status_code)
    return response

"""Helpers shared by the services."""

import re
from typing import Any

from marshmallow import Schema, ValidationError

from tasktracker.errors import BadRequestError, ValidationFailed


ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Ids are 32-bit INTEGER columns
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


def parse_id(raw: str, message: str) -> int:
    """Parse a path id, raising ``BadRequestError(message)`` unless it is a decimal
    integer that fits the id column.
    """
    if not isinstance(raw, str) or not ID_PATTERN.fullmatch(raw):
        raise BadRequestError(message)
    value = int(raw)
    if not MIN_ID <= value <= MAX_ID:
        raise BadRequestError(message)
    return value


def load_payload(schema: Schema, payload: Any) -> dict[str, Any]:
    """Validate a decoded JSON body against ``schema``.

    Raises:
        BadRequestError: The body is not a JSON object.
        ValidationFailed: The schema rejected one or more fields.
    """
    if not isinstance(payload, dict):
        raise BadRequestError("Invalid request body")
    try:
        return schema.load(payload)
    except ValidationError as err:
        raise ValidationFailed(err.normalized_messages()) from err

"""Request body helpers shared by the handlers."""

from collections.abc import Mapping
from typing import Any

from rest_framework.request import Request

from core.errors import ValidationError


def json_object(request: Request) -> Mapping[str, Any]:
    """Return the parsed JSON body, which must be an object.

    An empty body counts as an empty object.
    """
    data = request.data
    if not data:
        return {}
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return data


def optional_str(payload: Mapping[str, Any], field: str) -> str | None:
    value = payload.get(field)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ValidationError(f"{field} must be a string")
    return str(value)

"""Structural validation of incoming payloads.

Runs synchronously before any repository call so malformed input can never
cause a partial side effect.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

import pydantic

from amcore.domain.shared.error import InvalidRequestError
from amcore.domain.shared.model.value import Payload

P = TypeVar("P", bound=Payload)


def validate_payload(model: type[P], payload: Mapping[str, Any] | P | None) -> P:
    """Parse ``payload`` into ``model`` or raise InvalidRequestError."""
    if isinstance(payload, model):
        return payload
    if payload is None:
        raise InvalidRequestError("Request body is required")
    if not isinstance(payload, Mapping):
        raise InvalidRequestError("Request body must be a JSON object")

    try:
        return model.model_validate(dict(payload))
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        message = f"{field}: {first['msg']}" if field else first["msg"]
        raise InvalidRequestError(message, field=field) from e

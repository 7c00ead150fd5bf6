"""Shared helpers for Bus Tracker endpoint modules.

This module centralizes the most repeated patterns:
- unwrapping the ``bustime-response`` envelope
- mapping the upstream ``error`` list to :class:`CtaBusApiError`
- validating list items into models, skipping malformed ones

It is internal to pyctabus and may change at any time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from pyctabus._constants import ENVELOPE_KEY
from pyctabus._transport import Transport
from pyctabus.exceptions import CtaBusApiError, CtaBusResponseError

_logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _error_messages(errors: Any) -> tuple[str, ...]:
    if isinstance(errors, dict):
        errors = [errors]
    if not isinstance(errors, list):
        return ()
    messages: list[str] = []
    for item in errors:
        if isinstance(item, dict):
            msg = item.get("msg") or item.get("message")
            if msg:
                messages.append(str(msg))
        elif isinstance(item, str):
            messages.append(item)
    return tuple(messages)


def unwrap_envelope(*, endpoint: str, response: Any, field: str) -> list[Any]:
    """Return ``response[ENVELOPE_KEY][field]`` as a list.

    Raises
    ------
    CtaBusApiError
        The envelope carries an ``error`` list instead of *field*.
    CtaBusResponseError
        The envelope or the field is missing or not the expected type.
    """
    if not isinstance(response, dict):
        raise CtaBusResponseError(
            f"{endpoint} returned {type(response).__name__}, expected an object",
            endpoint=endpoint,
        )
    body = response.get(ENVELOPE_KEY)
    if not isinstance(body, dict):
        raise CtaBusResponseError(f"{endpoint} response has no {ENVELOPE_KEY!r} object", endpoint=endpoint)

    items = body.get(field)
    if items is None and "error" in body:
        messages = _error_messages(body["error"])
        raise CtaBusApiError(
            f"{endpoint} error: {'; '.join(messages) or 'unknown'}",
            endpoint=endpoint,
            messages=messages,
        )
    if isinstance(items, dict):
        # Single-item results occasionally arrive unwrapped.
        items = [items]
    if not isinstance(items, list):
        raise CtaBusResponseError(f"{endpoint} response field {field!r} is not a list", endpoint=endpoint)
    return items


def parse_items(endpoint: str, items: list[Any], model: type[ModelT]) -> list[ModelT]:
    """Validate each item into *model*, dropping the ones that do not fit."""
    parsed: list[ModelT] = []
    for item in items:
        try:
            parsed.append(model.model_validate(item))
        except ValidationError as exc:
            _logger.warning("Skipping malformed %s item from %s: %s", model.__name__, endpoint, exc.errors()[:1])
    return parsed


async def get_envelope_list(
    *,
    transport: Transport,
    endpoint: str,
    field: str,
    model: type[ModelT],
    params: Mapping[str, str] | None = None,
) -> list[ModelT]:
    """GET *endpoint* and return the items of the enveloped *field* as models."""
    response = await transport.get_json(endpoint, params)
    items = unwrap_envelope(endpoint=endpoint, response=response, field=field)
    return parse_items(endpoint, items, model)

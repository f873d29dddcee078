"""Shared helpers for Dragon Ball API endpoint modules.

This module centralizes the most repeated patterns:
- validating a paginated envelope into a typed :class:`Page`
- validating a single-item payload
- accepting list payloads delivered either as a raw array or as ``{"items": [...]}``

It is internal to pydragonball and may change at any time.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from pydragonball.exceptions import DragonBallResponseError
from pydragonball.models.page import Page

_logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=BaseModel)


def parse_page(payload: Any, model: type[TModel], *, endpoint: str) -> Page[TModel]:
    """Validate a paginated ``{items, meta, links}`` envelope."""
    if not isinstance(payload, dict) or not isinstance(payload.get("items"), list):
        raise DragonBallResponseError(f"Expected a paginated envelope from {endpoint}", endpoint=endpoint)
    try:
        return Page[model].model_validate(payload)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise DragonBallResponseError(f"Malformed page from {endpoint}: {exc}", endpoint=endpoint) from exc


def parse_item(payload: Any, model: type[TModel], *, endpoint: str) -> TModel:
    """Validate a single-object payload."""
    if not isinstance(payload, dict):
        raise DragonBallResponseError(f"Expected an object from {endpoint}", endpoint=endpoint)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DragonBallResponseError(f"Malformed item from {endpoint}: {exc}", endpoint=endpoint) from exc


def extract_items(payload: Any, *, endpoint: str) -> list[Any] | None:
    """Return the list carried by *payload*, or ``None`` for any other shape.

    Accepts a raw JSON array or an object with an ``items`` array.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("items"), list):
        _logger.debug("%s returned an object with an items array", endpoint)
        return payload["items"]
    return None


def parse_item_list(payload: Any, model: type[TModel], *, endpoint: str) -> list[TModel]:
    """Validate a list payload (raw array or ``{"items": [...]}``)."""
    raw_items = extract_items(payload, endpoint=endpoint)
    if raw_items is None:
        raise DragonBallResponseError(f"Expected a list from {endpoint}", endpoint=endpoint)
    try:
        return [model.model_validate(item) for item in raw_items if isinstance(item, dict)]
    except ValidationError as exc:
        raise DragonBallResponseError(f"Malformed list from {endpoint}: {exc}", endpoint=endpoint) from exc

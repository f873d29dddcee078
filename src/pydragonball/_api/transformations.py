"""Transformation endpoints.

Endpoints:
  - /transformations (raw, unpaginated array)
  - /transformations/{id}
"""

from __future__ import annotations

from pydragonball._api._common import parse_item, parse_item_list
from pydragonball._transport import Transport
from pydragonball.models.transformation import Transformation

_ENDPOINT = "/transformations"


async def fetch_all_transformations(transport: Transport) -> list[Transformation]:
    payload = await transport.get_json(_ENDPOINT)
    return parse_item_list(payload, Transformation, endpoint=_ENDPOINT)


async def fetch_transformation(transport: Transport, transformation_id: int) -> Transformation:
    endpoint = f"{_ENDPOINT}/{transformation_id}"
    payload = await transport.get_json(endpoint)
    return parse_item(payload, Transformation, endpoint=endpoint)

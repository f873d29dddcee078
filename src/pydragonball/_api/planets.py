"""Planet endpoints.

Endpoints:
  - /planets?page=&limit= (paginated listing)
  - /planets/{id}
"""

from __future__ import annotations

from pydragonball._api._common import parse_item, parse_page
from pydragonball._transport import Transport
from pydragonball.models.page import Page
from pydragonball.models.planet import Planet

_ENDPOINT = "/planets"


async def fetch_planets(transport: Transport, page: int, limit: int) -> Page[Planet]:
    payload = await transport.get_json(_ENDPOINT, {"page": page, "limit": limit})
    return parse_page(payload, Planet, endpoint=_ENDPOINT)


async def fetch_planet(transport: Transport, planet_id: int) -> Planet:
    endpoint = f"{_ENDPOINT}/{planet_id}"
    payload = await transport.get_json(endpoint)
    return parse_item(payload, Planet, endpoint=endpoint)

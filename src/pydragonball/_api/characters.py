"""Character endpoints.

Endpoints:
  - /characters?page=&limit= (paginated listing)
  - /characters?name= (search, unpaginated)
  - /characters/{id}
"""

from __future__ import annotations

import logging

from pydragonball._api._common import extract_items, parse_item, parse_item_list, parse_page
from pydragonball._transport import Transport
from pydragonball.models.character import Character
from pydragonball.models.page import Page

_logger = logging.getLogger(__name__)

_ENDPOINT = "/characters"


async def fetch_characters(transport: Transport, page: int, limit: int) -> Page[Character]:
    payload = await transport.get_json(_ENDPOINT, {"page": page, "limit": limit})
    return parse_page(payload, Character, endpoint=_ENDPOINT)


async def fetch_character(transport: Transport, character_id: int) -> Character:
    endpoint = f"{_ENDPOINT}/{character_id}"
    payload = await transport.get_json(endpoint)
    return parse_item(payload, Character, endpoint=endpoint)


async def search_characters(transport: Transport, name: str) -> list[Character]:
    """Search characters by name.

    The search endpoint answers with a raw array; an object carrying an
    ``items`` array is tolerated too. Any other shape yields no results.
    """
    payload = await transport.get_json(_ENDPOINT, {"name": name})
    raw_items = extract_items(payload, endpoint=_ENDPOINT)
    if raw_items is None:
        _logger.warning("Character search for %r returned an unexpected payload shape", name)
        return []
    return parse_item_list(raw_items, Character, endpoint=_ENDPOINT)

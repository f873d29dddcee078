"""Character catalog loader."""

from __future__ import annotations

import logging

from pydragonball.exceptions import DragonBallError
from pydragonball.ingestion.base import CatalogLoader, LoadResult
from pydragonball.models.character import Character
from pydragonball.state.enums import Domain

_logger = logging.getLogger(__name__)


class CharactersLoader(CatalogLoader[Character]):
    """Characters have a paginated listing and a server-side name search."""

    domain = Domain.CHARACTERS

    async def _fetch_page(self, page: int, page_size: int) -> tuple[list[Character], int]:
        result = await self._client.get_characters(page, page_size)
        return list(result.items), result.total_items

    async def _fetch_one(self, item_id: int) -> Character:
        return await self._client.get_character(item_id)

    async def search(self, term: str) -> LoadResult[Character]:
        """Remote name search; ``total_count`` is the number of matches."""
        try:
            matches = await self._client.search_characters(term)
        except DragonBallError as exc:
            _logger.warning("Character search for %r failed: %s", term, exc)
            return LoadResult.failed(str(exc))
        _logger.debug("Character search for %r returned %d items", term, len(matches))
        return LoadResult(items=matches, total_count=len(matches))

"""Transformation catalog loader.

The transformation listing endpoint returns the whole catalog as a raw
array, so this loader paginates it itself.
"""

from __future__ import annotations

import logging

from pydragonball.exceptions import DragonBallError
from pydragonball.ingestion.base import CatalogLoader, LoadResult
from pydragonball.ingestion.normalize import paginate
from pydragonball.models.transformation import Transformation
from pydragonball.state.enums import Domain

_logger = logging.getLogger(__name__)


class TransformationsLoader(CatalogLoader[Transformation]):
    domain = Domain.TRANSFORMATIONS

    async def _fetch_page(self, page: int, page_size: int) -> tuple[list[Transformation], int]:
        everything = await self._client.get_all_transformations()
        return paginate(everything, page, page_size), len(everything)

    async def _fetch_one(self, item_id: int) -> Transformation:
        return await self._client.get_transformation(item_id)

    async def for_character(self, character_name: str) -> LoadResult[Transformation]:
        """Transformations named after *character_name*."""
        try:
            matches = await self._client.get_character_transformations(character_name)
        except DragonBallError as exc:
            _logger.warning("Loading transformations for %s failed: %s", character_name, exc)
            return LoadResult.failed(str(exc))
        return LoadResult(items=matches, total_count=len(matches))

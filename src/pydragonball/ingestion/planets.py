"""Planet catalog loader."""

from __future__ import annotations

from pydragonball.ingestion.base import CatalogLoader
from pydragonball.models.planet import Planet
from pydragonball.state.enums import Domain


class PlanetsLoader(CatalogLoader[Planet]):
    domain = Domain.PLANETS
    search_fields = ("name", "description")

    async def _fetch_page(self, page: int, page_size: int) -> tuple[list[Planet], int]:
        result = await self._client.get_planets(page, page_size)
        return list(result.items), result.total_items

    async def _fetch_one(self, item_id: int) -> Planet:
        return await self._client.get_planet(item_id)

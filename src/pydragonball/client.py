"""High-level async client for the Dragon Ball API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pydragonball._api import characters as _characters_api
from pydragonball._api import planets as _planets_api
from pydragonball._api import transformations as _transformations_api
from pydragonball._transport import HttpTransport, Transport
from pydragonball.config import DragonBallConfig
from pydragonball.exceptions import DragonBallError
from pydragonball.models.character import Character
from pydragonball.models.page import Page
from pydragonball.models.planet import Planet
from pydragonball.models.transformation import Transformation

_logger = logging.getLogger(__name__)


class DragonBallClient:
    """Async client for the Dragon Ball API.

    Every method raises a :class:`~pydragonball.exceptions.DragonBallError`
    subclass on failure; converting failures into empty results is the job
    of the loaders in :mod:`pydragonball.ingestion`.

    Usage::

        async with DragonBallClient() as client:
            page = await client.get_characters(page=1, limit=12)
    """

    def __init__(
        self,
        config: DragonBallConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config if config is not None else DragonBallConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = None

    @property
    def config(self) -> DragonBallConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> DragonBallClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise DragonBallError("Client not initialized. Use 'async with DragonBallClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Characters
    # ------------------------------------------------------------------

    async def get_characters(self, page: int = 1, limit: int | None = None) -> Page[Character]:
        """Fetch one page of the character catalog."""
        return await _characters_api.fetch_characters(
            self._require_transport(),
            page,
            limit or self._config.page_size,
        )

    async def get_character(self, character_id: int) -> Character:
        """Fetch a single character, including origin planet and transformations."""
        return await _characters_api.fetch_character(self._require_transport(), character_id)

    async def search_characters(self, name: str) -> list[Character]:
        """Search characters by name (server side, unpaginated)."""
        return await _characters_api.search_characters(self._require_transport(), name)

    # ------------------------------------------------------------------
    # Planets
    # ------------------------------------------------------------------

    async def get_planets(self, page: int = 1, limit: int | None = None) -> Page[Planet]:
        """Fetch one page of the planet catalog."""
        return await _planets_api.fetch_planets(
            self._require_transport(),
            page,
            limit or self._config.page_size,
        )

    async def get_planet(self, planet_id: int) -> Planet:
        return await _planets_api.fetch_planet(self._require_transport(), planet_id)

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    async def get_all_transformations(self) -> list[Transformation]:
        """Fetch the whole transformation catalog (the endpoint is not paginated)."""
        return await _transformations_api.fetch_all_transformations(self._require_transport())

    async def get_transformation(self, transformation_id: int) -> Transformation:
        return await _transformations_api.fetch_transformation(self._require_transport(), transformation_id)

    async def get_character_transformations(self, character_name: str) -> list[Transformation]:
        """Transformations whose name contains *character_name* (case-insensitive)."""
        needle = character_name.lower()
        transformations = await self.get_all_transformations()
        matches = [t for t in transformations if needle in t.name.lower()]
        _logger.debug("Found %d transformations for %s", len(matches), character_name)
        return matches

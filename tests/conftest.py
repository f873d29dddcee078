from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest

from pydragonball.browser import CatalogBrowser
from pydragonball.config import DragonBallConfig
from pydragonball.exceptions import DragonBallNotFoundError, DragonBallTransportError
from pydragonball.ingestion.normalize import paginate
from pydragonball.models.character import Character
from pydragonball.models.page import Page, PageMeta
from pydragonball.models.planet import Planet
from pydragonball.models.transformation import Transformation
from pydragonball.sequence import TransformationSequence
from pydragonball.state.enums import Domain, View


def make_character(character_id: int, name: str | None = None) -> Character:
    return Character.model_validate(
        {
            "id": character_id,
            "name": name or f"Fighter {character_id}",
            "ki": "1.000",
            "maxKi": "2 Billion",
            "race": "Human",
            "gender": "Male",
            "affiliation": "Z Fighter",
            "deletedAt": None,
        }
    )


def make_planet(planet_id: int, name: str, description: str = "", *, destroyed: bool = False) -> Planet:
    return Planet.model_validate(
        {"id": planet_id, "name": name, "description": description, "isDestroyed": destroyed}
    )


def make_transformation(transformation_id: int, name: str | None = None) -> Transformation:
    return Transformation.model_validate(
        {"id": transformation_id, "name": name or f"Form {transformation_id}", "ki": "3 Billion"}
    )


@dataclass
class FakeCatalogClient:
    """Stands in for :class:`DragonBallClient`; records every call.

    Method names listed in ``failing`` raise a transport error. When ``gate``
    is set, calls wait for it before answering.
    """

    characters: list[Character] = field(default_factory=list)
    planets: list[Planet] = field(default_factory=list)
    transformations: list[Transformation] = field(default_factory=list)
    failing: set[str] = field(default_factory=set)
    gate: asyncio.Event | None = None
    calls: list[tuple[str, Any]] = field(default_factory=list)
    config: DragonBallConfig = field(default_factory=DragonBallConfig)

    def count(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)

    def args(self, method: str) -> list[Any]:
        return [arg for name, arg in self.calls if name == method]

    async def _enter(self, method: str, arg: Any = None) -> None:
        self.calls.append((method, arg))
        if self.gate is not None:
            await self.gate.wait()
        if method in self.failing:
            raise DragonBallTransportError(f"HTTP 500 from {method}", status_code=500, endpoint=method)

    @staticmethod
    def _by_id(items: list[Any], item_id: int, endpoint: str) -> Any:
        for item in items:
            if item.id == item_id:
                return item
        raise DragonBallNotFoundError(f"HTTP 404 from {endpoint}", status_code=404, endpoint=endpoint)

    async def get_characters(self, page: int = 1, limit: int | None = None) -> Page[Character]:
        await self._enter("get_characters", page)
        items = paginate(self.characters, page, limit or self.config.page_size)
        return Page[Character](items=items, meta=PageMeta(total_items=len(self.characters)))

    async def get_character(self, character_id: int) -> Character:
        await self._enter("get_character", character_id)
        return self._by_id(self.characters, character_id, f"/characters/{character_id}")

    async def search_characters(self, name: str) -> list[Character]:
        await self._enter("search_characters", name)
        return [c for c in self.characters if name.lower() in c.name.lower()]

    async def get_planets(self, page: int = 1, limit: int | None = None) -> Page[Planet]:
        await self._enter("get_planets", page)
        items = paginate(self.planets, page, limit or self.config.page_size)
        return Page[Planet](items=items, meta=PageMeta(total_items=len(self.planets)))

    async def get_planet(self, planet_id: int) -> Planet:
        await self._enter("get_planet", planet_id)
        return self._by_id(self.planets, planet_id, f"/planets/{planet_id}")

    async def get_all_transformations(self) -> list[Transformation]:
        await self._enter("get_all_transformations")
        return list(self.transformations)

    async def get_transformation(self, transformation_id: int) -> Transformation:
        await self._enter("get_transformation", transformation_id)
        return self._by_id(self.transformations, transformation_id, f"/transformations/{transformation_id}")

    async def get_character_transformations(self, character_name: str) -> list[Transformation]:
        await self._enter("get_character_transformations", character_name)
        return [t for t in self.transformations if character_name.lower() in t.name.lower()]


@dataclass
class RecordingPresenter:
    contents: list[str] = field(default_factory=list)
    details: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    loading: list[bool] = field(default_factory=list)
    pagination: list[tuple[int, int]] = field(default_factory=list)
    stats: list[tuple[int, int, int]] = field(default_factory=list)
    views: list[View] = field(default_factory=list)
    tabs: list[Domain] = field(default_factory=list)
    sequences: list[tuple[str, int]] = field(default_factory=list)

    def render_content(self, content: str) -> None:
        self.contents.append(content)

    def render_detail_content(self, content: str) -> None:
        self.details.append(content)

    def update_pagination(self, page: int, total_pages: int) -> None:
        self.pagination.append((page, total_pages))

    def update_stats(self, total_characters: int, total_planets: int, total_transformations: int) -> None:
        self.stats.append((total_characters, total_planets, total_transformations))

    def show_loading(self, loading: bool) -> None:
        self.loading.append(loading)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_view(self, view: View) -> None:
        self.views.append(view)

    def update_active_tab(self, tab: Domain) -> None:
        self.tabs.append(tab)

    def render_transformation(self, sequence: TransformationSequence) -> None:
        current = sequence.current
        self.sequences.append((current.name if current else "", sequence.index))


@pytest.fixture
def client() -> FakeCatalogClient:
    characters = [make_character(1, "Goku"), make_character(2, "Vegeta")]
    characters += [make_character(i) for i in range(3, 26)]
    planets = [
        make_planet(1, "Namek", "Hogar de los namekianos"),
        make_planet(2, "Tierra", "Planeta natal de Goku"),
        make_planet(3, "Vegeta", "Hogar de los Saiyans", destroyed=True),
    ]
    transformations = [
        make_transformation(1, "Goku SSJ"),
        make_transformation(2, "Goku SSJ2"),
        make_transformation(3, "Vegeta SSJ"),
    ]
    transformations += [make_transformation(i) for i in range(4, 15)]
    return FakeCatalogClient(characters=characters, planets=planets, transformations=transformations)


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def browser(client: FakeCatalogClient, presenter: RecordingPresenter) -> CatalogBrowser:
    return CatalogBrowser.from_client(client, presenter=presenter)  # type: ignore[arg-type]

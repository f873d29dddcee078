from __future__ import annotations

import io
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from pydragonball.browser import CatalogBrowser
from pydragonball.client import DragonBallClient
from pydragonball.config import DragonBallConfig
from pydragonball.exceptions import DragonBallError, DragonBallNotFoundError, DragonBallTransportError
from pydragonball.presentation import ConsolePresenter
from pydragonball.state.enums import DetailPhase, DetailType, Domain


def _character(character_id: int, name: str) -> dict[str, Any]:
    return {
        "id": character_id,
        "name": name,
        "ki": "60.000.000",
        "maxKi": "90 Septillion",
        "race": "Saiyan",
        "gender": "Male",
        "description": f"{name} description",
        "image": f"https://dragonball-api.com/characters/{character_id}.webp",
        "affiliation": "Z Fighter",
        "deletedAt": None,
    }


def _planet(planet_id: int, name: str, destroyed: bool = False) -> dict[str, Any]:
    return {
        "id": planet_id,
        "name": name,
        "isDestroyed": destroyed,
        "description": f"{name} description",
        "image": f"https://dragonball-api.com/planetas/{planet_id}.webp",
        "deletedAt": None,
    }


def _transformation(transformation_id: int, name: str, ki: str) -> dict[str, Any]:
    return {"id": transformation_id, "name": name, "image": "t.webp", "ki": ki, "deletedAt": None}


def _envelope(items: list[dict[str, Any]], page: int, limit: int) -> dict[str, Any]:
    start = (page - 1) * limit
    chunk = items[start : start + limit]
    return {
        "items": chunk,
        "meta": {
            "totalItems": len(items),
            "itemCount": len(chunk),
            "itemsPerPage": limit,
            "totalPages": max(1, -(-len(items) // limit)),
            "currentPage": page,
        },
        "links": {"first": "", "previous": "", "next": "", "last": ""},
    }


@dataclass
class FakeDragonBallBackend:
    characters: list[dict[str, Any]] = field(
        default_factory=lambda: [_character(1, "Goku"), _character(2, "Vegeta")]
        + [_character(i, f"Fighter {i}") for i in range(3, 59)]
    )
    planets: list[dict[str, Any]] = field(
        default_factory=lambda: [_planet(1, "Namek"), _planet(2, "Tierra"), _planet(3, "Vegeta", destroyed=True)]
    )
    transformations: list[dict[str, Any]] = field(
        default_factory=lambda: [
            _transformation(1, "Goku SSJ", "3 Billion"),
            _transformation(2, "Goku SSJ2", "6 Billion"),
            _transformation(3, "Vegeta SSJ", "330.000.000"),
        ]
    )
    search_shape: str = "array"
    failing: set[str] = field(default_factory=set)
    calls: dict[str, int] = field(default_factory=dict)

    def _record_call(self, endpoint: str) -> None:
        self.calls[endpoint] = self.calls.get(endpoint, 0) + 1

    @staticmethod
    def _by_id(items: list[dict[str, Any]], endpoint: str) -> dict[str, Any]:
        item_id = int(endpoint.rsplit("/", 1)[1])
        for item in items:
            if item["id"] == item_id:
                return item
        raise DragonBallNotFoundError(f"HTTP 404 from {endpoint}", status_code=404, endpoint=endpoint)

    async def get_json(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        self._record_call(endpoint)
        params = params or {}

        if endpoint in self.failing:
            raise DragonBallTransportError(f"HTTP 500 from {endpoint}", status_code=500, endpoint=endpoint)

        if endpoint == "/characters" and "name" in params:
            needle = str(params["name"]).lower()
            matches = [c for c in self.characters if needle in c["name"].lower()]
            if self.search_shape == "items":
                return {"items": matches}
            if self.search_shape == "garbage":
                return {"message": "unexpected"}
            return matches

        if endpoint == "/characters":
            return _envelope(self.characters, int(params["page"]), int(params["limit"]))

        if endpoint.startswith("/characters/"):
            character = dict(self._by_id(self.characters, endpoint))
            character["originPlanet"] = self.planets[2]
            character["transformations"] = self.transformations[:2]
            return character

        if endpoint == "/planets":
            return _envelope(self.planets, int(params["page"]), int(params["limit"]))

        if endpoint.startswith("/planets/"):
            return self._by_id(self.planets, endpoint)

        if endpoint == "/transformations":
            return self.transformations

        if endpoint.startswith("/transformations/"):
            return self._by_id(self.transformations, endpoint)

        raise AssertionError(f"Unexpected endpoint in fake backend: {endpoint}")


@pytest.fixture
def config() -> DragonBallConfig:
    return DragonBallConfig(base_url="http://dragonball.test/api", request_timeout=1.0)


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch) -> FakeDragonBallBackend:
    fake_backend = FakeDragonBallBackend()

    async def fake_get_json(_self: Any, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        return await fake_backend.get_json(endpoint, params)

    monkeypatch.setattr("pydragonball._transport.HttpTransport.get_json", fake_get_json)
    return fake_backend


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_e2e_browser_happy_path_exercises_full_library(
    config: DragonBallConfig, backend: FakeDragonBallBackend
) -> None:
    out = io.StringIO()

    async with DragonBallClient(config) as client:
        browser = CatalogBrowser.from_client(client, presenter=ConsolePresenter(out))
        await browser.start()

        state = browser.state
        assert state.total_characters == 58
        assert state.total_pages == 5
        assert state.total_planets == 3
        assert state.total_transformations == 3

        assert await browser.change_page(1) is True
        assert browser.state.characters[0].name == "Fighter 13"

        browser.navigate_to_detail(DetailType.CHARACTER, 13)
        assert browser.detail_phase is DetailPhase.DONE

        browser.navigate_to_detail(DetailType.CHARACTER, 1)
        await browser.join()

        await browser.switch_tab(Domain.PLANETS)
        assert [p.name for p in browser.state.planets] == ["Namek", "Tierra", "Vegeta"]

        await browser.switch_tab(Domain.CHARACTERS)
        await browser.set_search_term("veg")
        assert [c.name for c in browser.state.characters] == ["Vegeta"]

        sequence = await browser.show_transformations("Goku", 1)
        assert sequence is not None
        assert sequence.counter == "1 / 3"

    text = out.getvalue()
    assert "characters: 58  planets: 3  transformations: 3" in text
    assert "-- page 2 of 5 --" in text
    assert "Origin planet: Vegeta" in text
    assert "Goku [1 / 3] Goku (Original)" in text
    # Planets page 1 was cached by the stats load.
    assert backend.calls["/planets"] == 1
    assert backend.calls["/characters/1"] == 2


@pytest.mark.asyncio
@pytest.mark.e2e
@pytest.mark.parametrize(("shape", "expected"), [("array", ["Goku"]), ("items", ["Goku"]), ("garbage", [])])
async def test_e2e_search_accepts_both_list_shapes(
    config: DragonBallConfig, backend: FakeDragonBallBackend, shape: str, expected: list[str]
) -> None:
    backend.search_shape = shape

    async with DragonBallClient(config) as client:
        assert [c.name for c in await client.search_characters("goku")] == expected


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_e2e_failures_reach_the_presenter(config: DragonBallConfig, backend: FakeDragonBallBackend) -> None:
    backend.failing.add("/characters")
    out = io.StringIO()

    async with DragonBallClient(config) as client:
        browser = CatalogBrowser.from_client(client, presenter=ConsolePresenter(out))
        await browser.start()
        browser.navigate_to_detail(DetailType.PLANET, 42)
        await browser.join()

    text = out.getvalue()
    assert "error: Failed to load characters" in text
    assert "error: Planet #42 was not found" in text
    assert "No characters found" in text


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_e2e_client_errors_propagate(config: DragonBallConfig, backend: FakeDragonBallBackend) -> None:
    async with DragonBallClient(config) as client:
        with pytest.raises(DragonBallNotFoundError):
            await client.get_planet(42)
        matches = await client.get_character_transformations("vegeta")
        assert [t.name for t in matches] == ["Vegeta SSJ"]


@pytest.mark.asyncio
async def test_client_requires_context_manager(config: DragonBallConfig) -> None:
    client = DragonBallClient(config)
    with pytest.raises(DragonBallError):
        await client.get_characters()

"""Catalog browser: the orchestrator between state, cache, loaders and presenter."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine, Mapping
from typing import Any, cast

from pydragonball._browser import detail as _detail
from pydragonball._browser import listing as _listing
from pydragonball._cache import QueryCache
from pydragonball._constants import STATS_FLAG
from pydragonball.client import DragonBallClient
from pydragonball.config import DragonBallConfig
from pydragonball.ingestion import (
    CatalogLoader,
    CharactersLoader,
    LoadResult,
    PlanetsLoader,
    TransformationsLoader,
)
from pydragonball.presentation import NullPresenter, Presenter, Renderer, TextRenderer
from pydragonball.sequence import TransformationSequence
from pydragonball.state.enums import DetailPhase, DetailType, Domain, View
from pydragonball.state.policy import page_in_bounds
from pydragonball.state.store import AppState, StateStore

_logger = logging.getLogger(__name__)


class CatalogBrowser:
    """Browse the character, planet and transformation catalogs.

    The browser owns a :class:`StateStore` and subscribes to it: every
    snapshot is pushed to the presenter (view, tab, loading flag,
    pagination, stats) and may start a detail resolution.

    All methods must be called from the event loop the browser runs on.
    ``navigate_to_detail`` may schedule a background fetch; :meth:`join`
    waits for it.

    Usage::

        async with DragonBallClient() as client:
            browser = CatalogBrowser.from_client(client, presenter=ConsolePresenter())
            await browser.start()
            await browser.switch_tab(Domain.PLANETS)
    """

    def __init__(
        self,
        loaders: Mapping[Domain, CatalogLoader[Any]],
        *,
        config: DragonBallConfig | None = None,
        presenter: Presenter | None = None,
        renderer: Renderer | None = None,
        store: StateStore | None = None,
        cache: QueryCache | None = None,
    ) -> None:
        missing = [d.value for d in Domain if d not in loaders]
        if missing:
            raise ValueError(f"Missing loaders for: {', '.join(missing)}")
        self._config = config if config is not None else DragonBallConfig()
        self._loaders = dict(loaders)
        self.presenter: Presenter = presenter if presenter is not None else NullPresenter()
        self.renderer: Renderer = renderer if renderer is not None else TextRenderer()
        self.store = store if store is not None else StateStore()
        self.cache = cache if cache is not None else QueryCache(self._config.cache_max_entries)
        self.sequence: TransformationSequence | None = None

        self._detail_phase = DetailPhase.IDLE
        self._detail_generation = 0
        self._inflight: dict[str, asyncio.Future[LoadResult[Any]]] = {}
        self._tasks: set[asyncio.Task[Any]] = set()
        self._unsubscribe = self.store.subscribe(self._on_state)

    @classmethod
    def from_client(cls, client: DragonBallClient, **kwargs: Any) -> CatalogBrowser:
        """Build a browser with the default loaders around *client*."""
        loaders: dict[Domain, CatalogLoader[Any]] = {
            Domain.CHARACTERS: CharactersLoader(client),
            Domain.PLANETS: PlanetsLoader(client),
            Domain.TRANSFORMATIONS: TransformationsLoader(client),
        }
        kwargs.setdefault("config", client.config)
        return cls(loaders, **kwargs)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> AppState:
        return self.store.read()

    @property
    def page_size(self) -> int:
        return self._config.page_size

    @property
    def detail_phase(self) -> DetailPhase:
        return self._detail_phase

    def loader(self, domain: Domain) -> CatalogLoader[Any]:
        return self._loaders[Domain(domain)]

    @property
    def characters_loader(self) -> CharactersLoader:
        return cast(CharactersLoader, self._loaders[Domain.CHARACTERS])

    @property
    def transformations_loader(self) -> TransformationsLoader:
        return cast(TransformationsLoader, self._loaders[Domain.TRANSFORMATIONS])

    # ------------------------------------------------------------------
    # Store subscription
    # ------------------------------------------------------------------

    def _on_state(self, snapshot: AppState) -> None:
        self.presenter.show_view(snapshot.current_view)
        if snapshot.current_view == View.DETAIL:
            _detail.on_state(self, snapshot)
        self.presenter.update_active_tab(snapshot.current_tab)
        self.presenter.show_loading(snapshot.is_loading)
        self.presenter.update_pagination(snapshot.current_page, snapshot.total_pages)
        self.presenter.update_stats(
            snapshot.total_characters,
            snapshot.total_planets,
            snapshot.total_transformations,
        )

    def _spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Load page 1 of characters and, once per session, the catalog totals."""
        if self.cache.is_loaded(STATS_FLAG):
            await _listing.load_tab_data(self, Domain.CHARACTERS, 1)
            return
        await asyncio.gather(
            _listing.load_tab_data(self, Domain.CHARACTERS, 1),
            _listing.load_stats(self),
        )

    async def load_tab_data(self, tab: Domain | str, page: int) -> None:
        await _listing.load_tab_data(self, Domain(tab), page)

    async def perform_search(self, term: str, tab: Domain | str) -> None:
        await _listing.perform_search(self, term, Domain(tab))

    async def load_data_if_needed(self) -> None:
        """Reload whatever the current tab, page and search term call for."""
        await _listing.load_data_if_needed(self)

    async def switch_tab(self, tab: Domain | str) -> bool:
        """Show *tab* from page 1 with the search cleared.

        Returns ``False`` without doing anything when *tab* is already shown
        on the home view.
        """
        tab = Domain(tab)
        state = self.store.read()
        if state.current_tab == tab and state.current_view == View.HOME:
            return False
        _logger.debug("Switching tab %s -> %s", state.current_tab, tab)
        self.store.update(
            current_tab=tab,
            current_page=1,
            search_term="",
            current_view=View.HOME,
            current_detail_id=None,
            current_detail_type=None,
        )
        await self.load_data_if_needed()
        return True

    async def change_page(self, direction: int) -> bool:
        """Move *direction* pages; returns ``False`` when that leaves ``1 .. total_pages``."""
        state = self.store.read()
        new_page = state.current_page + direction
        if not page_in_bounds(new_page, state.total_pages):
            return False
        self.store.update(current_page=new_page)
        await self.load_data_if_needed()
        return True

    async def set_search_term(self, term: str) -> None:
        """Store *term* and, on the home view, reload for it."""
        self.store.update(search_term=term, current_page=1)
        if self.store.read().current_view == View.HOME:
            await self.load_data_if_needed()

    # ------------------------------------------------------------------
    # Detail view
    # ------------------------------------------------------------------

    def navigate_to_detail(self, detail_type: DetailType | str, item_id: int) -> None:
        """Open the detail view for one record.

        The record is rendered immediately when it is in the loaded list;
        otherwise it is fetched in the background (see :meth:`join`).
        """
        self._detail_phase = DetailPhase.IDLE
        self._detail_generation += 1
        self.store.update(
            current_view=View.DETAIL,
            current_detail_type=DetailType(detail_type),
            current_detail_id=item_id,
        )

    def go_back(self) -> None:
        self.store.update(current_view=View.HOME, current_detail_id=None, current_detail_type=None)

    # ------------------------------------------------------------------
    # Transformation sequence
    # ------------------------------------------------------------------

    async def show_transformations(self, character_name: str, character_id: int) -> TransformationSequence | None:
        """Build and render the sequence of forms for one character.

        The first entry is the character's original form; the rest are the
        transformations named after it. Returns ``None`` if the character
        could not be loaded.
        """
        found = await self.characters_loader.get_by_id(character_id)
        if found.item is None:
            if found.error is None:
                self.presenter.show_error(f"Character #{character_id} was not found")
            else:
                self.presenter.show_error("Failed to load character details")
            return None

        # A failed lookup leaves only the original form.
        result = await self.transformations_loader.for_character(character_name)
        self.sequence = TransformationSequence(character_name, [found.item.original_form(), *result.items])
        self.presenter.render_transformation(self.sequence)
        return self.sequence

    def next_transformation(self) -> bool:
        return self._step_sequence(1)

    def previous_transformation(self) -> bool:
        return self._step_sequence(-1)

    def _step_sequence(self, direction: int) -> bool:
        if self.sequence is None:
            return False
        moved = self.sequence.next() if direction > 0 else self.sequence.previous()
        if moved:
            self.presenter.render_transformation(self.sequence)
        return moved

    async def play_transformations(self, interval: float = 2.0) -> None:
        """Step through the sequence every *interval* seconds until the last form."""
        if self.sequence is None:
            return
        self.sequence.restart()
        self.presenter.render_transformation(self.sequence)
        while not self.sequence.at_end:
            await asyncio.sleep(interval)
            self.next_transformation()

    def close_transformations(self) -> None:
        self.sequence = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def join(self) -> None:
        """Wait for background detail fetches to finish."""
        while self._tasks:
            await asyncio.gather(*tuple(self._tasks))

    def close(self) -> None:
        """Detach from the store."""
        self._unsubscribe()

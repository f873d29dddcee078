"""Detail-view resolution for :class:`pydragonball.browser.CatalogBrowser`.

Resolution is driven by :class:`~pydragonball.state.enums.DetailPhase`::

    IDLE -> RESOLVING -> DONE                     (found in the loaded list)
    IDLE -> RESOLVING -> FETCHING_REMOTE -> DONE  (fetched by id)

Store notifications delivered while the phase is not ``IDLE`` are ignored,
so the ``is_loading`` updates made during resolution never start a second
one. Only ``navigate_to_detail`` puts the machine back into ``IDLE``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydragonball.state.enums import DetailPhase, DetailType
from pydragonball.state.store import AppState

if TYPE_CHECKING:
    from pydragonball.browser import CatalogBrowser

_logger = logging.getLogger(__name__)


def on_state(browser: CatalogBrowser, snapshot: AppState) -> None:
    """Start a resolution if *snapshot* shows a detail that is not resolved yet."""
    if browser.detail_phase is not DetailPhase.IDLE:
        return
    if snapshot.current_detail_id is None or snapshot.current_detail_type is None:
        return
    resolve(browser, snapshot.current_detail_type, snapshot.current_detail_id)


def resolve(browser: CatalogBrowser, detail_type: DetailType, item_id: int) -> None:
    """Show the record from the loaded list, or schedule a fetch by id."""
    browser._detail_phase = DetailPhase.RESOLVING
    browser.store.update(is_loading=True)

    loaded = browser.store.read().items_for(detail_type.domain)
    found = next((item for item in loaded if item.id == item_id), None)

    if found is not None:
        _logger.debug("Resolved %s #%d from loaded list", detail_type, item_id)
        browser.presenter.render_detail_content(browser.renderer.render_detail(detail_type, found))
        browser.store.update(is_loading=False)
        browser._detail_phase = DetailPhase.DONE
        return

    browser._detail_phase = DetailPhase.FETCHING_REMOTE
    browser._spawn(fetch_remote(browser, detail_type, item_id, browser._detail_generation))


async def fetch_remote(browser: CatalogBrowser, detail_type: DetailType, item_id: int, generation: int) -> None:
    """Fetch a record by id and render it.

    A completion that arrives after another navigation still renders; it
    only leaves the phase alone so the newer resolution keeps control.
    """
    _logger.debug("Fetching %s #%d", detail_type, item_id)
    try:
        result = await browser.loader(detail_type.domain).get_by_id(item_id)
        if result.item is not None:
            browser.presenter.render_detail_content(browser.renderer.render_detail(detail_type, result.item))
        elif result.error is None:
            browser.presenter.show_error(f"{detail_type.value.capitalize()} #{item_id} was not found")
        else:
            browser.presenter.show_error(f"Failed to load {detail_type} details")
        browser.store.update(is_loading=False)
    finally:
        if generation == browser._detail_generation:
            browser._detail_phase = DetailPhase.DONE

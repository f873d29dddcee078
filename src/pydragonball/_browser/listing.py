"""Listing and search operations for :class:`pydragonball.browser.CatalogBrowser`.

The browser delegates here so that its class body stays a thin facade.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from pydragonball._constants import STATS_FLAG
from pydragonball.ingestion.base import LoadResult
from pydragonball.state.enums import Domain
from pydragonball.state.policy import clamp_page, compute_total_pages
from pydragonball.state.store import items_patch

if TYPE_CHECKING:
    from pydragonball.browser import CatalogBrowser

_logger = logging.getLogger(__name__)


def merge(browser: CatalogBrowser, **changes: Any) -> None:
    """Merge *changes* into the store, clamping ``current_page`` into range."""
    state = browser.store.read()
    total_pages = changes.get("total_pages", state.total_pages)
    page = changes.get("current_page", state.current_page)
    if page > total_pages:
        changes["current_page"] = clamp_page(page, total_pages)
    browser.store.update(**changes)


def render_list(browser: CatalogBrowser, domain: Domain, items: list[Any]) -> None:
    browser.presenter.render_content(browser.renderer.render_list(domain, items))


async def load_data_if_needed(browser: CatalogBrowser) -> None:
    state = browser.store.read()
    if state.in_search_mode:
        await perform_search(browser, state.search_term, state.current_tab)
    else:
        await load_tab_data(browser, state.current_tab, state.current_page)


async def load_tab_data(browser: CatalogBrowser, tab: Domain, page: int) -> None:
    """Show *page* of *tab*, from the cache when possible.

    A cached key is served without a fetch. Otherwise the page is fetched
    through :func:`shared_load`, so a concurrent load of the same key (a
    tab load or the startup stats load) is awaited instead of repeated.
    """
    cache = browser.cache
    key = cache.key(tab, page)

    # A page-1 load with the loaded flag set is also served here: the flag is
    # only ever set together with the cache entry.
    if cache.has(key):
        _logger.debug("Using cached data for %s page %d", tab, page)
        _render_cached(browser, tab, key)
        return

    _logger.debug("Loading tab data: %s, page: %d", tab, page)
    browser.store.update(is_loading=True)

    result = await asyncio.shield(shared_load(browser, tab, page))
    total_pages = compute_total_pages(result.total_count, browser.page_size)
    merge(
        browser,
        is_loading=False,
        total_pages=total_pages,
        **items_patch(tab, result.items, result.total_count),
    )
    if not result.ok:
        browser.presenter.show_error(f"Failed to load {tab}")

    render_list(browser, tab, result.items)


def shared_load(browser: CatalogBrowser, domain: Domain, page: int) -> asyncio.Future[LoadResult[Any]]:
    """Return the in-flight load of ``(domain, page)``, starting one if needed.

    The load writes the cache entry and the loaded flag on success; merging
    into state and rendering are left to each caller.
    """
    key = browser.cache.key(domain, page)
    future = browser._inflight.get(key)
    if future is not None:
        _logger.debug("Joining in-flight load for %s page %d", domain, page)
        return future

    future = asyncio.ensure_future(_load_and_cache(browser, domain, page, key))
    browser._inflight[key] = future

    def _forget(done: asyncio.Future[LoadResult[Any]]) -> None:
        if browser._inflight.get(key) is done:
            del browser._inflight[key]

    future.add_done_callback(_forget)
    return future


async def _load_and_cache(browser: CatalogBrowser, domain: Domain, page: int, key: str) -> LoadResult[Any]:
    result = await browser.loader(domain).load(page, browser.page_size)
    if result.ok:
        browser.cache.set(key, result.items)
        browser.cache.set_loaded(domain)
    return result


def _render_cached(browser: CatalogBrowser, tab: Domain, key: str) -> None:
    items = browser.cache.get(key) or []
    state = browser.store.read()
    total_pages = compute_total_pages(state.total_for(tab), browser.page_size)
    merge(browser, is_loading=False, total_pages=total_pages, **items_patch(tab, items))
    render_list(browser, tab, items)


async def perform_search(browser: CatalogBrowser, term: str, tab: Domain) -> None:
    """Search *tab* for *term*.

    Characters are searched remotely on every call. Planets and
    transformations are filtered locally over the list already in state;
    when that list is empty, page 1 is loaded first and only that page is
    filtered.
    """
    browser.store.update(is_loading=True)

    if tab == Domain.CHARACTERS:
        result = await browser.characters_loader.search(term)
        if not result.ok:
            browser.presenter.show_error("Failed to search characters")
        merge(
            browser,
            characters=result.items,
            is_loading=False,
            total_pages=compute_total_pages(len(result.items), browser.page_size),
        )
        render_list(browser, tab, result.items)
        return

    loader = browser.loader(tab)
    loaded = browser.store.read().items_for(tab)
    if loaded:
        filtered = loader.filter(loaded, term)
    else:
        result = await loader.load(1, browser.page_size)
        if not result.ok:
            browser.presenter.show_error(f"Failed to search {tab}")
            merge(browser, is_loading=False, **items_patch(tab, []))
            render_list(browser, tab, [])
            return
        filtered = loader.filter(result.items, term)

    _logger.debug("Filtered %s: %d match %r", tab, len(filtered), term)
    merge(
        browser,
        is_loading=False,
        total_pages=compute_total_pages(len(filtered), browser.page_size),
        **items_patch(tab, filtered),
    )
    render_list(browser, tab, filtered)


async def load_stats(browser: CatalogBrowser) -> None:
    """Fetch page 1 of planets and transformations for their totals only.

    The pages go through :func:`shared_load`, so they are cached and a
    switch to those tabs during startup joins the same request. Pages that
    are already cached were merged by a tab load, totals included. The
    in-state lists are left untouched.
    """
    browser.cache.set_loaded(STATS_FLAG)
    domains = [
        domain
        for domain in (Domain.PLANETS, Domain.TRANSFORMATIONS)
        if not browser.cache.has(browser.cache.key(domain, 1))
    ]
    results = await asyncio.gather(*(asyncio.shield(shared_load(browser, d, 1)) for d in domains))
    for domain, result in zip(domains, results, strict=True):
        if not result.ok:
            _logger.warning("Could not load %s stats: %s", domain, result.error)
            continue
        browser.store.update(**{f"total_{domain.value}": result.total_count})

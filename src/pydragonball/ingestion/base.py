"""Loader base class and result types.

A loader wraps one catalog. It converts every
:class:`~pydragonball.exceptions.DragonBallError` into an empty result that
carries the error message, so callers can treat "empty" and "failed" the
same way at the data level while still telling the user what went wrong.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pydragonball.exceptions import DragonBallError, DragonBallNotFoundError
from pydragonball.ingestion.normalize import filter_by_term
from pydragonball.state.enums import Domain

if TYPE_CHECKING:
    from pydragonball.client import DragonBallClient

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class LoadResult(Generic[T]):
    """Normalized listing result: one page of items plus the catalog total."""

    items: list[T] = field(default_factory=list)
    total_count: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, error: str) -> LoadResult[T]:
        return cls(items=[], total_count=0, error=error)


@dataclass(frozen=True, slots=True)
class ItemResult(Generic[T]):
    """Single-record lookup result.

    ``item is None and error is None`` means the record does not exist.
    """

    item: T | None = None
    error: str | None = None


class CatalogLoader(ABC, Generic[T]):
    """Adapter between the browser and one catalog of the API."""

    domain: ClassVar[Domain]
    #: Attributes matched by :meth:`filter` for local search.
    search_fields: ClassVar[tuple[str, ...]] = ("name",)

    def __init__(self, client: DragonBallClient) -> None:
        self._client = client

    @abstractmethod
    async def _fetch_page(self, page: int, page_size: int) -> tuple[list[T], int]:
        """Return ``(items, total_count)`` for *page*; may raise."""

    @abstractmethod
    async def _fetch_one(self, item_id: int) -> T:
        """Return a single record; may raise."""

    async def load(self, page: int, page_size: int) -> LoadResult[T]:
        try:
            items, total = await self._fetch_page(page, page_size)
        except DragonBallError as exc:
            _logger.warning("Loading %s page %d failed: %s", self.domain, page, exc)
            return LoadResult.failed(str(exc))
        _logger.debug("Loaded %s page %d: %d items of %d", self.domain, page, len(items), total)
        return LoadResult(items=items, total_count=total)

    async def get_by_id(self, item_id: int) -> ItemResult[T]:
        try:
            item = await self._fetch_one(item_id)
        except DragonBallNotFoundError:
            _logger.debug("%s #%d not found", self.domain.detail_type, item_id)
            return ItemResult()
        except DragonBallError as exc:
            _logger.warning("Fetching %s #%d failed: %s", self.domain.detail_type, item_id, exc)
            return ItemResult(error=str(exc))
        return ItemResult(item=item)

    def filter(self, items: list[T], term: str) -> list[T]:
        """Local search over an already loaded list."""
        return filter_by_term(items, term, self.search_fields)

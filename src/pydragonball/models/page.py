"""Paginated envelope returned by the listing endpoints."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import Field

from pydragonball.models._base import DragonBallBaseModel

T = TypeVar("T")


class PageMeta(DragonBallBaseModel):
    """``meta`` block of a paginated response."""

    total_items: int = 0
    item_count: int = 0
    items_per_page: int = 0
    total_pages: int = 0
    current_page: int = 1


class PageLinks(DragonBallBaseModel):
    """``links`` block of a paginated response."""

    first: str = ""
    previous: str = ""
    next: str = ""
    last: str = ""


class Page(DragonBallBaseModel, Generic[T]):
    """One page of a catalog listing."""

    items: list[T] = Field(default_factory=list)
    meta: PageMeta = Field(default_factory=PageMeta)
    links: PageLinks = Field(default_factory=PageLinks)

    @property
    def total_items(self) -> int:
        return self.meta.total_items

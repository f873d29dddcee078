"""In-memory state store for the catalog browser.

The store owns exactly one :class:`AppState` snapshot. Every change goes
through :meth:`StateStore.update`, which replaces the snapshot and notifies
subscribers synchronously.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pydragonball.models.character import Character
from pydragonball.models.planet import Planet
from pydragonball.models.transformation import Transformation
from pydragonball.state.enums import DetailType, Domain, View

_logger = logging.getLogger(__name__)

Subscriber = Callable[["AppState"], None]


class AppState(BaseModel):
    """Immutable snapshot of everything the browser shows."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    current_tab: Domain = Domain.CHARACTERS
    current_page: int = 1
    search_term: str = ""
    is_loading: bool = False
    characters: list[Character] = Field(default_factory=list)
    planets: list[Planet] = Field(default_factory=list)
    transformations: list[Transformation] = Field(default_factory=list)
    total_characters: int = 0
    total_planets: int = 0
    total_transformations: int = 0
    total_pages: int = 1
    current_view: View = View.HOME
    current_detail_id: int | None = None
    current_detail_type: DetailType | None = None

    def items_for(self, domain: Domain) -> list[Any]:
        return list(getattr(self, domain.value))

    def total_for(self, domain: Domain) -> int:
        return int(getattr(self, f"total_{domain.value}"))

    @property
    def in_search_mode(self) -> bool:
        return bool(self.search_term.strip())

    @property
    def detail_consistent(self) -> bool:
        """Detail id and type are both set iff the detail view is open."""
        has_id = self.current_detail_id is not None
        has_type = self.current_detail_type is not None
        if has_id != has_type:
            return False
        return has_id == (self.current_view == View.DETAIL)


def items_patch(domain: Domain, items: list[Any], total: int | None = None) -> dict[str, Any]:
    """Build an update dict that replaces a domain's list (and optionally its total)."""
    patch: dict[str, Any] = {domain.value: list(items)}
    if total is not None:
        patch[f"total_{domain.value}"] = total
    return patch


class StateStore:
    """Single-snapshot store with ordered, synchronous notifications.

    An ``update`` issued while subscribers are being notified is applied at
    once, but its notification is queued behind the current round so every
    subscriber sees snapshots in the order they were produced.
    """

    def __init__(self, initial: AppState | None = None) -> None:
        self._state = initial if initial is not None else AppState()
        self._subscribers: list[Subscriber] = []
        self._pending: deque[AppState] = deque()
        self._notifying = False

    def read(self) -> AppState:
        """Return the current snapshot."""
        return self._state

    def update(self, **changes: Any) -> AppState:
        """Shallow-merge *changes* into the snapshot and notify subscribers.

        Raises
        ------
        ValueError
            If a key is not an :class:`AppState` field.
        """
        unknown = set(changes) - set(AppState.model_fields)
        if unknown:
            raise ValueError(f"Unknown state fields: {', '.join(sorted(unknown))}")
        snapshot = self._state.model_copy(update=changes)
        self._state = snapshot
        _logger.debug("State update: %s", ", ".join(sorted(changes)))
        self._pending.append(snapshot)
        if not self._notifying:
            self._drain()
        return snapshot

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback*; returns a function that unsubscribes it."""
        if self._notifying:
            raise RuntimeError("Cannot subscribe while notifying subscribers")
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if self._notifying:
                raise RuntimeError("Cannot unsubscribe while notifying subscribers")
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def _drain(self) -> None:
        self._notifying = True
        try:
            while self._pending:
                snapshot = self._pending.popleft()
                for callback in tuple(self._subscribers):
                    callback(snapshot)
        finally:
            self._notifying = False

"""Enumerations shared by the state store and the browser."""

from __future__ import annotations

from enum import StrEnum


class Domain(StrEnum):
    """One of the three browsable catalogs (also the tab name)."""

    CHARACTERS = "characters"
    PLANETS = "planets"
    TRANSFORMATIONS = "transformations"

    @property
    def detail_type(self) -> DetailType:
        return _DOMAIN_TO_DETAIL[self]


class DetailType(StrEnum):
    """Kind of record shown in the detail view."""

    CHARACTER = "character"
    PLANET = "planet"
    TRANSFORMATION = "transformation"

    @property
    def domain(self) -> Domain:
        return _DETAIL_TO_DOMAIN[self]


class View(StrEnum):
    HOME = "home"
    DETAIL = "detail"


class DetailPhase(StrEnum):
    """Detail-resolution state machine.

    ``IDLE -> RESOLVING -> (FETCHING_REMOTE) -> DONE``. Only ``IDLE`` may
    start a resolution; ``navigate_to_detail`` resets the machine to
    ``IDLE``.
    """

    IDLE = "idle"
    RESOLVING = "resolving"
    FETCHING_REMOTE = "fetching_remote"
    DONE = "done"

    @property
    def in_flight(self) -> bool:
        return self in (DetailPhase.RESOLVING, DetailPhase.FETCHING_REMOTE)


_DOMAIN_TO_DETAIL: dict[Domain, DetailType] = {
    Domain.CHARACTERS: DetailType.CHARACTER,
    Domain.PLANETS: DetailType.PLANET,
    Domain.TRANSFORMATIONS: DetailType.TRANSFORMATION,
}
_DETAIL_TO_DOMAIN: dict[DetailType, Domain] = {v: k for k, v in _DOMAIN_TO_DETAIL.items()}

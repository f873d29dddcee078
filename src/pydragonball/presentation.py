"""Presentation seams: what the browser renders to.

The browser only hands primitives and pre-built strings to a
:class:`Presenter`; building those strings is the :class:`Renderer`'s job.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any, Protocol, TextIO

from pydragonball.models.character import Character
from pydragonball.models.planet import Planet
from pydragonball.models.power import ki_power_percentage
from pydragonball.models.transformation import Transformation
from pydragonball.sequence import TransformationSequence
from pydragonball.state.enums import DetailType, Domain, View


class Presenter(Protocol):
    def render_content(self, content: str) -> None: ...

    def render_detail_content(self, content: str) -> None: ...

    def update_pagination(self, page: int, total_pages: int) -> None: ...

    def update_stats(self, total_characters: int, total_planets: int, total_transformations: int) -> None: ...

    def show_loading(self, loading: bool) -> None: ...

    def show_error(self, message: str) -> None: ...

    def show_view(self, view: View) -> None: ...

    def update_active_tab(self, tab: Domain) -> None: ...

    def render_transformation(self, sequence: TransformationSequence) -> None: ...


class Renderer(Protocol):
    def render_list(self, domain: Domain, items: Sequence[Any]) -> str: ...

    def render_detail(self, detail_type: DetailType, item: Any) -> str: ...


class NullPresenter:
    """Presenter that discards everything (headless use)."""

    def render_content(self, content: str) -> None:
        pass

    def render_detail_content(self, content: str) -> None:
        pass

    def update_pagination(self, page: int, total_pages: int) -> None:
        pass

    def update_stats(self, total_characters: int, total_planets: int, total_transformations: int) -> None:
        pass

    def show_loading(self, loading: bool) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass

    def show_view(self, view: View) -> None:
        pass

    def update_active_tab(self, tab: Domain) -> None:
        pass

    def render_transformation(self, sequence: TransformationSequence) -> None:
        pass


def power_bar(ki: str, width: int = 20) -> str:
    percentage = ki_power_percentage(ki)
    filled = round(width * percentage / 100)
    return f"[{'#' * filled}{'-' * (width - filled)}] {percentage:.0f}%"


_EMPTY_MESSAGES: dict[Domain, str] = {
    Domain.CHARACTERS: "No characters found",
    Domain.PLANETS: "No planets found",
    Domain.TRANSFORMATIONS: "No transformations found",
}


class TextRenderer:
    """Plain-text renderer for terminals and logs."""

    def render_list(self, domain: Domain, items: Sequence[Any]) -> str:
        if not items:
            return _EMPTY_MESSAGES[domain]
        return "\n".join(self._list_line(item) for item in items)

    def render_detail(self, detail_type: DetailType, item: Any) -> str:
        if isinstance(item, Character):
            return self._character_detail(item)
        if isinstance(item, Planet):
            return self._planet_detail(item)
        if isinstance(item, Transformation):
            return self._transformation_detail(item)
        return f"{detail_type} #{getattr(item, 'id', '?')}"

    def _list_line(self, item: Any) -> str:
        if isinstance(item, Character):
            return f"#{item.id:<4} {item.name:<24} {item.race} / {item.gender}  ki {item.ki}  [{item.affiliation}]"
        if isinstance(item, Planet):
            status = "destroyed" if item.is_destroyed else "intact"
            return f"#{item.id:<4} {item.name:<24} {status}"
        return f"#{item.id:<4} {item.name:<24} ki {item.ki}"

    def _character_detail(self, character: Character) -> str:
        lines = [
            character.name,
            f"Race: {character.race}    Gender: {character.gender}    Affiliation: {character.affiliation}",
            f"Ki: {character.ki}    Max ki: {character.max_ki}",
            f"Power: {power_bar(character.max_ki or character.ki)}",
        ]
        if character.origin_planet is not None:
            lines.append(f"Origin planet: {character.origin_planet.name}")
        if character.transformations:
            lines.append("Transformations: " + ", ".join(t.name for t in character.transformations))
        if character.description:
            lines += ["", character.description]
        return "\n".join(lines)

    def _planet_detail(self, planet: Planet) -> str:
        lines = [planet.name, "Status: " + ("DESTROYED" if planet.is_destroyed else "INTACT")]
        if planet.description:
            lines += ["", planet.description]
        return "\n".join(lines)

    def _transformation_detail(self, transformation: Transformation) -> str:
        return "\n".join(
            [
                transformation.name,
                f"Ki: {transformation.ki}",
                f"Power: {power_bar(transformation.ki)}",
            ]
        )


class ConsolePresenter:
    """Presenter that writes to a text stream.

    Pagination and stats lines are only written when they change.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._last_pagination: tuple[int, int] | None = None
        self._last_stats: tuple[int, int, int] | None = None
        self._loading = False

    def _write(self, text: str) -> None:
        self._stream.write(text + "\n")
        self._stream.flush()

    def render_content(self, content: str) -> None:
        self._write(content)

    def render_detail_content(self, content: str) -> None:
        self._write(content)

    def update_pagination(self, page: int, total_pages: int) -> None:
        if self._last_pagination == (page, total_pages):
            return
        self._last_pagination = (page, total_pages)
        self._write(f"-- page {page} of {total_pages} --")

    def update_stats(self, total_characters: int, total_planets: int, total_transformations: int) -> None:
        stats = (total_characters, total_planets, total_transformations)
        if self._last_stats == stats:
            return
        self._last_stats = stats
        self._write(
            f"characters: {total_characters}  planets: {total_planets}  transformations: {total_transformations}"
        )

    def show_loading(self, loading: bool) -> None:
        if loading and not self._loading:
            self._write("loading…")
        self._loading = loading

    def show_error(self, message: str) -> None:
        self._write(f"error: {message}")

    def show_view(self, view: View) -> None:
        pass

    def update_active_tab(self, tab: Domain) -> None:
        pass

    def render_transformation(self, sequence: TransformationSequence) -> None:
        current = sequence.current
        if current is None:
            self._write(f"No forms for {sequence.character_name}")
            return
        self._write(f"{sequence.character_name} [{sequence.counter}] {current.name}  ki {current.ki}")
        self._write(f"  {power_bar(current.ki)}")

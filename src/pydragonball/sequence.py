"""Character transformation sequence viewer state."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydragonball.models.transformation import Transformation


@dataclass
class TransformationSequence:
    """Ordered forms of one character: the original form first, then its transformations.

    The cursor never leaves ``0 .. len(entries) - 1``.
    """

    character_name: str
    entries: list[Transformation] = field(default_factory=list)
    index: int = 0

    @property
    def current(self) -> Transformation | None:
        if not self.entries:
            return None
        return self.entries[self.index]

    @property
    def at_start(self) -> bool:
        return self.index == 0

    @property
    def at_end(self) -> bool:
        return not self.entries or self.index == len(self.entries) - 1

    @property
    def counter(self) -> str:
        if not self.entries:
            return "0 / 0"
        return f"{self.index + 1} / {len(self.entries)}"

    def next(self) -> bool:
        """Advance one form; returns ``False`` when already at the last one."""
        if self.at_end:
            return False
        self.index += 1
        return True

    def previous(self) -> bool:
        if self.at_start:
            return False
        self.index -= 1
        return True

    def restart(self) -> None:
        """Rewind to the original form when playback starts at the end."""
        if self.at_end:
            self.index = 0

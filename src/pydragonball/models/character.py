"""Character model."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from pydragonball.models._base import DragonBallBaseModel
from pydragonball.models.planet import Planet
from pydragonball.models.transformation import Transformation


class Character(DragonBallBaseModel):
    """A character from the ``/characters`` catalog.

    ``origin_planet`` and ``transformations`` are only present in the
    single-character (``/characters/{id}``) response.
    """

    id: int
    """Character id."""
    name: str = ""
    ki: str = ""
    """Base ki, as a free-form string (e.g. ``"60.000.000"``)."""
    max_ki: str = ""
    """Maximum ki, free-form (e.g. ``"90 Septillion"``)."""
    race: str = ""
    gender: str = ""
    description: str = ""
    image: str = ""
    affiliation: str = ""
    deleted_at: datetime | None = None
    origin_planet: Planet | None = None
    transformations: list[Transformation] = Field(default_factory=list)

    def original_form(self) -> Transformation:
        """Represent the untransformed character as the first sequence entry."""
        return Transformation(
            id=self.id,
            name=f"{self.name} (Original)",
            image=self.image,
            ki=self.ki,
            raw={},
        )

"""Transformation model."""

from __future__ import annotations

from datetime import datetime

from pydragonball.models._base import DragonBallBaseModel


class Transformation(DragonBallBaseModel):
    """A transformation from the ``/transformations`` catalog.

    The sequence viewer also uses this model for a character's original
    form, in which case ``id`` is the character id.
    """

    id: int
    name: str = ""
    image: str = ""
    ki: str = ""
    deleted_at: datetime | None = None

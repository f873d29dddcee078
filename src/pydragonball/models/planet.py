"""Planet model."""

from __future__ import annotations

from datetime import datetime

from pydragonball.models._base import DragonBallBaseModel


class Planet(DragonBallBaseModel):
    """A planet from the ``/planets`` catalog."""

    id: int
    name: str = ""
    is_destroyed: bool = False
    description: str = ""
    image: str = ""
    deleted_at: datetime | None = None

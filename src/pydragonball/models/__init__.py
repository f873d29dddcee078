"""Data models for Dragon Ball API responses."""

from pydragonball.models._base import DragonBallBaseModel
from pydragonball.models.character import Character
from pydragonball.models.page import Page, PageLinks, PageMeta
from pydragonball.models.planet import Planet
from pydragonball.models.power import ki_power_percentage
from pydragonball.models.transformation import Transformation

__all__ = [
    "Character",
    "DragonBallBaseModel",
    "Page",
    "PageLinks",
    "PageMeta",
    "Planet",
    "Transformation",
    "ki_power_percentage",
]

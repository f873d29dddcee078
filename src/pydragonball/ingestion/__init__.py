"""Ingestion layer.

This package contains the per-catalog loaders that fetch data through the
client and normalize it into :class:`~pydragonball.ingestion.base.LoadResult`
values. Loaders never raise on remote failure.
"""

from pydragonball.ingestion.base import CatalogLoader, ItemResult, LoadResult
from pydragonball.ingestion.characters import CharactersLoader
from pydragonball.ingestion.planets import PlanetsLoader
from pydragonball.ingestion.transformations import TransformationsLoader

__all__ = [
    "CatalogLoader",
    "CharactersLoader",
    "ItemResult",
    "LoadResult",
    "PlanetsLoader",
    "TransformationsLoader",
]

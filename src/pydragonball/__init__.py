"""pydragonball - Async Python browser for the Dragon Ball API catalogs."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pydragonball")
except PackageNotFoundError:
    __version__ = "0+local"
from pydragonball._cache import QueryCache
from pydragonball.browser import CatalogBrowser
from pydragonball.client import DragonBallClient
from pydragonball.config import DragonBallConfig
from pydragonball.exceptions import (
    DragonBallConfigError,
    DragonBallError,
    DragonBallNotFoundError,
    DragonBallResponseError,
    DragonBallTransportError,
)
from pydragonball.ingestion import (
    CatalogLoader,
    CharactersLoader,
    ItemResult,
    LoadResult,
    PlanetsLoader,
    TransformationsLoader,
)
from pydragonball.models import (
    Character,
    Page,
    Planet,
    Transformation,
    ki_power_percentage,
)
from pydragonball.presentation import ConsolePresenter, NullPresenter, Presenter, Renderer, TextRenderer
from pydragonball.sequence import TransformationSequence
from pydragonball.state.enums import DetailPhase, DetailType, Domain, View
from pydragonball.state.store import AppState, StateStore

__all__ = [
    "__version__",
    "AppState",
    "CatalogBrowser",
    "CatalogLoader",
    "Character",
    "CharactersLoader",
    "ConsolePresenter",
    "DetailPhase",
    "DetailType",
    "Domain",
    "DragonBallClient",
    "DragonBallConfig",
    "DragonBallConfigError",
    "DragonBallError",
    "DragonBallNotFoundError",
    "DragonBallResponseError",
    "DragonBallTransportError",
    "ItemResult",
    "LoadResult",
    "NullPresenter",
    "Page",
    "Planet",
    "PlanetsLoader",
    "Presenter",
    "QueryCache",
    "Renderer",
    "StateStore",
    "TextRenderer",
    "Transformation",
    "TransformationSequence",
    "TransformationsLoader",
    "View",
    "ki_power_percentage",
]

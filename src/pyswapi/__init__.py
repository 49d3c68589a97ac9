"""pyswapi - Async Star Wars API client with an in-memory cache and demo front end."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyswapi")
except PackageNotFoundError:
    __version__ = "0+local"
from pyswapi.client import SwapiClient
from pyswapi.config import SwapiConfig
from pyswapi.demo import DemoCursors, DemoOrchestrator, DemoReport
from pyswapi.exceptions import (
    SwapiConfigError,
    SwapiError,
    SwapiHttpError,
    SwapiNetworkError,
    SwapiParseError,
    SwapiTimeoutError,
)
from pyswapi.models import Film, Page, Person, Planet, Starship, Vehicle
from pyswapi.stats import FetchCounters, StatsSnapshot

__all__ = [
    "__version__",
    "DemoCursors",
    "DemoOrchestrator",
    "DemoReport",
    "FetchCounters",
    "Film",
    "Page",
    "Person",
    "Planet",
    "Starship",
    "StatsSnapshot",
    "SwapiClient",
    "SwapiConfig",
    "SwapiConfigError",
    "SwapiError",
    "SwapiHttpError",
    "SwapiNetworkError",
    "SwapiParseError",
    "SwapiTimeoutError",
    "Vehicle",
]

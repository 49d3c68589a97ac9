"""Data models for SWAPI responses."""

from pyswapi.models._base import SwapiBaseModel
from pyswapi.models.film import Film
from pyswapi.models.page import Page
from pyswapi.models.people import Person
from pyswapi.models.planet import Planet
from pyswapi.models.starship import Starship
from pyswapi.models.vehicle import Vehicle

__all__ = [
    "Film",
    "Page",
    "Person",
    "Planet",
    "Starship",
    "SwapiBaseModel",
    "Vehicle",
]

"""Person (character) model."""

from __future__ import annotations

from pydantic import Field

from pyswapi.models._base import SwapiBaseModel


class Person(SwapiBaseModel):
    """A character from ``people/<id>``."""

    name: str = ""
    height: str = ""
    """Height in centimetres, or ``"unknown"``."""
    mass: str = ""
    """Mass in kilograms, or ``"unknown"``."""
    birth_year: str = ""
    """Birth year relative to the Battle of Yavin (e.g. ``"19BBY"``)."""
    gender: str = ""
    homeworld: str = ""
    films: list[str] = Field(default_factory=list)
    url: str = ""

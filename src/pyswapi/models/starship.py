"""Starship model."""

from __future__ import annotations

from pydantic import Field

from pyswapi.models._base import SwapiBaseModel


class Starship(SwapiBaseModel):
    """A starship from ``starships/``."""

    name: str = ""
    model: str = ""
    manufacturer: str = ""
    cost_in_credits: str = ""
    max_atmosphering_speed: str = ""
    hyperdrive_rating: str = ""
    starship_class: str = ""
    pilots: list[str] = Field(default_factory=list)
    url: str = ""

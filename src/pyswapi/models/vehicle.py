"""Vehicle model."""

from __future__ import annotations

from pydantic import Field

from pyswapi.models._base import SwapiBaseModel


class Vehicle(SwapiBaseModel):
    """A vehicle from ``vehicles/<id>``."""

    name: str = ""
    model: str = ""
    manufacturer: str = ""
    cost_in_credits: str = ""
    length: str = ""
    crew: str = ""
    passengers: str = ""
    vehicle_class: str = ""
    pilots: list[str] = Field(default_factory=list)
    url: str = ""

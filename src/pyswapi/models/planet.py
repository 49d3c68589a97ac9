"""Planet model."""

from __future__ import annotations

from pydantic import Field

from pyswapi.models._base import SwapiBaseModel
from pyswapi.normalize import safe_int


class Planet(SwapiBaseModel):
    """A planet from ``planets/``.

    ``population`` and ``diameter`` arrive as strings or the literal
    ``"unknown"``; use :attr:`population_value` / :attr:`diameter_value`
    for the numeric form.
    """

    name: str = ""
    population: str = ""
    diameter: str = ""
    climate: str = ""
    terrain: str = ""
    films: list[str] = Field(default_factory=list)
    url: str = ""

    @property
    def population_value(self) -> int | None:
        return safe_int(self.population)

    @property
    def diameter_value(self) -> int | None:
        return safe_int(self.diameter)

"""Film model."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from pyswapi.models._base import SwapiBaseModel
from pyswapi.normalize import safe_date


class Film(SwapiBaseModel):
    """A film from ``films/``."""

    title: str = ""
    episode_id: int | None = None
    release_date: str = ""
    """ISO date string (``"1977-05-25"``)."""
    director: str = ""
    producer: str = ""
    characters: list[str] = Field(default_factory=list)
    planets: list[str] = Field(default_factory=list)
    url: str = ""

    @property
    def released_on(self) -> date | None:
        return safe_date(self.release_date)

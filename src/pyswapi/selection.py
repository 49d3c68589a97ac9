"""Record selection used by the demo: large planets and film chronology."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from pyswapi._constants import LARGE_DIAMETER, LARGE_POPULATION
from pyswapi.models import Film, Planet


def is_large_planet(
    planet: Planet,
    *,
    min_population: int = LARGE_POPULATION,
    min_diameter: int = LARGE_DIAMETER,
) -> bool:
    """Return ``True`` when both population and diameter exceed the thresholds.

    Non-numeric values (``"unknown"``) exclude the planet.
    """
    population = planet.population_value
    diameter = planet.diameter_value
    if population is None or diameter is None:
        return False
    return population > min_population and diameter > min_diameter


def large_planets(planets: Iterable[Planet]) -> list[Planet]:
    return [planet for planet in planets if is_large_planet(planet)]


def _release_key(film: Film) -> tuple[bool, date]:
    released = film.released_on
    return (released is None, released or date.min)


def sort_films_by_release(films: Iterable[Film]) -> list[Film]:
    """Films in ascending release order; films without a valid date go last."""
    return sorted(films, key=_release_key)

"""Console rendering of SWAPI records.

Every function returns the lines to print; nothing here writes output.
"""

from __future__ import annotations

from pyswapi.models import Film, Page, Person, Planet, Starship, Vehicle


def _cost(value: str) -> str:
    return f"{value} credits" if value and value != "unknown" else "unknown"


def character_lines(person: Person) -> list[str]:
    lines = [
        f"Character: {person.name}",
        f"Height: {person.height}",
        f"Mass: {person.mass}",
        f"Birthday: {person.birth_year}",
    ]
    if person.films:
        lines.append(f"Appears in {len(person.films)} films")
    return lines


def starship_lines(index: int, ship: Starship) -> list[str]:
    lines = [
        "",
        f"Starship {index}:",
        f"Name: {ship.name}",
        f"Model: {ship.model}",
        f"Manufacturer: {ship.manufacturer}",
        f"Cost: {_cost(ship.cost_in_credits)}",
        f"Speed: {ship.max_atmosphering_speed}",
        f"Hyperdrive Rating: {ship.hyperdrive_rating}",
    ]
    if ship.pilots:
        lines.append(f"Pilots: {len(ship.pilots)}")
    return lines


def starships_lines(page: Page[Starship], limit: int) -> list[str]:
    lines = ["", f"Total Starships: {page.count}"]
    for index, ship in enumerate(page.results[:limit], start=1):
        lines.extend(starship_lines(index, ship))
    return lines


def planet_lines(planet: Planet) -> list[str]:
    lines = [
        f"{planet.name} - Pop: {planet.population} - Diameter: {planet.diameter} - Climate: {planet.climate}",
    ]
    if planet.films:
        lines.append(f"  Appears in {len(planet.films)} films")
    return lines


def large_planets_lines(planets: list[Planet]) -> list[str]:
    lines = ["", "Large populated planets:"]
    for planet in planets:
        lines.extend(planet_lines(planet))
    return lines


def films_lines(films: list[Film]) -> list[str]:
    lines = ["", "Star Wars Films in chronological order:"]
    for index, film in enumerate(films, start=1):
        lines.extend(
            [
                f"{index}. {film.title} ({film.release_date})",
                f"   Director: {film.director}",
                f"   Producer: {film.producer}",
                f"   Characters: {len(film.characters)}",
                f"   Planets: {len(film.planets)}",
            ]
        )
    return lines


def vehicle_lines(vehicle: Vehicle) -> list[str]:
    return [
        "",
        "Featured Vehicle:",
        f"Name: {vehicle.name}",
        f"Model: {vehicle.model}",
        f"Manufacturer: {vehicle.manufacturer}",
        f"Cost: {_cost(vehicle.cost_in_credits)}",
        f"Length: {vehicle.length}",
        f"Crew Required: {vehicle.crew}",
        f"Passengers: {vehicle.passengers}",
    ]

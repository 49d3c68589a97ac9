from __future__ import annotations

import asyncio
import copy
from dataclasses import dataclass, field
from typing import Any

import pytest

from pyswapi.client import SwapiClient
from pyswapi.config import SwapiConfig
from pyswapi.exceptions import SwapiError, SwapiHttpError

PEOPLE_1: dict[str, Any] = {
    "name": "Luke Skywalker",
    "height": "172",
    "mass": "77",
    "birth_year": "19BBY",
    "gender": "male",
    "films": ["https://swapi.dev/api/films/1/", "https://swapi.dev/api/films/2/"],
    "url": "https://swapi.dev/api/people/1/",
}

PEOPLE_2: dict[str, Any] = {
    "name": "C-3PO",
    "height": "167",
    "mass": "75",
    "birth_year": "112BBY",
    "films": [],
    "url": "https://swapi.dev/api/people/2/",
}

STARSHIPS_PAGE_1: dict[str, Any] = {
    "count": 36,
    "next": "https://swapi.dev/api/starships/?page=2",
    "previous": None,
    "results": [
        {
            "name": "CR90 corvette",
            "model": "CR90 corvette",
            "manufacturer": "Corellian Engineering Corporation",
            "cost_in_credits": "3500000",
            "max_atmosphering_speed": "950",
            "hyperdrive_rating": "2.0",
            "pilots": [],
        },
        {
            "name": "Star Destroyer",
            "model": "Imperial I-class Star Destroyer",
            "manufacturer": "Kuat Drive Yards",
            "cost_in_credits": "150000000",
            "max_atmosphering_speed": "975",
            "hyperdrive_rating": "2.0",
            "pilots": [],
        },
        {
            "name": "Sentinel-class landing craft",
            "model": "Sentinel-class landing craft",
            "manufacturer": "Sienar Fleet Systems, Cyngus Spaceworks",
            "cost_in_credits": "unknown",
            "max_atmosphering_speed": "1000",
            "hyperdrive_rating": "1.0",
            "pilots": ["https://swapi.dev/api/people/13/"],
        },
        {
            "name": "Death Star",
            "model": "DS-1 Orbital Battle Station",
            "manufacturer": "Imperial Department of Military Research, Sienar Fleet Systems",
            "cost_in_credits": "1000000000000",
            "max_atmosphering_speed": "n/a",
            "hyperdrive_rating": "4.0",
            "pilots": [],
        },
    ],
}

PLANETS_PAGE_1: dict[str, Any] = {
    "count": 60,
    "next": "https://swapi.dev/api/planets/?page=2",
    "previous": None,
    "results": [
        {"name": "Tatooine", "population": "200000", "diameter": "10465", "climate": "arid", "films": []},
        {
            "name": "Naboo",
            "population": "4500000000",
            "diameter": "12120",
            "climate": "temperate",
            "films": ["https://swapi.dev/api/films/3/"],
        },
        {"name": "Hoth", "population": "unknown", "diameter": "7200", "climate": "frozen", "films": []},
        {"name": "Kamino", "population": "1000000000", "diameter": "19720", "climate": "temperate", "films": []},
        {"name": "Coruscant", "population": "1000000000000", "diameter": "12240", "climate": "temperate"},
    ],
}

FILMS: dict[str, Any] = {
    "count": 3,
    "next": None,
    "previous": None,
    "results": [
        {
            "title": "The Empire Strikes Back",
            "episode_id": 5,
            "release_date": "1980-05-17",
            "director": "Irvin Kershner",
            "producer": "Gary Kurtz, Rick McCallum",
            "characters": ["c1", "c2"],
            "planets": ["p1"],
        },
        {
            "title": "A New Hope",
            "episode_id": 4,
            "release_date": "1977-05-25",
            "director": "George Lucas",
            "producer": "Gary Kurtz, Rick McCallum",
            "characters": ["c1", "c2", "c3"],
            "planets": ["p1", "p2"],
        },
        {
            "title": "The Phantom Menace",
            "episode_id": 1,
            "release_date": "1999-05-19",
            "director": "George Lucas",
            "producer": "Rick McCallum",
            "characters": ["c1"],
            "planets": ["p1", "p2", "p3"],
        },
    ],
}

VEHICLE_1: dict[str, Any] = {
    "name": "Sand Crawler",
    "model": "Digger Crawler",
    "manufacturer": "Corellia Mining Corporation",
    "cost_in_credits": "150000",
    "length": "36.8",
    "crew": "46",
    "passengers": "30",
}


def default_payloads() -> dict[str, Any]:
    payloads: dict[str, Any] = {
        "people/1": PEOPLE_1,
        "people/2": PEOPLE_2,
        "starships/?page=1": STARSHIPS_PAGE_1,
        "planets/?page=1": PLANETS_PAGE_1,
        "films/": FILMS,
    }
    for vehicle_id in range(1, 5):
        payloads[f"vehicles/{vehicle_id}"] = {**VEHICLE_1, "name": f"Vehicle {vehicle_id}"}
    return copy.deepcopy(payloads)


@dataclass
class FakeTransport:
    """In-memory transport recording every request per endpoint."""

    payloads: dict[str, Any] = field(default_factory=default_payloads)
    errors: dict[str, SwapiError] = field(default_factory=dict)
    calls: dict[str, int] = field(default_factory=dict)
    delay: float = 0.0

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    async def get_json(self, endpoint: str) -> Any:
        self.calls[endpoint] = self.calls.get(endpoint, 0) + 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if endpoint in self.errors:
            raise self.errors[endpoint]
        if endpoint not in self.payloads:
            raise SwapiHttpError("Request failed with status code 404", status_code=404, endpoint=endpoint)
        return copy.deepcopy(self.payloads[endpoint])


@pytest.fixture
def config() -> SwapiConfig:
    return SwapiConfig()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(config: SwapiConfig, transport: FakeTransport) -> SwapiClient:
    return SwapiClient(config, transport=transport)

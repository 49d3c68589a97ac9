"""Demo orchestrator: five sequential display routines over one client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from pyswapi import display
from pyswapi._constants import MAX_CHARACTER_ID, MAX_VEHICLE_ID, STARSHIPS_LIMIT
from pyswapi.client import SwapiClient
from pyswapi.exceptions import SwapiError, SwapiHttpError
from pyswapi.selection import large_planets, sort_films_by_release
from pyswapi.stats import report_stats

_logger = logging.getLogger(__name__)


@dataclass
class DemoCursors:
    """Sequential IDs picking the character and vehicle shown next.

    The two cursors are independent: ``character_id`` advances after
    every completed run and wraps after ``MAX_CHARACTER_ID``,
    ``vehicle_id`` after every vehicle shown until it passes
    ``MAX_VEHICLE_ID``. An ID the service answers with 404 is skipped
    on the next run.
    """

    character_id: int = 1
    vehicle_id: int = 1

    def advance_character(self) -> None:
        self.character_id = self.character_id % MAX_CHARACTER_ID + 1

    def advance_vehicle(self) -> None:
        self.vehicle_id += 1


@dataclass
class DemoReport:
    """Output of one orchestrator run."""

    lines: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def text(self) -> str:
        return "\n".join(self.lines) + "\n"


class DemoOrchestrator:
    """Drive the display routines in a fixed order against a shared client.

    Runs are serialised: a second :meth:`run` waits until the first one
    has finished, so cursor and counter updates never interleave.
    """

    def __init__(
        self,
        client: SwapiClient,
        *,
        cursors: DemoCursors | None = None,
        write: Callable[[str], None] = print,
    ) -> None:
        self._client = client
        self._cursors = cursors or DemoCursors()
        self._write = write
        self._lock = asyncio.Lock()

    @property
    def cursors(self) -> DemoCursors:
        return self._cursors

    def _emit(self, report: DemoReport, lines: list[str]) -> None:
        for line in lines:
            self._write(line)
            report.lines.append(line)

    async def run(self) -> DemoReport:
        """Run every routine once; the first fetch error aborts the rest.

        The error is logged and recorded on the report. The client has
        already counted it.
        """
        async with self._lock:
            report = DemoReport()
            _logger.debug("Starting data fetch...")
            try:
                await self.show_character(report)
                await self.show_starships(report)
                await self.show_large_planets(report)
                await self.show_films(report)
                await self.show_vehicle(report)
            except SwapiError as exc:
                _logger.error("Error: %s", exc)
                report.error = str(exc)
                report.lines.append(f"Error: {exc}")
                return report

            self._cursors.advance_character()
            report.lines.extend(report_stats(self._client.stats(), self._write))
            return report

    async def show_character(self, report: DemoReport) -> None:
        try:
            person = await self._client.get_person(self._cursors.character_id)
        except SwapiHttpError as exc:
            if exc.status_code == 404:
                self._cursors.advance_character()
            raise
        self._client.counters.record_payload(person.raw)
        self._emit(report, display.character_lines(person))

    async def show_starships(self, report: DemoReport) -> None:
        page = await self._client.get_starships(page=1)
        self._client.counters.record_payload(page.raw)
        self._emit(report, display.starships_lines(page, STARSHIPS_LIMIT))

    async def show_large_planets(self, report: DemoReport) -> None:
        page = await self._client.get_planets(page=1)
        self._client.counters.record_payload(page.raw)
        self._emit(report, display.large_planets_lines(large_planets(page.results)))

    async def show_films(self, report: DemoReport) -> None:
        page = await self._client.get_films()
        self._client.counters.record_payload(page.raw)
        self._emit(report, display.films_lines(sort_films_by_release(page.results)))

    async def show_vehicle(self, report: DemoReport) -> None:
        if self._cursors.vehicle_id > MAX_VEHICLE_ID:
            return
        try:
            vehicle = await self._client.get_vehicle(self._cursors.vehicle_id)
        except SwapiHttpError as exc:
            if exc.status_code == 404:
                self._cursors.advance_vehicle()
            raise
        self._client.counters.record_payload(vehicle.raw)
        self._emit(report, display.vehicle_lines(vehicle))
        self._cursors.advance_vehicle()

"""High-level async client for the SWAPI REST service."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from pyswapi._cache import ResourceCache
from pyswapi._transport import HttpTransport, Transport
from pyswapi.config import SwapiConfig
from pyswapi.exceptions import SwapiError, SwapiParseError
from pyswapi.models import Film, Page, Person, Planet, Starship, Vehicle
from pyswapi.stats import FetchCounters, StatsSnapshot

_logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class SwapiClient:
    """Async client that caches every successfully fetched endpoint.

    Usage::

        async with SwapiClient(config) as client:
            luke = await client.get_person(1)

    The client owns the resource cache and the fetch counters. Each
    failure is counted once, here, and then propagated to the caller.
    """

    def __init__(
        self,
        config: SwapiConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._cache = ResourceCache()
        self._counters = FetchCounters()

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> SwapiClient:
        if self._transport is not None:
            return self
        if not self._config.verify_ssl:
            _logger.warning("TLS certificate validation is DISABLED for %s", self._config.base_url)
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config(self) -> SwapiConfig:
        return self._config

    @property
    def cache(self) -> ResourceCache:
        return self._cache

    @property
    def counters(self) -> FetchCounters:
        return self._counters

    def stats(self) -> StatsSnapshot:
        """Snapshot of the counters, live cache size and configuration."""
        return StatsSnapshot(
            api_calls=self._counters.api_calls,
            cache_size=len(self._cache),
            data_size=self._counters.data_size,
            errors=self._counters.errors,
            debug=self._config.debug,
            timeout=self._config.timeout_ms,
        )

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise SwapiError("Client not initialized. Use 'async with SwapiClient(...) as client:'")
        return self._transport

    async def fetch(self, endpoint: str) -> Any:
        """Return the JSON payload for *endpoint*, from cache when possible.

        Concurrent callers for the same uncached endpoint share a single
        request.

        Raises
        ------
        SwapiNetworkError, SwapiHttpError, SwapiTimeoutError, SwapiParseError
            Propagated from the transport; nothing is cached.
        """
        if endpoint in self._cache:
            _logger.debug("Using cached data for %s", endpoint)
            return self._cache.get(endpoint)

        pending = self._cache.pending(endpoint)
        if pending is not None:
            _logger.debug("Joining in-flight request for %s", endpoint)
            return await asyncio.shield(pending)

        task = asyncio.ensure_future(self._fetch_uncached(endpoint))
        self._cache.track(endpoint, task)
        task.add_done_callback(lambda done: self._finish_inflight(endpoint, done))
        # Cancelling this caller must not cancel the request for callers that joined it.
        return await asyncio.shield(task)

    def _finish_inflight(self, endpoint: str, task: asyncio.Task[Any]) -> None:
        self._cache.untrack(endpoint, task)
        if not task.cancelled():
            # Mark the exception retrieved; every awaiting caller re-raises it.
            task.exception()

    async def _fetch_uncached(self, endpoint: str) -> Any:
        transport = self._require_transport()
        self._counters.record_attempt()
        try:
            payload = await transport.get_json(endpoint)
        except SwapiError as exc:
            self._counters.record_error()
            _logger.debug("Fetch failed for %s: %s", endpoint, exc)
            raise

        payload = self._cache.store(endpoint, payload)
        _logger.debug("Successfully fetched data for %s", endpoint)
        _logger.debug("Cache size: %d", len(self._cache))
        return payload

    def _validate(self, model: type[M], payload: Any, endpoint: str) -> M:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            self._counters.record_error()
            raise SwapiParseError(f"Unexpected payload shape from {endpoint}: {exc}", endpoint=endpoint) from exc

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    async def get_person(self, person_id: int) -> Person:
        endpoint = f"people/{person_id}"
        return self._validate(Person, await self.fetch(endpoint), endpoint)

    async def get_starships(self, page: int = 1) -> Page[Starship]:
        endpoint = f"starships/?page={page}"
        return self._validate(Page[Starship], await self.fetch(endpoint), endpoint)

    async def get_planets(self, page: int = 1) -> Page[Planet]:
        endpoint = f"planets/?page={page}"
        return self._validate(Page[Planet], await self.fetch(endpoint), endpoint)

    async def get_films(self) -> Page[Film]:
        endpoint = "films/"
        return self._validate(Page[Film], await self.fetch(endpoint), endpoint)

    async def get_vehicle(self, vehicle_id: int) -> Vehicle:
        endpoint = f"vehicles/{vehicle_id}"
        return self._validate(Vehicle, await self.fetch(endpoint), endpoint)

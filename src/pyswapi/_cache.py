"""In-memory resource cache keyed by endpoint."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from typing import Any


class ResourceCache:
    """Write-once mapping from endpoint to the parsed JSON payload.

    Entries live for the lifetime of the cache: there is no eviction,
    expiry or overwrite. Pending fetches are tracked separately so a
    second caller for the same endpoint can join the request already
    in flight.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._inflight: dict[str, asyncio.Task[Any]] = {}

    def __contains__(self, endpoint: object) -> bool:
        return endpoint in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def get(self, endpoint: str) -> Any:
        """Return the cached payload, or ``None`` when *endpoint* is not cached."""
        return self._entries.get(endpoint)

    def store(self, endpoint: str, payload: Any) -> Any:
        """Store *payload* unless *endpoint* already has an entry.

        Returns the value that ends up cached, which is the existing entry
        when one is present.
        """
        return self._entries.setdefault(endpoint, payload)

    def pending(self, endpoint: str) -> asyncio.Task[Any] | None:
        task = self._inflight.get(endpoint)
        if task is not None and task.done():
            return None
        return task

    def track(self, endpoint: str, task: asyncio.Task[Any]) -> None:
        self._inflight[endpoint] = task

    def untrack(self, endpoint: str, task: asyncio.Task[Any]) -> None:
        if self._inflight.get(endpoint) is task:
            del self._inflight[endpoint]

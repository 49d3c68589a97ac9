"""Fetch counters and the stats snapshot exposed on the console and ``/stats``."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict


def payload_size(payload: Any) -> int:
    """Byte length of *payload* re-serialised as compact UTF-8 JSON."""
    return len(json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8"))


@dataclass
class FetchCounters:
    """Running totals for the life of the process. Never reset."""

    api_calls: int = 0
    errors: int = 0
    data_size: int = 0

    def record_attempt(self) -> None:
        self.api_calls += 1

    def record_error(self) -> None:
        self.errors += 1

    def record_payload(self, payload: Any) -> int:
        size = payload_size(payload)
        self.data_size += size
        return size


class StatsSnapshot(BaseModel):
    """Point-in-time view of the counters, cache size and configuration."""

    model_config = ConfigDict(frozen=True)

    api_calls: int = 0
    cache_size: int = 0
    data_size: int = 0
    errors: int = 0
    debug: bool = True
    timeout: int = 0

    def lines(self) -> list[str]:
        return [
            "",
            "Stats:",
            f"API Calls: {self.api_calls}",
            f"Cache Size: {self.cache_size}",
            f"Total Data Size: {self.data_size} bytes",
            f"Error Count: {self.errors}",
        ]


def report_stats(snapshot: StatsSnapshot, write: Callable[[str], None] = print) -> list[str]:
    """Write the stats block when debug mode is on.

    Returns the lines written, which is empty when debug mode is off.
    """
    if not snapshot.debug:
        return []
    lines = snapshot.lines()
    for line in lines:
        write(line)
    return lines

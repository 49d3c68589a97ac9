"""Paged list response."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import Field

from pyswapi.models._base import SwapiBaseModel

T = TypeVar("T", bound=SwapiBaseModel)


class Page(SwapiBaseModel, Generic[T]):
    """One page of a list endpoint (``{"count", "next", "previous", "results"}``).

    Only the requested page is ever fetched; ``next`` is informational.
    """

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[T] = Field(default_factory=list)

"""Base model for SWAPI resources.

Every resource model inherits from :class:`SwapiBaseModel` which
provides:

* frozen instances that ignore fields the model does not declare;
* numbers coerced to strings, since SWAPI sends most measurements as
  strings (``"172"``, ``"unknown"``, ``"n/a"``) but not all mirrors do;
* a ``raw`` dict that captures the original payload.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SwapiBaseModel(BaseModel):
    """Base for SWAPI response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        # Keep an explicit raw= when constructing with kwargs.
        if "raw" in values:
            return values
        cleaned = {key: value for key, value in values.items() if value is not None}
        cleaned["raw"] = dict(values)
        return cleaned

"""Base model for upstream API records.

Every record parsed from the coverage API inherits from :class:`ApiModel`
which provides:

* ``extra="ignore"`` so unknown API keys never break parsing.
* A ``model_validator(mode="before")`` that strips placeholder values
  (``None``, ``""``, NaN) so the field default is used.
* A ``raw`` dict that captures the original payload.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

_SENTINELS = frozenset({"", "NaN", "nan"})


class ApiModel(BaseModel):
    """Base for coverage API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original API response dict."""

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_api_values(cls, values: Any) -> Any:
        """Strip placeholder values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        original = dict(values)
        cleaned = ApiModel._clean_dict(original)
        # Keep an explicit raw= from keyword construction.
        if "raw" not in values:
            cleaned["raw"] = original
        return cleaned

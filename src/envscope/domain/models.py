"""Resolution record returned by the generic resolver."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ResolutionOrigin(StrEnum):
    """Where a resolved value came from."""

    FOUND = "found"
    DEFAULT = "default"
    UNSET = "unset"


class Resolution(BaseModel):
    """Outcome of a single lookup.

    Attributes:
        key: The winning candidate key, or the primary (first-attempted)
            key when no candidate resolved.
        raw: Raw text stored under ``key`` when a candidate won.
        value: Parsed value, the caller's default, or None.
        origin: Whether the value was found, defaulted, or left unset.
        candidates: Every key in search order.
    """

    model_config = {"frozen": True}

    key: str
    raw: str | None = None
    value: Any = None
    origin: ResolutionOrigin
    candidates: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return self.origin is ResolutionOrigin.FOUND

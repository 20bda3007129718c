"""
Pydantic models describing how a location string was resolved.
These are pure data objects, safe to serialize for logs or APIs.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MatchMethod(str, Enum):
    EMPTY = "empty"
    EXACT = "exact"
    PARTIAL = "partial"
    FUZZY = "fuzzy"
    FALLBACK = "fallback"


class LocationResolution(BaseModel):
    """Outcome of normalizing one raw location string."""
    query: Optional[str] = Field(None, description="Raw input as supplied by the caller")
    cleaned: str = ""
    canonical: str = Field("", description="Comparison key; the cleaned input when nothing matched")
    method: MatchMethod = MatchMethod.EMPTY
    # Dictionary key that decided the match, if any
    matched_variant: Optional[str] = None
    score: Optional[float] = Field(None, ge=0.0, le=100.0)

    model_config = {"frozen": True}

    @property
    def is_known(self) -> bool:
        """True when the dictionary recognised the location."""
        return self.method in (MatchMethod.EXACT, MatchMethod.PARTIAL, MatchMethod.FUZZY)

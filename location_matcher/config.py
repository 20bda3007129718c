"""
Central configuration loaded from environment variables with sensible defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass(frozen=True)
class MatchingConfig:
    # Minimum similarity (0-100) for a fuzzy match to be accepted
    fuzzy_threshold: float = float(os.getenv("LOCATION_FUZZY_THRESHOLD", "60"))
    # Shorter side of a substring match must be at least this long
    min_partial_length: int = int(os.getenv("LOCATION_MIN_PARTIAL_LENGTH", "3"))
    # JSON file of canonical -> variants; empty means the built-in sample data
    dictionary_path: str = os.getenv("LOCATION_DICTIONARY_PATH", "")


@dataclass(frozen=True)
class Settings:
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    env: str = os.getenv("APP_ENV", "development")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()

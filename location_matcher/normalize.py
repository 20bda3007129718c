"""
Location normalization: raw user input -> canonical name.

Strategy (first hit wins):
  1. Clean the string (lowercase, strip punctuation, collapse whitespace)
  2. Exact lookup in the reverse index
  3. Partial match: input inside a known variant or a variant inside the input
  4. Fuzzy match: best edit-distance similarity at or above the threshold
  5. Fall back to the cleaned input itself

Nothing here raises for bad input; "no match" is an ordinary outcome.
"""

from __future__ import annotations

import logging
from typing import Optional

from location_matcher.config import get_settings
from location_matcher.gazetteer import CanonicalDictionary, get_default_dictionary
from location_matcher.models import LocationResolution, MatchMethod
from location_matcher.similarity import similarity
from location_matcher.text import clean_location

logger = logging.getLogger(__name__)


class LocationNormalizer:
    """
    Resolves free-text locations against a CanonicalDictionary.

    Both scans below are linear over every variant, which is fine for a
    dictionary of a few hundred place names.
    """

    def __init__(
        self,
        dictionary: CanonicalDictionary,
        fuzzy_threshold: Optional[float] = None,
        min_partial_length: Optional[int] = None,
    ):
        matching = get_settings().matching
        self.dictionary = dictionary
        self.fuzzy_threshold = matching.fuzzy_threshold if fuzzy_threshold is None else fuzzy_threshold
        self.min_partial_length = matching.min_partial_length if min_partial_length is None else min_partial_length

    def normalize(self, value: object) -> str:
        return self.resolve(value).canonical

    def resolve(self, value: object) -> LocationResolution:
        query = value if isinstance(value, str) else None
        cleaned = clean_location(value)
        if not cleaned:
            return LocationResolution(query=query)

        canonical = self.dictionary.lookup(cleaned)
        if canonical is not None:
            return LocationResolution(
                query=query, cleaned=cleaned, canonical=canonical,
                method=MatchMethod.EXACT, matched_variant=cleaned, score=100.0,
            )

        hit = self._partial(cleaned)
        if hit is not None:
            key, canonical = hit
            return LocationResolution(
                query=query, cleaned=cleaned, canonical=canonical,
                method=MatchMethod.PARTIAL, matched_variant=key,
            )

        hit = self._fuzzy(cleaned, self.fuzzy_threshold)
        if hit is not None:
            key, canonical, score = hit
            logger.info("Fuzzy match: %r -> %r (via %r, %.1f)", cleaned, canonical, key, score)
            return LocationResolution(
                query=query, cleaned=cleaned, canonical=canonical,
                method=MatchMethod.FUZZY, matched_variant=key, score=score,
            )

        return LocationResolution(
            query=query, cleaned=cleaned, canonical=cleaned, method=MatchMethod.FALLBACK,
        )

    def find_partial_match(self, cleaned: str) -> Optional[str]:
        """Canonical name of the first variant that contains, or is contained in, `cleaned`."""
        hit = self._partial(cleaned)
        return hit[1] if hit else None

    def find_fuzzy_match(self, cleaned: str, threshold: Optional[float] = None) -> Optional[str]:
        """Canonical name of the most similar variant scoring at least `threshold`."""
        hit = self._fuzzy(cleaned, self.fuzzy_threshold if threshold is None else threshold)
        return hit[1] if hit else None

    def _partial(self, cleaned: str) -> Optional[tuple[str, str]]:
        for key, canonical in self.dictionary.index.items():
            if key in cleaned or cleaned in key:
                # Skip trivial overlaps like "ap" inside "nuapada"
                if min(len(key), len(cleaned)) >= self.min_partial_length:
                    return key, canonical
        return None

    def _fuzzy(self, cleaned: str, threshold: float) -> Optional[tuple[str, str, float]]:
        best: Optional[tuple[str, str, float]] = None
        for key, canonical in self.dictionary.index.items():
            score = similarity(cleaned, key)
            # Strict ">" keeps the first key seen among equal scores
            if score >= threshold and (best is None or score > best[2]):
                best = (key, canonical, score)
        return best


# Singleton normalizer instance
_normalizer: Optional[LocationNormalizer] = None


def get_normalizer() -> LocationNormalizer:
    global _normalizer
    if _normalizer is None:
        _normalizer = LocationNormalizer(get_default_dictionary())
    return _normalizer


def normalize_location(value: object) -> str:
    """Canonical form of `value` using the default dictionary ("" for empty input)."""
    return get_normalizer().normalize(value)


def resolve_location(value: object) -> LocationResolution:
    return get_normalizer().resolve(value)

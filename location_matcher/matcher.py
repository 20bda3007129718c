"""
Location comparison built on normalization.

Two locations match when they normalize to the same non-empty canonical
name. The canonical name is the equivalence key, so the relation is not
transitive over raw similarity: "bolangiri" and "bongalir" match because both
resolve to "balangir", even though they are far apart as strings.
"""

from __future__ import annotations

from typing import Iterable, Optional

from location_matcher.gazetteer import CanonicalDictionary
from location_matcher.normalize import LocationNormalizer, get_normalizer


class LocationMatcher:
    def __init__(
        self,
        dictionary: Optional[CanonicalDictionary] = None,
        normalizer: Optional[LocationNormalizer] = None,
    ):
        if normalizer is None:
            normalizer = LocationNormalizer(dictionary) if dictionary is not None else get_normalizer()
        self.normalizer = normalizer

    @property
    def dictionary(self) -> CanonicalDictionary:
        return self.normalizer.dictionary

    def normalize(self, value: object) -> str:
        return self.normalizer.normalize(value)

    def locations_match(self, a: object, b: object) -> bool:
        """True if both normalize to the same canonical name. Blank never matches blank."""
        norm_a = self.normalize(a)
        return norm_a != "" and norm_a == self.normalize(b)

    def locations_overlap(self, a: object, b: object) -> bool:
        """
        Looser containment test on normalized forms, for coarse filters
        such as "everything in this district".
        """
        norm_a = self.normalize(a)
        norm_b = self.normalize(b)
        if not norm_a or not norm_b:
            return False
        return norm_a in norm_b or norm_b in norm_a

    def find_best_match(self, target: object, candidates: Iterable[str]) -> Optional[str]:
        """
        First candidate matching `target`, in the order given, or None.
        Stops at the first hit; later candidates are not considered.
        """
        norm_target = self.normalize(target)
        if not norm_target:
            return None
        for candidate in candidates:
            if self.normalize(candidate) == norm_target:
                return candidate
        return None

    def get_location_variations(self, value: object) -> list[str]:
        """Known spellings of the location's canonical entry, or just its normalized form."""
        normalized = self.normalize(value)
        variants = self.dictionary.variants_for(normalized)
        if variants is not None:
            return variants
        return [normalized] if normalized else []


# Singleton matcher instance
_matcher: Optional[LocationMatcher] = None


def get_matcher() -> LocationMatcher:
    global _matcher
    if _matcher is None:
        _matcher = LocationMatcher(normalizer=get_normalizer())
    return _matcher


def locations_match(a: object, b: object) -> bool:
    return get_matcher().locations_match(a, b)


def locations_overlap(a: object, b: object) -> bool:
    return get_matcher().locations_overlap(a, b)


def find_best_match(target: object, candidates: Iterable[str]) -> Optional[str]:
    return get_matcher().find_best_match(target, candidates)


def get_location_variations(value: object) -> list[str]:
    return get_matcher().get_location_variations(value)

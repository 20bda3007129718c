"""
Tests for location matching, best-match search and variation lookup.
"""

from __future__ import annotations

import pytest

from location_matcher.gazetteer import CanonicalDictionary
from location_matcher.matcher import (
    LocationMatcher,
    find_best_match,
    get_location_variations,
    locations_match,
    locations_overlap,
)
from location_matcher.normalize import LocationNormalizer
from location_matcher.similarity import similarity


SMALL = {
    "balangir": ["balangir", "bolangir", "bongalir"],
    "cuttack": ["kattak", "cuttak"],
    "west bengal": ["west bengal", "wb", "bengal"],
}


@pytest.fixture(scope="module")
def matcher():
    normalizer = LocationNormalizer(CanonicalDictionary(SMALL), fuzzy_threshold=60, min_partial_length=3)
    return LocationMatcher(normalizer=normalizer)


class TestLocationsMatch:
    def test_same_canonical(self, matcher):
        assert matcher.locations_match("Bolangir", "BALANGIR")
        assert matcher.locations_match("Kattak", "cuttack")

    def test_partial_match(self, matcher):
        assert matcher.locations_match("Bolangir", "Balangir District")

    def test_symmetric(self, matcher):
        pairs = [("Bolangir", "Balangir District"), ("wb", "Cuttack"), ("Kattak", "cuttak")]
        for a, b in pairs:
            assert matcher.locations_match(a, b) == matcher.locations_match(b, a)

    def test_different_places(self, matcher):
        assert not matcher.locations_match("Balangir", "Cuttack")

    def test_blank_never_matches(self, matcher):
        assert not matcher.locations_match("", "")
        assert not matcher.locations_match(None, None)
        assert not matcher.locations_match("  ", "!!")

    def test_unknown_places_fall_back_to_themselves(self, matcher):
        assert not matcher.locations_match("XyzUnknownPlace", "AnotherUnknownPlace")
        assert matcher.locations_match("XyzUnknownPlace", "xyzunknown-place!")

    def test_canonical_form_is_the_equivalence_key(self, matcher):
        # Each side fuzzy-matches a different balangir variant; the raw strings
        # are too far apart to match one another directly.
        assert similarity("bolangix", "bongalix") < 60
        assert matcher.locations_match("bolangix", "bongalix")


class TestFindBestMatch:
    def test_returns_candidate_as_given(self, matcher):
        assert matcher.find_best_match("Cuttack", ["Balangir", "Kattak", "West Bengal"]) == "Kattak"

    def test_first_match_wins(self, matcher):
        assert matcher.find_best_match("Bolangir", ["Cuttack", "Balangir", "bongalir"]) == "Balangir"
        assert matcher.find_best_match("Bolangir", ["bongalir", "Balangir"]) == "bongalir"

    def test_no_match(self, matcher):
        assert matcher.find_best_match("Cuttack", ["Balangir", "Bengal"]) is None
        assert matcher.find_best_match("Cuttack", []) is None

    def test_blank_target(self, matcher):
        assert matcher.find_best_match("", ["", "  "]) is None

    def test_accepts_iterators(self, matcher):
        assert matcher.find_best_match("wb", (c for c in ["Puri", "west bengal"])) == "west bengal"


class TestVariations:
    def test_known_location(self, matcher):
        assert matcher.get_location_variations("Bolangir") == ["balangir", "bolangir", "bongalir"]

    def test_canonical_included(self, matcher):
        assert matcher.get_location_variations("kattak") == ["cuttack", "kattak", "cuttak"]

    def test_returns_a_copy(self, matcher):
        variations = matcher.get_location_variations("kattak")
        variations.append("mutated")
        assert "mutated" not in matcher.get_location_variations("kattak")

    def test_unknown_location(self, matcher):
        assert matcher.get_location_variations("Timbuktu") == ["timbuktu"]

    def test_blank(self, matcher):
        assert matcher.get_location_variations("") == []


class TestOverlap:
    def test_same_place(self, matcher):
        assert matcher.locations_overlap("Bolangir", "balangir")

    def test_containment_of_unknown_places(self, matcher):
        assert matcher.locations_overlap("New Town", "town")

    def test_no_overlap(self, matcher):
        assert not matcher.locations_overlap("Kattak", "West Bengal")

    def test_blank(self, matcher):
        assert not matcher.locations_overlap("", "town")
        assert not matcher.locations_overlap(None, "")


class TestDefaultMatcher:
    def test_scenarios(self):
        assert locations_match("Bolangir", "Balangir District")
        assert find_best_match("Cuttack", ["Bhubaneswar", "Kattak", "Puri"]) == "Kattak"
        assert not locations_match("", "")

    def test_variations(self):
        assert "orissa" in get_location_variations("Odisha")
        assert get_location_variations("Orisa")[0] == "orissa"

    def test_overlap(self):
        assert locations_overlap("Calcutta", "kolkata")

    def test_injected_dictionary(self):
        m = LocationMatcher(CanonicalDictionary({"puri": ["jagannath puri"]}))
        assert m.dictionary.lookup("jagannath puri") == "puri"
        assert m.locations_match("Jagannath Puri", "PURI")

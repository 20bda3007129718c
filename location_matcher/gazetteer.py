"""
Canonical location dictionary.

A table of canonical place names (districts, states, cities) and the spellings
users actually type for them, plus the reverse index used for lookups.

Design:
  - The dictionary is data. Callers inject any mapping of
    canonical name -> variant spellings; the sample below is only a default.
  - Canonical names and variants are cleaned the same way lookups are, so a
    variant like "St. Thomas Mount" is reachable from typed input.
  - The canonical spelling is always one of its own variants.
  - The reverse index (variant -> canonical) is built once and exposed
    read-only. If two entries claim the same variant the later entry wins.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from location_matcher.config import get_settings
from location_matcher.text import clean_location

logger = logging.getLogger(__name__)


class DictionaryError(ValueError):
    """Raised when a dictionary file cannot be turned into a CanonicalDictionary."""


@dataclass(frozen=True)
class CanonicalEntry:
    canonical: str              # "balangir"
    variants: tuple[str, ...]   # ("balangir", "bolangir", ...)


# ══════════════════════════════════════════════════════════════════════
# SAMPLE DATA
# ══════════════════════════════════════════════════════════════════════

DEFAULT_VARIATIONS: dict[str, list[str]] = {}


def _add(canonical: str, variants: list[str]) -> None:
    DEFAULT_VARIATIONS[canonical] = variants


# ── Odisha districts ──────────────────────────────────────────────────

_add("balangir", ["balangir", "bolangir", "balangiri", "bolangiri", "balangirh", "bolangirh", "bongalir"])
_add("bhubaneswar", ["bhubaneswar", "bhubaneshwar", "bhubaneshvar", "bhubanesvar"])
_add("cuttack", ["cuttack", "kattak", "cuttak", "kuttack"])
_add("puri", ["puri"])
_add("khordha", ["khordha", "khurda", "khorda"])
_add("gajapati", ["gajapati"])
_add("ganjam", ["ganjam"])
_add("jagatsinghpur", ["jagatsinghpur", "jagatsingpur"])
_add("jajpur", ["jajpur"])
_add("jharsuguda", ["jharsuguda"])
_add("kalahandi", ["kalahandi"])
_add("kandhamal", ["kandhamal"])
_add("kendrapara", ["kendrapara"])
_add("kendujhar", ["kendujhar", "keonjhar"])
_add("malkangiri", ["malkangiri"])
_add("mayurbhanj", ["mayurbhanj"])
_add("nabarangpur", ["nabarangpur", "nowrangpur"])
_add("nuapada", ["nuapada"])
_add("rayagada", ["rayagada"])
_add("sambalpur", ["sambalpur"])
_add("subarnapur", ["subarnapur", "sonepur"])
_add("sundargarh", ["sundargarh"])

# ── States ────────────────────────────────────────────────────────────

_add("odisha", ["orissa", "odisha", "orisa", "odisa"])
_add("west bengal", ["west bengal", "westbengal", "wb", "bengal"])
_add("bihar", ["bihar"])
_add("jharkhand", ["jharkhand"])
_add("chhattisgarh", ["chhattisgarh", "chhatisgarh", "chattisgarh"])
_add("andhra pradesh", ["andhra pradesh", "andhra", "ap"])
_add("telangana", ["telangana"])

# ── Cities ────────────────────────────────────────────────────────────

_add("kolkata", ["calcutta", "kolkata", "kolkatta"])
_add("mumbai", ["bombay", "mumbai"])
_add("delhi", ["delhi", "new delhi"])
_add("bangalore", ["bengaluru", "bangalore"])
_add("chennai", ["madras", "chennai"])
_add("hyderabad", ["hyderabad"])
_add("pune", ["pune", "poona"])
_add("ahmedabad", ["ahmedabad"])
_add("jaipur", ["jaipur"])
_add("lucknow", ["lucknow"])
_add("patna", ["patna"])
_add("visakhapatnam", ["vizag", "visakhapatnam"])
_add("vadodara", ["baroda", "vadodara"])
_add("varanasi", ["banaras", "varanasi", "benares"])
_add("mysore", ["mysuru", "mysore"])
_add("gulbarga", ["kalaburagi", "gulbarga"])
_add("kochi", ["cochin", "kochi"])
_add("gurgaon", ["gurugram", "gurgaon"])
_add("prayagraj", ["allahabad", "prayagraj"])


# ══════════════════════════════════════════════════════════════════════
# DICTIONARY
# ══════════════════════════════════════════════════════════════════════

def _dedupe(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for v in values:
        if v and v not in seen:
            seen.add(v)
            out.append(v)
    return out


class CanonicalDictionary:
    """
    Canonical entries plus the variant -> canonical reverse index.

    Iterating the index yields keys in first-insertion order: entries in the
    order given, and within an entry the canonical name first when the author
    omitted it, then the variants as listed. Partial and fuzzy matching scan
    in this order.
    """

    def __init__(self, variations: Optional[Mapping[str, Iterable[str]]] = None):
        merged: dict[str, list[str]] = {}
        for raw_canonical, raw_variants in (variations or {}).items():
            canonical = clean_location(raw_canonical)
            if not canonical:
                logger.warning("Skipping dictionary entry with blank canonical name: %r", raw_canonical)
                continue
            cleaned = [clean_location(v) for v in raw_variants]
            if canonical not in cleaned:
                cleaned.insert(0, canonical)
            merged.setdefault(canonical, []).extend(cleaned)

        entries: dict[str, CanonicalEntry] = {}
        index: dict[str, str] = {}
        for canonical, variants in merged.items():
            entry = CanonicalEntry(canonical, tuple(_dedupe(variants)))
            entries[canonical] = entry
            for variant in entry.variants:
                previous = index.get(variant)
                if previous is not None and previous != canonical:
                    logger.warning(
                        "Variant %r claimed by %r and %r; keeping %r",
                        variant, previous, canonical, canonical,
                    )
                index[variant] = canonical

        self._entries = MappingProxyType(entries)
        self._index = MappingProxyType(index)
        logger.debug("Built location dictionary: %d entries, %d variants", len(entries), len(index))

    @classmethod
    def from_json(cls, path: str | Path) -> "CanonicalDictionary":
        return cls(load_dictionary(path))

    @property
    def index(self) -> Mapping[str, str]:
        """Read-only variant -> canonical mapping."""
        return self._index

    @property
    def entries(self) -> Mapping[str, CanonicalEntry]:
        return self._entries

    def lookup(self, cleaned: str) -> Optional[str]:
        return self._index.get(cleaned)

    def variants_for(self, canonical: str) -> Optional[list[str]]:
        entry = self._entries.get(canonical)
        if entry is None:
            return None
        return list(entry.variants)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, canonical: object) -> bool:
        return canonical in self._entries


# ── Loading & integrity checks ────────────────────────────────────────

_VARIATIONS_ADAPTER = TypeAdapter(dict[str, list[str]])


def load_dictionary(path: str | Path) -> dict[str, list[str]]:
    """
    Read a JSON object of canonical name -> list of variant spellings.
    Raises DictionaryError if the file cannot be read or is not valid JSON
    of that shape.
    """
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryError(f"{p}: cannot read dictionary ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise DictionaryError(f"{p}: invalid JSON ({exc})") from exc

    try:
        return _VARIATIONS_ADAPTER.validate_python(raw, strict=True)
    except ValidationError as exc:
        raise DictionaryError(f"{p}: expected an object of string lists ({exc.error_count()} errors)") from exc


def find_conflicts(variations: Mapping[str, Iterable[str]]) -> dict[str, list[str]]:
    """
    Variants claimed by more than one canonical entry, after cleaning.
    Returns variant -> canonical names in dictionary order.
    """
    claims: dict[str, list[str]] = {}
    for raw_canonical, raw_variants in variations.items():
        canonical = clean_location(raw_canonical)
        if not canonical:
            continue
        for variant in _dedupe([canonical, *(clean_location(v) for v in raw_variants)]):
            owners = claims.setdefault(variant, [])
            if canonical not in owners:
                owners.append(canonical)
    return {v: owners for v, owners in claims.items() if len(owners) > 1}


# Singleton dictionary instance
_dictionary: Optional[CanonicalDictionary] = None


def init_default_dictionary(path: Optional[str] = None) -> CanonicalDictionary:
    """
    Build the process-wide dictionary from `path`, LOCATION_DICTIONARY_PATH,
    or the sample data when neither is set. Raises DictionaryError for a bad file.
    """
    global _dictionary
    if path is None:
        path = get_settings().matching.dictionary_path
    if path:
        logger.info("Loading location dictionary from %s", path)
        _dictionary = CanonicalDictionary.from_json(path)
    else:
        _dictionary = CanonicalDictionary(DEFAULT_VARIATIONS)
    return _dictionary


def get_default_dictionary() -> CanonicalDictionary:
    """
    The process-wide dictionary. A dictionary file that cannot be loaded is
    logged and replaced by an empty dictionary, so lookups fall back to the
    cleaned input instead of raising.
    """
    global _dictionary
    if _dictionary is None:
        try:
            init_default_dictionary()
        except DictionaryError:
            logger.exception("Location dictionary unavailable; lookups will return cleaned input")
            _dictionary = CanonicalDictionary({})
    return _dictionary


# Built at import, before any lookup runs
get_default_dictionary()

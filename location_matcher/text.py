"""Text cleaning shared by dictionary construction and lookups."""

from __future__ import annotations

import re

_PUNCT_RE = re.compile(r"[^\w\s]")
_WS_RE = re.compile(r"\s+")


def clean_location(value: object) -> str:
    """
    Lowercase, drop punctuation, collapse whitespace and trim.
    Anything that is not a string cleans to "".
    """
    if not isinstance(value, str) or not value:
        return ""
    t = _PUNCT_RE.sub("", value.lower())
    return _WS_RE.sub(" ", t).strip()

"""Pattern catalog for the notations the segmenter recognizes.

Each family owns one regular expression. The combined scanner joins them with
alternation in catalog order, so when two families could start a match at the
same position the earlier family wins. Do not reorder ``CATALOG``.
"""

from __future__ import annotations

import re
from enum import Enum
from functools import lru_cache

__all__ = [
    "CATALOG",
    "PatternFamily",
    "catalog",
    "combined_pattern",
    "combined_source",
]

# \d, \w and \b follow ASCII semantics (non-ASCII digits never trigger).
_FLAGS = re.ASCII


class PatternFamily(str, Enum):
    TRADEMARK = "trademark"
    REGISTERED = "registered"
    COPYRIGHT = "copyright"
    ORDINAL = "ordinal"
    CHEMICAL_ELEMENT = "chemical_element"
    CHEMICAL_PAREN = "chemical_paren"
    MATH_SUPER = "math_super"
    MATH_SUB = "math_sub"


CATALOG: tuple[tuple[PatternFamily, str], ...] = (
    (PatternFamily.TRADEMARK, r"™|\(TM\)|(?<!\w)TM(?!\w)"),
    (PatternFamily.REGISTERED, r"®|\(R\)(?!\))"),
    (PatternFamily.COPYRIGHT, r"©|\(C\)(?!\))"),
    (PatternFamily.ORDINAL, r"\b\d+(?:st|nd|rd|th)\b"),
    (PatternFamily.CHEMICAL_ELEMENT, r"[A-Z][a-z]?\d+"),
    (PatternFamily.CHEMICAL_PAREN, r"\)\d+"),
    (PatternFamily.MATH_SUPER, r"\^(?:\d+|\{[^}]+\})"),
    (PatternFamily.MATH_SUB, r"_(?:\d+|\{[^}]+\})"),
)


def catalog(*, ordinals_enabled: bool = True) -> tuple[tuple[PatternFamily, str], ...]:
    """Return the active ``(family, source)`` pairs in scan order."""
    if ordinals_enabled:
        return CATALOG
    return tuple(
        (family, source)
        for family, source in CATALOG
        if family is not PatternFamily.ORDINAL
    )


def combined_source(*, ordinals_enabled: bool = True) -> str:
    """Join the active family sources into one alternation.

    Every family is wrapped in a named group carrying its value so the
    segmenter can tell which alternative fired.
    """
    return "|".join(
        f"(?P<{family.value}>{source})"
        for family, source in catalog(ordinals_enabled=ordinals_enabled)
    )


@lru_cache(maxsize=None)
def combined_pattern(*, ordinals_enabled: bool = True) -> re.Pattern[str]:
    """Compiled combined scanner, built once per option set and shared."""
    return re.compile(combined_source(ordinals_enabled=ordinals_enabled), _FLAGS)

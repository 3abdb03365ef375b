"""Split text into plain, superscript and subscript segments.

The segmenter scans the input once with the combined catalog pattern. Every
match is handed to the classifier of the family that produced it, which
returns one or two segments (``1st`` becomes ``"1"`` plus superscript
``"st"``). Unmatched text between matches is kept verbatim.

Example:
    >>> segment("Acme(TM) rocks")
    [Segment(kind='plain', content='Acme'), Segment(kind='super', content='™'), Segment(kind='plain', content=' rocks')]
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from .constants import COPYRIGHT_SYMBOL, REGISTERED_SYMBOL, TRADEMARK_SYMBOL
from .patterns import PatternFamily, catalog, combined_pattern
from .types import ScanMatch, Segment, SegmentKind, Trace

logger = logging.getLogger(__name__)

__all__ = ["has_annotations", "scan", "segment"]

_ORDINAL_PARTS = re.compile(r"(\d+)(st|nd|rd|th)", re.ASCII)
_ELEMENT_PARTS = re.compile(r"([A-Z][a-z]?)(\d+)", re.ASCII)
_PAREN_PARTS = re.compile(r"(\))(\d+)", re.ASCII)
_BRACES = re.compile(r"[{}]")

Classifier = Callable[[ScanMatch], tuple[Segment, ...] | None]


def scan(text: str, *, ordinals_enabled: bool = True) -> list[ScanMatch]:
    """Return every match of the combined pattern, left to right."""
    families = [
        family.value for family, _ in catalog(ordinals_enabled=ordinals_enabled)
    ]
    pattern = combined_pattern(ordinals_enabled=ordinals_enabled)
    matches: list[ScanMatch] = []
    for match in pattern.finditer(text):
        # Groups are tried in catalog order; exactly one participates.
        name = next(name for name in families if match.group(name) is not None)
        matches.append(
            ScanMatch(
                start=match.start(),
                end=match.end(),
                family=PatternFamily(name),
                raw=match.group(0),
            )
        )
    return matches


def _whole(match: ScanMatch, kind: SegmentKind, content: str) -> tuple[Segment, ...]:
    return (Segment(kind, content, match.start, match.end),)


def _split(
    match: ScanMatch,
    parts: re.Pattern[str],
    tail_kind: SegmentKind,
) -> tuple[Segment, ...] | None:
    found = parts.fullmatch(match.raw)
    if found is None:
        return None
    head, tail = found.group(1), found.group(2)
    pivot = match.start + len(head)
    return (
        Segment("plain", head, match.start, pivot),
        Segment(tail_kind, tail, pivot, match.end),
    )


def _strip_delimiters(
    match: ScanMatch, kind: SegmentKind
) -> tuple[Segment, ...] | None:
    content = _BRACES.sub("", match.raw[1:])
    if not content:
        return None
    return _whole(match, kind, content)


_CLASSIFIERS: dict[PatternFamily, Classifier] = {
    PatternFamily.TRADEMARK: lambda m: _whole(m, "super", TRADEMARK_SYMBOL),
    PatternFamily.REGISTERED: lambda m: _whole(m, "super", REGISTERED_SYMBOL),
    # Canonicalized but never raised.
    PatternFamily.COPYRIGHT: lambda m: _whole(m, "plain", COPYRIGHT_SYMBOL),
    PatternFamily.ORDINAL: lambda m: _split(m, _ORDINAL_PARTS, "super"),
    PatternFamily.CHEMICAL_ELEMENT: lambda m: _split(m, _ELEMENT_PARTS, "sub"),
    PatternFamily.CHEMICAL_PAREN: lambda m: _split(m, _PAREN_PARTS, "sub"),
    PatternFamily.MATH_SUPER: lambda m: _strip_delimiters(m, "super"),
    PatternFamily.MATH_SUB: lambda m: _strip_delimiters(m, "sub"),
}


def _classify(match: ScanMatch, trace: Trace | None) -> tuple[Segment, ...]:
    segments = _CLASSIFIERS[match.family](match)
    if segments is None:
        message = (
            f"Could not decompose {match.family.value} match {match.raw!r} "
            f"at {match.start}; kept as plain text"
        )
        logger.debug(message)
        if trace is not None:
            trace.warnings.append(message)
        return _whole(match, "plain", match.raw)
    return segments


def segment(
    text: str,
    *,
    ordinals_enabled: bool = True,
    trace: Trace | None = None,
) -> list[Segment]:
    """Classify ``text`` into an ordered, non-empty list of segments.

    Args:
        text: Plain input text (no markup).
        ordinals_enabled: Whether ``1st``/``2nd``/... are recognized.
        trace: Optional trace receiving a warning for every match that had to
            be kept as plain text.

    Returns:
        Segments in source order. Their contents concatenate back to ``text``
        except that symbol variants are canonicalized (``(TM)`` -> ``™``) and
        math delimiters (``^``, ``_``, braces) are dropped.
    """
    matches = scan(text, ordinals_enabled=ordinals_enabled)
    if not matches:
        return [Segment("plain", text, 0, len(text))]

    segments: list[Segment] = []
    cursor = 0
    for match in matches:
        if match.start > cursor:
            segments.append(
                Segment("plain", text[cursor : match.start], cursor, match.start)
            )
        segments.extend(_classify(match, trace))
        cursor = match.end

    if cursor < len(text):
        segments.append(Segment("plain", text[cursor:], cursor, len(text)))

    logger.debug(
        "Segmented %d chars into %d segments (%d matches)",
        len(text),
        len(segments),
        len(matches),
    )
    return segments


def has_annotations(segments: list[Segment]) -> bool:
    """True when any segment would render as superscript or subscript."""
    return any(seg.is_annotation for seg in segments)

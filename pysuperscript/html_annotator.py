"""Apply segmentation to the text nodes of an HTML document.

Walks the elements matched by the configured include selectors, skips text
that sits under excluded containers (``pre``, ``code``, opt-out attributes,
existing ``<sup>``/``<sub>``...) and replaces every text node that gained at
least one superscript or subscript segment with the rendered node sequence.
Processed containers are marked so a second pass leaves them alone.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, Tag
from soupsieve import SelectorSyntaxError

from .constants import OPT_OUT_ATTR, PROCESSED_ATTR, SKIPPED_TAGS
from .renderers.html import markup_attrs
from .runtime.tracing import trace_timing
from .segmenter import has_annotations, segment
from .types import HtmlAnnotationResult, Segment, Trace

if TYPE_CHECKING:
    from .superscript_config import SuperscriptConfig

logger = logging.getLogger(__name__)

__all__ = ["annotate_html", "reset_processed"]


def _select_ids(
    soup: BeautifulSoup, selectors: tuple[str, ...], trace: Trace | None
) -> tuple[list[Tag], set[int]]:
    """Resolve selectors one at a time so a bad selector only disables itself."""
    found: list[Tag] = []
    seen: set[int] = set()
    for selector in selectors:
        try:
            matches = soup.select(selector)
        except SelectorSyntaxError:
            message = f"Ignoring invalid selector {selector!r}"
            logger.warning(message)
            if trace is not None:
                trace.warnings.append(message)
            continue
        for tag in matches:
            if id(tag) not in seen:
                seen.add(id(tag))
                found.append(tag)
    return found, seen


def _blocks(tag: Tag, excluded: set[int]) -> bool:
    return (
        tag.name in SKIPPED_TAGS
        or tag.has_attr(OPT_OUT_ATTR)
        or id(tag) in excluded
    )


def _under_excluded(tag: Tag, excluded: set[int]) -> bool:
    return _blocks(tag, excluded) or any(
        _blocks(parent, excluded)
        for parent in tag.parents
        if not isinstance(parent, BeautifulSoup)
    )


def _outermost(soup: BeautifulSoup, candidates: list[Tag]) -> list[Tag]:
    candidate_ids = {id(tag) for tag in candidates}
    roots = [
        tag
        for tag in candidates
        if not any(id(parent) in candidate_ids for parent in tag.parents)
    ]
    # Document order, independent of selector order.
    position = {id(tag): pos for pos, tag in enumerate(soup.find_all(True))}
    return sorted(roots, key=lambda tag: position[id(tag)])


def _eligible(node: NavigableString, root: Tag, excluded: set[int]) -> bool:
    # Comments, doctypes, script/style bodies are NavigableString subclasses.
    if type(node) is not NavigableString:
        return False
    parent = node.parent
    while parent is not None:
        if _blocks(parent, excluded):
            return False
        if parent is root:
            return True
        parent = parent.parent
    return True


def _build_nodes(
    soup: BeautifulSoup, segments: list[Segment], cfg: SuperscriptConfig
) -> list[PageElement]:
    nodes: list[PageElement] = []
    for seg in segments:
        if seg.kind == "plain":
            if seg.content:
                nodes.append(NavigableString(seg.content))
            continue
        tag = soup.new_tag(
            "sup" if seg.kind == "super" else "sub",
            attrs=markup_attrs(seg.kind, seg.content, cfg),
        )
        tag.string = seg.content
        nodes.append(tag)
    return nodes


def annotate_html(
    html: str, cfg: SuperscriptConfig, trace: Trace | None = None
) -> HtmlAnnotationResult:
    """Annotate eligible text nodes of ``html``.

    Args:
        html: Document or fragment markup.
        cfg: Selectors, markup classes and ordinal toggle.
        trace: Optional trace collecting timings and warnings.

    Returns:
        The serialized document and the number of text nodes replaced. When
        nothing changed the markup is still re-serialized, so compare
        ``nodes_changed`` rather than strings.
    """
    soup = BeautifulSoup(html, "html.parser")
    with trace_timing(trace, "annotate", "html") as details:
        candidates, _ = _select_ids(soup, cfg.include_selectors, trace)
        _, excluded = _select_ids(soup, cfg.exclude_selectors, trace)

        # Already-processed and excluded containers drop out before nesting is
        # resolved, so unmarked includes inside a processed one still run.
        pending_roots = [
            tag
            for tag in candidates
            if tag.get(PROCESSED_ATTR) != "true"
            and not _under_excluded(tag, excluded)
        ]
        roots = _outermost(soup, pending_roots)

        pending: list[tuple[NavigableString, list[Segment]]] = []
        for root in roots:
            for node in root.find_all(string=True):
                if not _eligible(node, root, excluded):
                    continue
                segments = segment(
                    str(node), ordinals_enabled=cfg.ordinals, trace=trace
                )
                if has_annotations(segments):
                    pending.append((node, segments))

        for start in range(0, len(pending), cfg.batch_size):
            batch = pending[start : start + cfg.batch_size]
            logger.debug(
                "Replacing text nodes %d-%d of %d",
                start,
                start + len(batch),
                len(pending),
            )
            for node, segments in batch:
                node.replace_with(*_build_nodes(soup, segments, cfg))

        for tag in pending_roots:
            tag[PROCESSED_ATTR] = "true"

        details["roots"] = len(roots)
        details["nodes_changed"] = len(pending)

    return HtmlAnnotationResult(html=str(soup), nodes_changed=len(pending))


def reset_processed(html: str) -> str:
    """Drop every processed marker so the document can be annotated again."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.select(f"[{PROCESSED_ATTR}]"):
        del tag[PROCESSED_ATTR]
    return str(soup)

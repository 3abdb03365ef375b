from __future__ import annotations

import html
from typing import TYPE_CHECKING

from ..types import Segment

if TYPE_CHECKING:
    from ..superscript_config import SuperscriptConfig

_LABELS = {"super": "superscript", "sub": "subscript"}
_TAGS = {"super": "sup", "sub": "sub"}


def markup_attrs(kind: str, content: str, cfg: SuperscriptConfig) -> dict[str, str]:
    """Attributes for the ``<sup>``/``<sub>`` element wrapping ``content``."""
    attrs = {"class": cfg.super_class if kind == "super" else cfg.sub_class}
    if cfg.aria_labels:
        attrs["aria-label"] = f"{_LABELS[kind]} {content}"
    return attrs


class HtmlRenderer:
    """Render segments as an inline HTML fragment.

    Plain segments are escaped text; super/sub segments become
    ``<sup class="auto-super" aria-label="superscript st">st</sup>`` and the
    ``<sub>`` equivalent.
    """

    def render(self, segments: list[Segment], cfg: SuperscriptConfig) -> str:
        parts: list[str] = []
        for seg in segments:
            if seg.kind == "plain":
                parts.append(html.escape(seg.content, quote=False))
                continue
            tag = _TAGS[seg.kind]
            attrs = "".join(
                f' {name}="{html.escape(value)}"'
                for name, value in markup_attrs(seg.kind, seg.content, cfg).items()
            )
            content = html.escape(seg.content, quote=False)
            parts.append(f"<{tag}{attrs}>{content}</{tag}>")
        return "".join(parts)

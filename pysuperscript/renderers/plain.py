from __future__ import annotations

from typing import TYPE_CHECKING

from ..types import Segment

if TYPE_CHECKING:
    from ..superscript_config import SuperscriptConfig


class PlainTextRenderer:
    """Flatten segments to text, dropping the super/sub distinction."""

    def render(self, segments: list[Segment], cfg: SuperscriptConfig) -> str:
        _ = cfg
        return "".join(seg.content for seg in segments)

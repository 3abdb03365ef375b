from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..types import Segment

if TYPE_CHECKING:
    from ..superscript_config import SuperscriptConfig


class Renderer(Protocol):
    def render(self, segments: list[Segment], cfg: SuperscriptConfig) -> str:
        """Turn a segment sequence into output text, preserving order."""
        ...

from __future__ import annotations

from .base import Renderer
from .html import HtmlRenderer
from .plain import PlainTextRenderer

__all__ = ["HtmlRenderer", "PlainTextRenderer", "Renderer", "renderer_for"]


def renderer_for(name: str) -> Renderer:
    if name == "html":
        return HtmlRenderer()
    if name == "plain":
        return PlainTextRenderer()
    raise ValueError(f"Unknown renderer: {name!r}")

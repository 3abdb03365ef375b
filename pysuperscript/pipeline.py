from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .html_annotator import annotate_html
from .renderers import Renderer, renderer_for
from .runtime.tracing import trace_timing
from .segmenter import has_annotations, segment
from .superscript_config import SuperscriptConfig
from .types import AnnotationResult, HtmlAnnotationResult, Trace

logger = logging.getLogger(__name__)


class SuperscriptPipeline:
    def __init__(
        self,
        config: SuperscriptConfig | None = None,
        *,
        renderer: Renderer | None = None,
    ) -> None:
        self.config = config or SuperscriptConfig()
        self._renderer = renderer

    def __enter__(self) -> SuperscriptPipeline:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        # No resources are held between runs.
        return None

    def _resolve(self, overrides: dict[str, Any]) -> SuperscriptConfig:
        if overrides:
            return replace(self.config, **overrides)
        return self.config

    def renderer(self, cfg: SuperscriptConfig | None = None) -> Renderer:
        if self._renderer is not None:
            return self._renderer
        return renderer_for((cfg or self.config).renderer)

    def run(self, text: str, **overrides: Any) -> AnnotationResult:
        cfg = self._resolve(overrides)
        trace = Trace()

        with trace_timing(trace, "scan", "segment"):
            logger.debug("Segmenting %d chars", len(text))
            segments = segment(text, ordinals_enabled=cfg.ordinals, trace=trace)
        trace.segments = segments

        with trace_timing(trace, "render", cfg.renderer):
            output = self.renderer(cfg).render(segments, cfg)

        return AnnotationResult(
            text=text,
            output=output,
            segments=segments,
            changed=has_annotations(segments),
            trace=trace if cfg.return_trace else None,
        )

    def annotate_html(self, html: str, **overrides: Any) -> HtmlAnnotationResult:
        cfg = self._resolve(overrides)
        trace = Trace()
        result = annotate_html(html, cfg, trace)
        logger.debug("Annotated %d text nodes", result.nodes_changed)
        if cfg.return_trace:
            result.trace = trace
        return result

    def __call__(self, text: str, **overrides: Any) -> AnnotationResult:
        return self.run(text, **overrides)

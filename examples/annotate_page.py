#!/usr/bin/env python3
"""
Annotate a small HTML page and a few plain strings.

Shows the segment sequence the engine produces, the rendered markup, and the
trace collected while annotating a document.

Usage:
    python examples/annotate_page.py
"""

from pysuperscript import SuperscriptConfig, SuperscriptPipeline

PAGE = """
<main>
  <h1>Acme(TM) Chemistry</h1>
  <p>Our 3rd lab report covers Ca(OH)2 and H2SO4.</p>
  <p>Energy: E = mc^2, index x_{i+1}.</p>
  <pre>H2O stays untouched here</pre>
  <p class="no-superscript">So does the 1st line here.</p>
  <footer>Copyright (C) 2024 Acme(R)</footer>
</main>
"""


def main() -> None:
    cfg = SuperscriptConfig(return_trace=True)
    with SuperscriptPipeline(cfg) as pipeline:
        for text in ("Finished 3rd overall", "Water is H2O today.", "E = mc^2"):
            result = pipeline.run(text)
            print(f"{text!r}")
            for seg in result.segments:
                print(f"  {seg.kind:<5} {seg.content!r}")
            print(f"  -> {result.output}")

        page = pipeline.annotate_html(PAGE)
        print(page.html)
        print(f"Replaced {page.nodes_changed} text nodes")

        trace = page.trace
        if trace is not None:
            for event in trace.events:
                print(f"- {event.stage}:{event.name} {event.ms:.2f}ms {event.details}")
            for warning in trace.warnings:
                print(f"- warning: {warning}")


if __name__ == "__main__":
    main()

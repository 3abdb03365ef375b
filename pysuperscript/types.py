from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from .patterns import PatternFamily

SegmentKind = Literal["plain", "super", "sub"]


@dataclass(frozen=True)
class Segment:
    """One classified run of output text.

    ``source_start``/``source_end`` are offsets into the *original* input the
    segment was produced from. They are excluded from equality so results can
    be compared by kind and content alone.
    """

    kind: SegmentKind
    content: str
    source_start: int = field(default=0, compare=False, repr=False)
    source_end: int = field(default=0, compare=False, repr=False)

    @property
    def is_annotation(self) -> bool:
        return self.kind != "plain"


@dataclass(frozen=True)
class ScanMatch:
    """A single hit of the combined pattern (character offsets into the input)."""

    start: int
    end: int
    family: PatternFamily
    raw: str


@dataclass(frozen=True)
class TraceEvent:
    stage: Literal["scan", "render", "annotate"]
    name: str
    ms: float
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Trace:
    """Structured debugging output."""

    events: list[TraceEvent] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    # Optional snapshots
    segments: list[Segment] | None = None


@dataclass
class AnnotationResult:
    text: str
    output: str
    segments: list[Segment] = field(default_factory=list)
    changed: bool = False
    trace: Trace | None = None


@dataclass
class HtmlAnnotationResult:
    html: str
    nodes_changed: int = 0
    trace: Trace | None = None

    @property
    def changed(self) -> bool:
        return self.nodes_changed > 0

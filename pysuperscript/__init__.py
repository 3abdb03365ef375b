"""pysuperscript - superscript/subscript annotation for running text."""

from .pipeline import SuperscriptPipeline
from .segmenter import has_annotations, scan, segment
from .superscript_config import SuperscriptConfig
from .types import Segment

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "Segment",
    "SuperscriptConfig",
    "SuperscriptPipeline",
    "has_annotations",
    "scan",
    "segment",
]

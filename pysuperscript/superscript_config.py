from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_EXCLUDE_SELECTORS,
    DEFAULT_INCLUDE_SELECTORS,
    DEFAULT_SUB_CLASS,
    DEFAULT_SUPER_CLASS,
)


@dataclass(frozen=True)
class SuperscriptConfig:
    """User-facing configuration for segmentation, rendering and annotation.

    Keep this frozen+hashable so it can be used as part of cache keys.
    """

    ordinals: bool = True

    # Stage selection
    renderer: Literal["html", "plain"] = "html"

    # Markup
    super_class: str = DEFAULT_SUPER_CLASS
    sub_class: str = DEFAULT_SUB_CLASS
    aria_labels: bool = True

    # HTML annotation
    include_selectors: tuple[str, ...] = DEFAULT_INCLUDE_SELECTORS
    exclude_selectors: tuple[str, ...] = DEFAULT_EXCLUDE_SELECTORS
    batch_size: int = DEFAULT_BATCH_SIZE

    # Behavior toggles
    return_trace: bool = False

    def __post_init__(self) -> None:
        if self.renderer not in ("html", "plain"):
            raise ValueError(
                f"renderer must be 'html' or 'plain', got {self.renderer!r}"
            )
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")
        # Lists would make the config unhashable.
        if not isinstance(self.include_selectors, tuple):
            object.__setattr__(
                self, "include_selectors", tuple(self.include_selectors)
            )
        if not isinstance(self.exclude_selectors, tuple):
            object.__setattr__(
                self, "exclude_selectors", tuple(self.exclude_selectors)
            )

"""Constants for pysuperscript - default configuration and program metadata."""

# Program metadata
PROGRAM_NAME = "pysuperscript"

# Canonical glyphs emitted for the symbol families
TRADEMARK_SYMBOL = "™"
REGISTERED_SYMBOL = "®"
COPYRIGHT_SYMBOL = "©"

# Containers whose text is eligible for annotation
DEFAULT_INCLUDE_SELECTORS = (
    "main",
    "article",
    ".content",
    '[role="main"]',
    ".prose",
    ".blog-post",
    ".blog-content",
    "section",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "header",
)

# Containers that are never annotated
DEFAULT_EXCLUDE_SELECTORS = (
    "pre",
    "code",
    "script",
    "style",
    ".no-superscript",
    "[data-no-superscript]",
)

# Text under these tags is never handed to the segmenter
SKIPPED_TAGS = frozenset(("sup", "sub", "script", "style", "code", "pre"))

# Markup attributes
PROCESSED_ATTR = "data-superscript-processed"
OPT_OUT_ATTR = "data-no-superscript"
DEFAULT_SUPER_CLASS = "auto-super"
DEFAULT_SUB_CLASS = "auto-sub"

# Text nodes replaced per batch during HTML annotation
DEFAULT_BATCH_SIZE = 50

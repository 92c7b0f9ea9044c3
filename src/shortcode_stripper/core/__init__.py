"""Core stripping logic for Shortcode Stripper."""

from shortcode_stripper.core.models import Document, DocumentOutcome, BatchResult
from shortcode_stripper.core.stripper import (
    DEFAULT_MARKERS,
    ShortcodeStripper,
    strip,
)

__all__ = [
    "Document",
    "DocumentOutcome",
    "BatchResult",
    "DEFAULT_MARKERS",
    "ShortcodeStripper",
    "strip",
]

"""Shortcode Stripper - remove page-builder shortcodes, keep their content."""

__version__ = "1.0.0"

from shortcode_stripper.core.stripper import DEFAULT_MARKERS, ShortcodeStripper, strip

__all__ = ["__version__", "DEFAULT_MARKERS", "ShortcodeStripper", "strip"]

"""Regex-based removal of page-builder shortcodes."""

import re
from typing import Iterable, Optional

# Visual Composer, Fusion Builder and Fusion (fsn) layout shortcodes
DEFAULT_MARKERS: tuple[str, ...] = (
    "vc_row",
    "vc_column",
    "vc_button",
    "fusion_builder_container",
    "fusion_builder_row",
    "fusion_builder_column",
    "fusion_text",
    "fsn_row",
    "fsn_column",
    "fsn_text",
)

# Characters that would make a name unusable inside "[name ...]"
INVALID_NAME_PATTERN = re.compile(r"[\[\]/\s]")

# Name boundary: "vc_row" must not match "vc_row_extended" or "vc_row-inner"
NAME_BOUNDARY = r"(?![\w-])"


def validate_marker(name: str) -> str:
    """Validate a marker name and return it unchanged."""
    if not isinstance(name, str) or not name:
        raise ValueError(f"Marker name must be a non-empty string: {name!r}")
    if INVALID_NAME_PATTERN.search(name):
        raise ValueError(
            f"Marker name may not contain brackets, slashes or whitespace: {name!r}"
        )
    return name


class ShortcodeStripper:
    """Strip a fixed, ordered set of shortcodes from text.

    For every marker name, in order:
    1. Paired tags ``[name ...]inner[/name]`` are replaced with ``inner``.
       The match is non-greedy and repeated until no pair is left.
    2. Remaining opening tags ``[name ...]`` are deleted.

    Closing tags without an opening tag are left alone. Attributes of the
    opening tag are discarded without being inspected.
    """

    def __init__(self, markers: Optional[Iterable[str]] = None) -> None:
        """Initialize the stripper.

        Args:
            markers: Ordered marker names (default: DEFAULT_MARKERS)

        Raises:
            ValueError: If a marker name is empty or malformed
        """
        names = DEFAULT_MARKERS if markers is None else markers
        self.markers: tuple[str, ...] = tuple(validate_marker(n) for n in names)
        self._patterns = [self._compile(name) for name in self.markers]

    @staticmethod
    def _compile(name: str) -> tuple[re.Pattern, re.Pattern]:
        """Build the (paired, standalone) patterns for one marker name."""
        escaped = re.escape(name)
        opening = rf"\[{escaped}{NAME_BOUNDARY}[^\]]*\]"
        paired = re.compile(rf"{opening}(.*?)\[/{escaped}\]", re.DOTALL)
        standalone = re.compile(opening)
        return paired, standalone

    def strip(self, text: str) -> str:
        """Remove every configured shortcode from text, keeping inner content.

        Args:
            text: Document body (may be empty or contain no shortcodes)

        Returns:
            Text with the configured shortcodes removed
        """
        if not text:
            return text

        # Stripping a later name can splice together an earlier one,
        # e.g. "[vc_[vc_column]row]"; repeat until nothing changes.
        while True:
            result = self._strip_once(text)
            if result == text:
                return result
            text = result

    def _strip_once(self, text: str) -> str:
        """Apply the paired and standalone passes for each name once."""
        for paired, standalone in self._patterns:
            while True:
                text, count = paired.subn(r"\1", text)
                if count == 0:
                    break
            text = standalone.sub("", text)
        return text

    def contains_markers(self, text: str) -> bool:
        """Check if text holds an opening tag of any configured marker."""
        return any(standalone.search(text) for _, standalone in self._patterns)

    def __repr__(self) -> str:
        return f"ShortcodeStripper(markers={list(self.markers)!r})"


def strip(text: str, markers: Optional[Iterable[str]] = None) -> str:
    """Remove shortcodes from text, preserving content between paired tags.

    Convenience wrapper around ShortcodeStripper for one-off calls.
    """
    return ShortcodeStripper(markers).strip(text)

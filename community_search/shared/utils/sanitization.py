"""Input sanitization utilities: HTML stripping for excerpts and snippets."""

import html
from typing import ClassVar

import nh3


class InputSanitizer:
    """
    Strip markup from stored content before it is shown as plain text.

    Content bodies are authored as HTML; excerpts and highlight fragments
    are plain text with only the highlight marker added afterwards.
    """

    ALLOWED_TAGS: ClassVar[set[str]] = set()

    @classmethod
    def strip_html(cls, value: str | None) -> str:
        """Remove all HTML tags (and script/style bodies), keeping the text.

        nh3 escapes the text it keeps; entities are unescaped so the result is
        plain text whose length matches what a reader sees.

        Args:
            value: Raw string that may contain HTML.

        Returns:
            Plain text, stripped of surrounding whitespace.
        """
        if not value:
            return ""
        cleaned = nh3.clean(value, tags=cls.ALLOWED_TAGS, attributes={})
        return html.unescape(cleaned).strip()


def strip_html(value: str | None) -> str:
    """Return value with HTML removed (see InputSanitizer.strip_html)."""
    return InputSanitizer.strip_html(value)

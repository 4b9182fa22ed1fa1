"""Inline rewriting: emphasis, strikethrough, images and links."""

from __future__ import annotations

from .constants import (
    BOLD_ITALIC_PATTERN,
    BOLD_PATTERN,
    IMAGE_PATTERN,
    ITALIC_PATTERN,
    LINK_PATTERN,
    STRIKETHROUGH_PATTERN,
)


def convert_emphasis(text: str) -> str:
    """Apply ``***``, ``**`` and ``*`` emphasis, most specific first.

    Spans never cross a line break, and a marker followed by whitespace does
    not open a span, so ``* item`` list markers are left alone.

    Examples:
        convert_emphasis("***both***")  # "<strong><em>both</em></strong>"
        convert_emphasis("**bold** and *italic*")
    """
    text = BOLD_ITALIC_PATTERN.sub(r"<strong><em>\1</em></strong>", text)
    text = BOLD_PATTERN.sub(r"<strong>\1</strong>", text)
    return ITALIC_PATTERN.sub(r"<em>\1</em>", text)


def convert_strikethrough(text: str) -> str:
    return STRIKETHROUGH_PATTERN.sub(r"<del>\1</del>", text)


def convert_images(text: str) -> str:
    return IMAGE_PATTERN.sub(r'<img src="\2" alt="\1">', text)


def convert_links(text: str) -> str:
    """Render ``[label](url)`` as an anchor opening in a new tab.

    A ``[`` preceded by ``!`` is image syntax and is never taken as a link.
    """
    return LINK_PATTERN.sub(
        r'<a href="\2" target="_blank" rel="noopener noreferrer">\1</a>', text
    )


def convert_links_and_images(text: str) -> str:
    return convert_links(convert_images(text))

"""HTML escaping for code regions."""

from __future__ import annotations

# Ampersand first so the entities added afterwards are not escaped again.
_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: str) -> str:
    """Escape HTML special characters in literal code text.

    Args:
        text: Raw code content.

    Returns:
        str: Text safe to place between HTML tags.

    Examples:
        escape_html("<b>")  # "&lt;b&gt;"
        escape_html("a & 'b'")  # "a &amp; &#039;b&#039;"
    """
    for character, entity in _REPLACEMENTS:
        text = text.replace(character, entity)
    return text

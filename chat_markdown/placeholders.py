"""Protected-content registry.

Fenced code, inline code and tables are rendered as soon as they are found and
replaced in the working text by placeholder tokens, so that none of the later
rewriting stages can touch them. The tokens are swapped back as the very last
step of the pipeline.
"""

from __future__ import annotations

import logging

from .constants import (
    FENCE,
    FENCE_PATTERN,
    INLINE_CODE,
    INLINE_CODE_PATTERN,
    PLACEHOLDER_CATEGORIES,
    SENTINEL_FIRST,
    SENTINEL_LAST,
    TABLE,
    TABLE_PATTERN,
)
from .escaping import escape_html
from .models import ProtectedFragment
from .tables import render_table

logger = logging.getLogger(__name__)


def choose_sentinel(text: str) -> str:
    """Pick a Private Use Area character that does not occur in `text`.

    Args:
        text: Input the placeholder tokens must not collide with.

    Returns:
        str: A single sentinel character.

    Examples:
        choose_sentinel("plain text")  # "\\ue000"
        choose_sentinel("\\ue000")  # "\\ue001"
    """
    for codepoint in range(SENTINEL_FIRST, SENTINEL_LAST + 1):
        candidate = chr(codepoint)
        if candidate not in text:
            return candidate
    # Every private-use character present; fall back to the plane 15 area.
    codepoint = 0xF0000
    while chr(codepoint) in text:
        codepoint += 1
    return chr(codepoint)


class ProtectedRegistry:
    """Ordered store of protected fragments, one list per category.

    A registry belongs to a single conversion call.

    Args:
        sentinel: Character framing every token; must not occur in the input.
    """

    def __init__(self, sentinel: str):
        self.sentinel = sentinel
        self.fragments: dict[str, list[ProtectedFragment]] = {
            category: [] for category in PLACEHOLDER_CATEGORIES
        }

    @classmethod
    def for_text(cls, text: str) -> ProtectedRegistry:
        return cls(choose_sentinel(text))

    def register(self, category: str, html: str) -> str:
        """Store `html` and return the token that stands in for it."""
        entries = self.fragments[category]
        token = f"{self.sentinel}{category}{len(entries)}{self.sentinel}"
        entries.append(ProtectedFragment(token=token, html=html))
        return token

    def block_tokens(self) -> set[str]:
        """Tokens whose fragments render as block elements (fences and tables)."""
        return {entry.token for entry in self.fragments[FENCE] + self.fragments[TABLE]}

    def restore_into(self, text: str) -> str:
        """Substitute any pending tokens found in `text`, in category order.

        Tokens that are not present are left pending, so fragments nested in
        other fragments can be resolved before the enclosing one is stored.
        """
        for category in PLACEHOLDER_CATEGORIES:
            for entry in self.fragments[category]:
                if entry.restored or entry.token not in text:
                    continue
                text = text.replace(entry.token, entry.html, 1)
                entry.restored = True
        return text

    def restore(self, text: str) -> str:
        """Reinsert every fragment and report the ones whose token was missing."""
        text = self.restore_into(text)
        for entry in self.pending():
            logger.debug("Placeholder %r not found; skipping", entry.token)
        return text

    def pending(self) -> list[ProtectedFragment]:
        """Fragments whose token has not been substituted yet."""
        return [
            entry
            for category in PLACEHOLDER_CATEGORIES
            for entry in self.fragments[category]
            if not entry.restored
        ]


def shield_fences(text: str, registry: ProtectedRegistry) -> str:
    """Replace fenced code blocks with placeholders.

    Examples:
        shield_fences("```x < y```", registry)  # token for "<pre><code>x &lt; y</code></pre>"
    """
    return FENCE_PATTERN.sub(
        lambda match: registry.register(
            FENCE, f"<pre><code>{escape_html(match.group(1))}</code></pre>"
        ),
        text,
    )


def shield_inline_code(text: str, registry: ProtectedRegistry) -> str:
    """Replace single-backtick code spans with placeholders."""
    return INLINE_CODE_PATTERN.sub(
        lambda match: registry.register(
            INLINE_CODE, f"<code>{escape_html(match.group(1))}</code>"
        ),
        text,
    )


def shield_tables(text: str, registry: ProtectedRegistry) -> str:
    """Render pipe tables and replace them with placeholders.

    The newline closing the last table row stays in the text so the next line
    still starts at the beginning of a line.
    """

    def _replace(match) -> str:
        block = match.group(0)
        html = registry.restore_into(render_table(block))
        token = registry.register(TABLE, html)
        return token + "\n" if block.endswith("\n") else token

    return TABLE_PATTERN.sub(_replace, text)

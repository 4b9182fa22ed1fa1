"""Block-level rewriting: headings, lists, horizontal rules and blockquotes."""

from __future__ import annotations

import re

from .constants import (
    BLOCKQUOTE_MARKER_PATTERN,
    BLOCKQUOTE_PATTERN,
    HEADING_PATTERNS,
    HORIZONTAL_RULE_PATTERN,
    ORDERED_LIST_PATTERN,
    ORDERED_MARKER_PATTERN,
    UNORDERED_LIST_PATTERN,
    UNORDERED_MARKER_PATTERN,
)


def convert_headings(text: str) -> str:
    """Turn ``#``, ``##`` and ``###`` lines into ``<h1>``-``<h3>`` elements.

    Deeper headings are checked first so ``## x`` never becomes ``<h1># x</h1>``.
    Lines with four or more hashes stay literal.

    Examples:
        convert_headings("## Setup")  # "<h2>Setup</h2>"
    """
    for level, pattern in HEADING_PATTERNS:
        text = pattern.sub(rf"<h{level}>\1</h{level}>", text)
    return text


def split_list_items(block: str, marker_pattern: re.Pattern[str]) -> list[str]:
    """Split a run of list lines at its markers.

    Args:
        block: Contiguous list lines.
        marker_pattern: Pattern matching the marker at the start of each line.

    Returns:
        list[str]: Trimmed text of each non-empty item, in order.

    Examples:
        split_list_items("- a\\n- b\\n", UNORDERED_MARKER_PATTERN)  # ["a", "b"]
    """
    return [item.strip() for item in marker_pattern.split(block) if item]


def _list_replacer(tag: str, marker_pattern: re.Pattern[str]):
    def _replace(match: re.Match[str]) -> str:
        block = match.group(0)
        items = "".join(f"<li>{item}</li>" for item in split_list_items(block, marker_pattern))
        # Keep the line break so a following line-anchored construct still matches.
        trailer = "\n" if block.endswith("\n") else ""
        return f"<{tag}>{items}</{tag}>{trailer}"

    return _replace


def convert_lists(text: str) -> str:
    """Render runs of ordered and unordered list lines as ``<ol>``/``<ul>``.

    Ordered runs are handled first; a change of marker style ends the list.

    Examples:
        convert_lists("1. a\\n2. b")  # "<ol><li>a</li><li>b</li></ol>"
        convert_lists("- a\\n* b")  # "<ul><li>a</li><li>b</li></ul>"
    """
    text = ORDERED_LIST_PATTERN.sub(_list_replacer("ol", ORDERED_MARKER_PATTERN), text)
    return UNORDERED_LIST_PATTERN.sub(_list_replacer("ul", UNORDERED_MARKER_PATTERN), text)


def convert_horizontal_rules(text: str) -> str:
    return HORIZONTAL_RULE_PATTERN.sub("<hr>", text)


def convert_blockquotes(text: str) -> str:
    """Merge runs of ``>`` lines into single ``<blockquote>`` elements.

    Examples:
        convert_blockquotes("> one\\n>two")  # "<blockquote>one\\ntwo</blockquote>"
    """

    def _replace(match: re.Match[str]) -> str:
        content = BLOCKQUOTE_MARKER_PATTERN.sub("", match.group(0)).strip()
        return f"<blockquote>{content}</blockquote>"

    return BLOCKQUOTE_PATTERN.sub(_replace, text)

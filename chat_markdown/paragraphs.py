"""Paragraph assembly around rendered block elements."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .constants import (
    BLOCK_TAG_PATTERN,
    CLOSING_BLOCK_TAG_PATTERN,
    OPENING_BLOCK_TAG_PATTERN,
    PARAGRAPH_BREAK_PATTERN,
    VOID_BLOCK_TAG_PATTERN,
)
from .models import Segment, SegmentKind


def segment_text(text: str, block_tokens: Iterable[str] = ()) -> list[Segment]:
    """Split text into block-element and loose-text segments.

    Block tags toggle an "inside block" flag: text after an opening tag is
    block content until the next closing tag. Void tags such as ``<hr>`` are
    block segments that do not change the flag. Loose text is further split
    around `block_tokens`, placeholders for fences and tables, which are
    classified as block elements themselves.

    Args:
        text: Working text with block HTML already rendered.
        block_tokens: Placeholder tokens that stand for block-level content.

    Returns:
        list[Segment]: Segments in document order; empty text is dropped.

    Examples:
        segment_text("<h1>T</h1>body")
        # [BLOCK "<h1>", BLOCK "T", BLOCK "</h1>", LOOSE "body"]
    """
    tokens = sorted(block_tokens, key=len, reverse=True)
    token_pattern = re.compile(f"({'|'.join(map(re.escape, tokens))})") if tokens else None

    segments: list[Segment] = []
    in_block = False

    for part in BLOCK_TAG_PATTERN.split(text):
        if not part:
            continue
        if VOID_BLOCK_TAG_PATTERN.fullmatch(part):
            segments.append(Segment(SegmentKind.BLOCK_ELEMENT, part))
        elif OPENING_BLOCK_TAG_PATTERN.fullmatch(part):
            in_block = True
            segments.append(Segment(SegmentKind.BLOCK_ELEMENT, part))
        elif CLOSING_BLOCK_TAG_PATTERN.fullmatch(part):
            in_block = False
            segments.append(Segment(SegmentKind.BLOCK_ELEMENT, part))
        elif in_block:
            segments.append(Segment(SegmentKind.BLOCK_ELEMENT, part))
        elif token_pattern is None:
            segments.append(Segment(SegmentKind.LOOSE_TEXT, part))
        else:
            for piece in token_pattern.split(part):
                if not piece:
                    continue
                kind = SegmentKind.BLOCK_ELEMENT if piece in tokens else SegmentKind.LOOSE_TEXT
                segments.append(Segment(kind, piece))

    return segments


def wrap_paragraphs(text: str) -> str:
    """Wrap each blank-line separated chunk of loose text in ``<p>``.

    Examples:
        wrap_paragraphs("one\\n\\ntwo")  # "<p>one</p><p>two</p>"
        wrap_paragraphs("  \\n ")  # ""
    """
    return "".join(
        f"<p>{chunk.strip()}</p>"
        for chunk in PARAGRAPH_BREAK_PATTERN.split(text)
        if chunk.strip()
    )


def assemble_paragraphs(text: str, block_tokens: Iterable[str] = ()) -> str:
    """Wrap loose text in paragraphs while passing block elements through."""
    return "".join(
        wrap_paragraphs(segment.text) if segment.kind is SegmentKind.LOOSE_TEXT else segment.text
        for segment in segment_text(text, block_tokens)
    )

"""Constants used across the chat-markdown package."""

from __future__ import annotations

import re

# Limits and file handling
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_LINE_LENGTH = 100_000
DEFAULT_OUTPUT_SUFFIX = ".html"
MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd", ".txt")

# Placeholder categories, restored in this order
FENCE = "FENCE"
INLINE_CODE = "CODE"
TABLE = "TABLE"
PLACEHOLDER_CATEGORIES = (FENCE, INLINE_CODE, TABLE)

# Sentinels are drawn from the Private Use Area so they never show up in normal text.
SENTINEL_FIRST = 0xE000
SENTINEL_LAST = 0xF8FF

# Protected content
FENCE_PATTERN = re.compile(r"```([^`]*?)```", re.DOTALL)
INLINE_CODE_PATTERN = re.compile(r"`([^`\n]*)`")
TABLE_PATTERN = re.compile(
    r"^\|.+\|[ \t]*\n"
    r"\|[-:| \t]+\|[ \t]*\n"
    r"(?:\|.+\|[ \t]*(?:\n|\Z))+",
    re.MULTILINE,
)

# Block constructs
HEADING_PATTERNS = (
    (3, re.compile(r"^### (.*)$", re.MULTILINE)),
    (2, re.compile(r"^## (.*)$", re.MULTILINE)),
    (1, re.compile(r"^# (.*)$", re.MULTILINE)),
)
ORDERED_LIST_PATTERN = re.compile(r"^(?:\d+\. .+(?:\n|\Z))+", re.MULTILINE)
ORDERED_MARKER_PATTERN = re.compile(r"^\d+\. ", re.MULTILINE)
UNORDERED_LIST_PATTERN = re.compile(r"^(?:[*-] .+(?:\n|\Z))+", re.MULTILINE)
UNORDERED_MARKER_PATTERN = re.compile(r"^[*-] ", re.MULTILINE)
HORIZONTAL_RULE_PATTERN = re.compile(r"^-{3,}$", re.MULTILINE)
BLOCKQUOTE_PATTERN = re.compile(r"^>.*(?:\n>.*)*", re.MULTILINE)
BLOCKQUOTE_MARKER_PATTERN = re.compile(r"^>[ \t]*", re.MULTILINE)

# Inline constructs
BOLD_ITALIC_PATTERN = re.compile(r"\*\*\*(?=\S)(.+?)\*\*\*")
BOLD_PATTERN = re.compile(r"\*\*(?=\S)(.+?)\*\*")
ITALIC_PATTERN = re.compile(r"\*(?=\S)(.+?)\*")
STRIKETHROUGH_PATTERN = re.compile(r"~~(.*?)~~")
IMAGE_PATTERN = re.compile(r"!\[([^\[\]\n]*)\]\(([^()\[\]\n]+)\)")
LINK_PATTERN = re.compile(r"(?<!!)\[([^\[\]\n]+)\]\(([^()\[\]\n]+)\)")

# Paragraph assembly
BLOCK_TAGS = (
    "h[1-6]",
    "ul",
    "ol",
    "li",
    "blockquote",
    "div",
    "pre",
    "table",
    "thead",
    "tbody",
    "tr",
    "td",
    "th",
)
_BLOCK_TAG_NAMES = "|".join(BLOCK_TAGS)
BLOCK_TAG_PATTERN = re.compile(rf"(</?(?:{_BLOCK_TAG_NAMES})\b[^>]*>|<hr\b[^>]*>)")
OPENING_BLOCK_TAG_PATTERN = re.compile(rf"<(?:{_BLOCK_TAG_NAMES})\b[^>]*>")
CLOSING_BLOCK_TAG_PATTERN = re.compile(rf"</(?:{_BLOCK_TAG_NAMES})\b[^>]*>")
VOID_BLOCK_TAG_PATTERN = re.compile(r"<hr\b[^>]*>")
PARAGRAPH_BREAK_PATTERN = re.compile(r"\n{2,}")

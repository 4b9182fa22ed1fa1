"""Markdown to HTML conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from .blocks import convert_blockquotes, convert_headings, convert_horizontal_rules, convert_lists
from .config import ConfigError, ConvertConfig, validate_config
from .exceptions import ConvertFileError, InputError, InputTooLargeError, LineTooLongError
from .filesystem import read_markdown
from .inline import convert_emphasis, convert_links_and_images, convert_strikethrough
from .paragraphs import assemble_paragraphs
from .placeholders import ProtectedRegistry, shield_fences, shield_inline_code, shield_tables

logger = logging.getLogger(__name__)


def looks_like_html(text: str) -> bool:
    """Heuristic check for content that has already been rendered.

    True when the trimmed text starts with ``<`` and a closing tag sequence
    appears anywhere. Unbalanced markup that happens to start with ``<`` is
    also reported as HTML.

    Examples:
        looks_like_html("<div>hi</div>")  # True
        looks_like_html("<3 you")  # False
    """
    return text.strip().startswith("<") and "</" in text


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def parse(text: str | None) -> str:
    """Convert Markdown text to an HTML fragment.

    The stages run in a fixed order. Code and tables are shielded behind
    placeholders first, block and inline constructs are rewritten, loose text
    is wrapped in paragraphs, and the shielded fragments are restored last.
    Malformed syntax never raises; it is left as literal text.

    Args:
        text: Markdown source. ``None`` and ``""`` give ``""``.

    Returns:
        str: HTML without any ``<html>`` or ``<body>`` wrapper. Input that
            already looks like HTML is returned unchanged.

    Examples:
        parse("# Title")  # "<h1>Title</h1>"
        parse("**bold** move")  # "<p><strong>bold</strong> move</p>"
        parse("`<b>`")  # "<p><code>&lt;b&gt;</code></p>"
    """
    if not text:
        return ""

    if looks_like_html(text):
        logger.debug("Input already looks like HTML; returning it unchanged")
        return text

    html = normalize_newlines(text)
    registry = ProtectedRegistry.for_text(html)

    html = shield_fences(html, registry)
    html = shield_inline_code(html, registry)
    html = shield_tables(html, registry)

    html = convert_headings(html)
    html = convert_emphasis(html)
    html = convert_strikethrough(html)
    html = convert_lists(html)
    html = convert_links_and_images(html)
    html = convert_horizontal_rules(html)
    html = convert_blockquotes(html)

    html = assemble_paragraphs(html, registry.block_tokens())

    return registry.restore(html)


class MarkdownConverter:
    """Namespace-style entry point; ``MarkdownConverter.parse`` is `parse`."""

    parse = staticmethod(parse)


def check_line_lengths(content: str, max_line_length: int) -> None:
    """Refuse content with a line longer than `max_line_length` characters.

    Raises:
        LineTooLongError: With the one-based number of the first offending line.
    """
    for line_number, line in enumerate(content.splitlines(), start=1):
        if len(line) > max_line_length:
            raise LineTooLongError(line_number, max_line_length)


def check_size(content: str, max_size: int) -> None:
    size = len(content.encode("utf-8"))
    if size > max_size:
        raise InputTooLargeError(size, max_size)


def convert_text(content: str, config: ConvertConfig | None = None) -> str:
    """Apply the configured input limits, then `parse` the content.

    Raises:
        ConfigError: If the configuration fails validation.
        InputTooLargeError: If the UTF-8 encoded content exceeds `max_file_size`.
        LineTooLongError: If a line exceeds `max_line_length`.
    """
    config = config or ConvertConfig()
    validate_config(config)
    check_size(content, config.max_file_size)
    check_line_lengths(content, config.max_line_length)
    return parse(content)


def convert_file(filepath: Path, config: ConvertConfig | None = None) -> str:
    """Read a Markdown file and convert it to HTML.

    Args:
        filepath: Path to the UTF-8 Markdown file.
        config: Limits applied before conversion; defaults to a new
            `ConvertConfig` when omitted.

    Returns:
        str: The rendered HTML fragment.

    Raises:
        ConvertFileError: If the configuration is invalid, the file cannot be
            read or decoded, or the content exceeds the configured limits.

    Examples:
        html = convert_file(Path("notes.md"), ConvertConfig(max_line_length=500))
    """
    config = config or ConvertConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise ConvertFileError(str(error)) from error

    try:
        content = read_markdown(filepath)
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise ConvertFileError(error_message) from error
    except IOError as error:
        raise ConvertFileError(str(error)) from error

    try:
        return convert_text(content, config)
    except LineTooLongError as error:
        error_message = (
            f"{filepath} contains a line at line {error.line_number} "
            f"exceeding the maximum allowed length of {error.max_line_length} characters."
        )
        raise ConvertFileError(error_message) from error
    except InputTooLargeError as error:
        error_message = f"{filepath} exceeds the maximum allowed size of {error.limit} bytes."
        raise ConvertFileError(error_message) from error
    except InputError as error:
        raise ConvertFileError(f"{filepath}: {error}") from error

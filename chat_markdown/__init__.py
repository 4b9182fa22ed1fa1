"""
chat-markdown: Markdown to HTML conversion for chat messages.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    chat-markdown message.md -o message.html

Library Usage:
    from chat_markdown import parse

    html = parse("**Hello** from the *chat*")
"""

from .converter import MarkdownConverter, convert_file, convert_text, looks_like_html, parse
from .escaping import escape_html
from .exceptions import ConvertFileError, InputError, InputTooLargeError, LineTooLongError
from .models import Alignment
from .tables import render_table

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "parse",
    "MarkdownConverter",
    "convert_text",
    "convert_file",
    # Utilities
    "escape_html",
    "looks_like_html",
    "render_table",
    "Alignment",
    # Exceptions
    "ConvertFileError",
    "InputError",
    "InputTooLargeError",
    "LineTooLongError",
    # Version
    "__version__",
]

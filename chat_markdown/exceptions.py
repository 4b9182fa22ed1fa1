"""Package-specific exception types.

The converter itself never raises; these cover reading input from files.
"""

from __future__ import annotations


class InputError(ValueError):
    """Base class for input that is refused before conversion."""


class LineTooLongError(InputError):
    """Raised when a line exceeds the configured maximum length.

    Args:
        line_number: One-based index of the offending line.
        max_line_length: Maximum allowed line length in characters.
    """

    def __init__(self, line_number: int, max_line_length: int):
        self.line_number = line_number
        self.max_line_length = max_line_length
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Line {self.line_number} exceeds maximum allowed length "
            f"of {self.max_line_length} characters"
        )


class InputTooLargeError(InputError):
    """Raised when input exceeds the configured maximum size.

    Args:
        size: Size of the input in bytes.
        limit: Maximum number of bytes permitted.
    """

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Input is {self.size} bytes (limit: {self.limit})")


class ConvertFileError(Exception):
    """Raised when converting a Markdown file fails."""

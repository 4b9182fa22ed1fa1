"""Data models for chat-markdown."""

from dataclasses import dataclass
from enum import Enum, auto


class SegmentKind(Enum):
    """Classification of text during paragraph assembly.

    Attributes:
        BLOCK_ELEMENT: Rendered block HTML (or a block placeholder) left untouched.
        LOOSE_TEXT: Text outside any block, eligible for paragraph wrapping.
    """

    BLOCK_ELEMENT = auto()
    LOOSE_TEXT = auto()


class Alignment(Enum):
    """Table column alignment, valued as the CSS ``text-align`` keyword."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class Segment:
    """A run of text tagged for paragraph assembly.

    Attributes:
        kind: Whether the text is a block element or loose text.
        text: The raw text of the segment.
    """

    kind: SegmentKind
    text: str


@dataclass
class ProtectedFragment:
    """Rendered HTML held back from the pipeline behind a placeholder token.

    Attributes:
        token: Placeholder substituted into the working text.
        html: Fragment restored in place of the token.
        restored: Whether the token has already been substituted.
    """

    token: str
    html: str
    restored: bool = False

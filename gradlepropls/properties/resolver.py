"""Find the word the user is typing in front of the cursor."""

from __future__ import annotations

import re

from lsprotocol.types import Position

from gradlepropls.errors import PositionOutOfRange

# ASCII whitespace only; non-breaking and other Unicode spaces stay in the word
WHITESPACE_PATTERN = re.compile(r"[ \t\n\x0b\f\r]+")


def extract_word(document: str, position: Position) -> str:
    """
    Return the partial word immediately before the cursor.

    Only whitespace separates words, so dotted keys such as
    ``org.gradle.caching`` stay in one piece.

    Args:
        document: Full document text, lines separated by "\\n"
        position: Cursor position (0-based line and character)

    Returns:
        The last whitespace-separated token before the cursor, or ""
        when the cursor follows whitespace or starts the line.

    Raises:
        PositionOutOfRange: position.line is not a line of the document.
    """
    lines = document.split("\n")
    if position.line < 0 or position.line >= len(lines):
        raise PositionOutOfRange(position.line, len(lines))

    line = lines[position.line]
    character = min(max(position.character, 0), len(line))

    words = [word for word in WHITESPACE_PATTERN.split(line[:character]) if word]
    if not words:
        return ""
    return words[-1]

"""Forward cursor over the lines of a skin document."""
from __future__ import annotations

from typing import List, Optional


class LineCursor:
    """Shared read position threaded through the block parsers.

    Block parsers start on their opening line and return with the cursor on
    their closing line, or past the last line when the block is truncated.
    """

    def __init__(self, lines: List[str], pos: int = 0) -> None:
        self.lines = lines
        self.pos = pos

    @classmethod
    def from_text(cls, text: str) -> "LineCursor":
        return cls(text.split("\n"))

    def at_end(self) -> bool:
        return self.pos >= len(self.lines)

    def current(self) -> Optional[str]:
        """Return the trimmed current line, or ``None`` at end of input."""
        if self.at_end():
            return None
        return self.lines[self.pos].strip()

    def advance(self) -> None:
        self.pos += 1

"""
Position tracking for the PizzaLang lexer.

Author: xwest
"""

from .tokens import SourceLocation


class Cursor:
    """
    Walks a source buffer one character at a time.

    The current character is always read from ``index`` so the two can
    never disagree.
    """

    def __init__(self, source: str):
        self.source = source
        self.index = 0
        self.line = 1
        self.column = 0

    @property
    def current(self) -> str:
        """Character under the cursor, or "" at end of input."""
        if self.index < len(self.source):
            return self.source[self.index]
        return ""

    @property
    def at_end(self) -> bool:
        return self.index >= len(self.source)

    def advance(self):
        """Consume the current character, updating line/column."""
        if self.at_end:
            return
        consumed = self.source[self.index]
        self.index += 1
        self.column += 1
        if consumed == "\n":
            self.line += 1
            self.column = 0

    def peek(self) -> str:
        """Character after the current one, without advancing."""
        peek_pos = self.index + 1
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return ""

    def location(self, filename: str) -> SourceLocation:
        return SourceLocation(filename, self.line, self.column, self.index)

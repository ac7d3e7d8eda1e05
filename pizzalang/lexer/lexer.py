"""
PizzaLang Lexer - turns source text into tokens

Pull-based: callers ask for one token at a time with next_token(), or use
tokenize() to drain the whole buffer. Malformed input never raises here;
it comes back as ILLEGAL / UNTERMINATED_STRING tokens for later stages.

xwest
"""

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING, Iterator, List, Optional

from .cursor import Cursor
from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, TWO_CHAR_OPERATORS,
    SINGLE_CHAR_OPERATORS, WHITESPACE
)

if TYPE_CHECKING:
    from .sinks import TokenSink

logger = logging.getLogger(__name__)


class CharClass(Enum):
    """Coarse classification of the character under the cursor."""
    END = auto()
    LETTER = auto()
    DIGIT = auto()
    QUOTE = auto()
    OPERATOR = auto()
    OTHER = auto()


def _is_ascii_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def classify(char: str) -> CharClass:
    """Classify a single character ("" means end of input)."""
    if char == "":
        return CharClass.END
    if _is_ascii_letter(char) or char == "_":
        return CharClass.LETTER
    if _is_ascii_digit(char):
        return CharClass.DIGIT
    if char == '"':
        return CharClass.QUOTE
    if char in TWO_CHAR_OPERATORS or char in SINGLE_CHAR_OPERATORS:
        return CharClass.OPERATOR
    return CharClass.OTHER


class Lexer:
    """
    PizzaLang lexical analyzer.

    Owns the source text and a single Cursor for one pass. Every call to
    next_token() consumes the characters of exactly one token; once the EOF
    token has been handed out the lexer is exhausted and returns None.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for token locations
        """
        self.source = source
        self.filename = filename
        self.cursor = Cursor(source)
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """True once the EOF token has been returned."""
        return self._exhausted

    def next_token(self) -> Optional[Token]:
        """Scan and return the next token, or None after EOF."""
        if self._exhausted:
            return None

        self._skip_whitespace()

        # Captured before consuming anything so multi-line tokens report
        # the line they started on.
        start = self.cursor.location(self.filename)
        char = self.cursor.current
        char_class = classify(char)

        if char_class is CharClass.END:
            self._exhausted = True
            return Token(TokenType.EOF, "", None, start)
        if char_class is CharClass.LETTER:
            return self._scan_identifier(start)
        if char_class is CharClass.DIGIT:
            return self._scan_number(start)
        if char_class is CharClass.QUOTE:
            return self._scan_string(start)
        if char_class is CharClass.OPERATOR:
            return self._scan_operator(char, start)

        self.cursor.advance()
        return Token(TokenType.ILLEGAL, char, None, start)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def tokenize(self, sink: Optional["TokenSink"] = None) -> List[Token]:
        """
        Drain the lexer.

        Args:
            sink: Optional TokenSink that receives every token, EOF included

        Returns:
            List of tokens ending with exactly one EOF token
        """
        tokens = []
        for token in self:
            if sink is not None:
                sink.write(token)
            tokens.append(token)

        logger.debug(
            "tokenized %s: %d tokens, %d errors",
            self.filename, len(tokens), sum(1 for t in tokens if t.is_error)
        )
        return tokens

    def _skip_whitespace(self):
        while self.cursor.current in WHITESPACE:
            self.cursor.advance()

    def _scan_identifier(self, start: SourceLocation) -> Token:
        """Scan an identifier and look it up in the keyword table."""
        begin = self.cursor.index
        while True:
            char = self.cursor.current
            if not (_is_ascii_letter(char) or _is_ascii_digit(char) or char == "_"):
                break
            self.cursor.advance()

        lexeme = self.source[begin:self.cursor.index]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        return Token(token_type, lexeme, None, start)

    def _scan_number(self, start: SourceLocation) -> Token:
        """Scan digits with at most one decimal point."""
        begin = self.cursor.index
        seen_dot = False
        while True:
            char = self.cursor.current
            if char == ".":
                if seen_dot:
                    break
                seen_dot = True
            elif not _is_ascii_digit(char):
                break
            self.cursor.advance()

        lexeme = self.source[begin:self.cursor.index]
        return Token(TokenType.NUMBER, lexeme, None, start)

    def _scan_string(self, start: SourceLocation) -> Token:
        """Scan a double-quoted string; the lexeme excludes the quotes."""
        self.cursor.advance()  # Skip opening quote
        begin = self.cursor.index

        while not self.cursor.at_end and self.cursor.current != '"':
            self.cursor.advance()

        content = self.source[begin:self.cursor.index]
        if self.cursor.at_end:
            return Token(TokenType.UNTERMINATED_STRING, content, None, start)

        self.cursor.advance()  # Skip closing quote
        return Token(TokenType.STRING, content, None, start)

    def _scan_operator(self, char: str, start: SourceLocation) -> Token:
        """Scan an operator or delimiter, using one character of lookahead."""
        if char in TWO_CHAR_OPERATORS:
            with_equals, alone = TWO_CHAR_OPERATORS[char]
            if self.cursor.peek() == "=":
                self.cursor.advance()
                self.cursor.advance()
                return Token(with_equals, char + "=", None, start)
            self.cursor.advance()
            return Token(alone or TokenType.ILLEGAL, char, None, start)

        self.cursor.advance()
        return Token(SINGLE_CHAR_OPERATORS[char], char, None, start)


def tokenize_string(source: str, filename: str = "<string>",
                    sink: Optional["TokenSink"] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for token locations
        sink: Optional token sink (see pizzalang.lexer.sinks)

    Returns:
        List of tokens ending with EOF
    """
    return Lexer(source, filename).tokenize(sink=sink)


def tokenize_file(filepath: str, sink: Optional["TokenSink"] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        OSError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, str(filepath), sink=sink)

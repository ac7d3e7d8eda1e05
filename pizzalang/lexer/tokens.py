"""
Token definitions for the PizzaLang lexer.

This module defines all token types supported by PizzaLang, including:
- Keywords (topping, recipe, slice, ...)
- Operators and delimiters
- Literals (numbers, strings) and identifiers
- Error tokens the lexer emits instead of raising

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in PizzaLang.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input

    # ========================================================================
    # Keywords
    # ========================================================================
    TOPPING = auto()                # topping (variable declaration)
    RECIPE = auto()                 # recipe (function)
    SLICE = auto()                  # slice
    EXTRA = auto()                  # extra
    OVEN = auto()                   # oven
    SERVE = auto()                  # serve (return)
    CHEESE = auto()                 # cheese

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = auto()             # slices_per_person
    STRING = auto()                 # "margherita"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    ASSIGN = auto()                 # =
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=
    GREATER_THAN = auto()           # >
    LESS_THAN = auto()              # <
    GREATER_EQUAL = auto()          # >=
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Delimiters
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,

    # ========================================================================
    # Error Tokens
    # ========================================================================
    ILLEGAL = auto()                # Unrecognized character, bare !
    UNTERMINATED_STRING = auto()    # " with no closing quote before EOF


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Lines are 1-based. Columns are 0-based and reset to 0 after a newline.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the PizzaLang language.

    ``literal`` is reserved for a decoded value and is always None for now;
    decoding happens in a later stage.
    """
    type: TokenType
    lexeme: str                     # Matched text (string content without quotes)
    literal: Optional[Any]          # Decoded value, currently unset
    location: SourceLocation        # Where the token began

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        literal = "" if self.literal is None else f" = {self.literal!r}"
        return f"Token({self.type.name}, {self.lexeme!r}{literal} @ {self.location})"

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in (TokenType.STRING, TokenType.NUMBER)

    @property
    def is_error(self) -> bool:
        """Check if this token marks malformed input."""
        return self.type in (TokenType.ILLEGAL, TokenType.UNTERMINATED_STRING)


# Lookup tables used by the lexer. Adding a keyword is one entry here plus
# its TokenType member.

KEYWORDS = {
    "topping": TokenType.TOPPING,
    "recipe": TokenType.RECIPE,
    "slice": TokenType.SLICE,
    "extra": TokenType.EXTRA,
    "oven": TokenType.OVEN,
    "serve": TokenType.SERVE,
    "cheese": TokenType.CHEESE,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

# Operators that need one character of lookahead. The value pairs are
# (type when followed by '=', type when alone); None means the bare
# character is illegal.
TWO_CHAR_OPERATORS = {
    "=": (TokenType.EQUAL, TokenType.ASSIGN),
    "!": (TokenType.NOT_EQUAL, None),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER_THAN),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS_THAN),
}

SINGLE_CHAR_OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
}

WHITESPACE = frozenset(" \t\n\r")

"""
PizzaLang Lexer Package

Implements a from-scratch lexical analyzer (tokenizer) for the PizzaLang
scripting language.

Key Features:
- Pull-based scanning with one character of lookahead
- Keyword table lookup for identifiers
- Error tokens instead of exceptions for malformed input
- Line/column tracking from the start of every token
- Optional debug sinks for dumping token streams

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .cursor import Cursor
from .lexer import Lexer, CharClass, classify, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError, collect_diagnostics, raise_for_errors
from .sinks import TokenSink, ListTokenSink, FileTokenSink

__all__ = [
    "Lexer",
    "Cursor",
    "CharClass",
    "classify",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "collect_diagnostics",
    "raise_for_errors",
    "TokenSink",
    "ListTokenSink",
    "FileTokenSink",
]

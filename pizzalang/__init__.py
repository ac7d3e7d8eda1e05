"""
PizzaLang Compiler Package

Front end for the PizzaLang scripting language. Only the lexer exists so
far; parsing and evaluation are later stages.

Architecture:
    pizzalang/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # pizzac command-line entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@pizzalang.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType

__all__ = [
    "Lexer",
    "Token",
    "TokenType",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]

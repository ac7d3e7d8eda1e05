"""
Error reporting for the PizzaLang lexer.

The lexer itself never raises on bad input; it emits ILLEGAL and
UNTERMINATED_STRING tokens. This module turns those tokens into
diagnostics with source locations and help text, and offers a strict
mode that raises LexerError on the first one.

Author: xwest
"""

from typing import Optional, List, Iterable
from dataclasses import dataclass, field

from .tokens import Token, TokenType, SourceLocation, TWO_CHAR_OPERATORS, SINGLE_CHAR_OPERATORS


ERROR_CODES = {
    "L001": "Illegal character",
    "L002": "Unterminated string literal",
    "L003": "Malformed operator",
}


@dataclass(frozen=True)
class Diagnostic:
    """
    One problem found in a token stream, keyed by its ERROR_CODES entry.

    Renders rustc-style:

        error[L003]: Malformed operator: '!'
          --> menu.pizza:4:7
          help: '!' is only valid as part of a longer operator.
          suggestions:
            - !=
    """
    code: str
    message: str
    location: SourceLocation
    help_text: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)
    severity: str = "error"

    @property
    def title(self) -> str:
        return ERROR_CODES.get(self.code, "Lexical error")

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        lines = [f"{self.severity}[{self.code}]: {self.message}", f"  --> {self.location}"]
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        if self.suggestions:
            lines.append("  suggestions:")
            lines.extend(f"    - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines) + "\n"


class LexerError(Exception):
    """Raised by raise_for_errors() for the first malformed token."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """Suggestion helpers for diagnostics."""

    @staticmethod
    def suggest_operator_corrections(invalid_op: str) -> List[str]:
        """Operators that start with the offending character."""
        known = [op + "=" for op in TWO_CHAR_OPERATORS] + list(TWO_CHAR_OPERATORS) + list(SINGLE_CHAR_OPERATORS)
        return [op for op in known if op != invalid_op and op.startswith(invalid_op)][:3]


def create_illegal_character_error(token: Token) -> Diagnostic:
    char = token.lexeme
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in PizzaLang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        message=f"Illegal character: '{char}'",
        location=token.location,
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_error(token: Token) -> Diagnostic:
    return Diagnostic(
        message="Unterminated string literal",
        location=token.location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote'],
    )


def create_malformed_operator_error(token: Token) -> Diagnostic:
    suggestions = ErrorRecovery.suggest_operator_corrections(token.lexeme)
    return Diagnostic(
        message=f"Malformed operator: '{token.lexeme}'",
        location=token.location,
        code="L003",
        help_text=f"'{token.lexeme}' is only valid as part of a longer operator.",
        suggestions=suggestions,
    )


def diagnose(token: Token) -> Optional[Diagnostic]:
    """Diagnostic for a single token, or None if the token is well-formed."""
    if token.type is TokenType.UNTERMINATED_STRING:
        return create_unterminated_string_error(token)
    if token.type is TokenType.ILLEGAL:
        if token.lexeme in TWO_CHAR_OPERATORS:
            return create_malformed_operator_error(token)
        return create_illegal_character_error(token)
    return None


def collect_diagnostics(tokens: Iterable[Token]) -> List[Diagnostic]:
    """Diagnostics for every error token, in source order."""
    diagnostics = []
    for token in tokens:
        diagnostic = diagnose(token)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
    return diagnostics


def raise_for_errors(tokens: Iterable[Token]):
    """
    Raise LexerError for the first error token, if any.

    Raises:
        LexerError: Describing the first malformed token
    """
    for token in tokens:
        diagnostic = diagnose(token)
        if diagnostic is not None:
            raise LexerError(diagnostic)

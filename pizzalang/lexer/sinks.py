"""
Debug sinks for token streams.

A sink is handed to Lexer.tokenize() and receives every token as it is
produced. Nothing in the scanner writes anywhere on its own.

Author: xwest
"""

from typing import List, TextIO

from .tokens import Token


class TokenSink:
    """Base class for token consumers."""

    def write(self, token: Token):
        raise NotImplementedError

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class ListTokenSink(TokenSink):
    """Keeps every token in memory."""

    def __init__(self):
        self.tokens: List[Token] = []

    def write(self, token: Token):
        self.tokens.append(token)


class FileTokenSink(TokenSink):
    """
    Writes one ``Token: <repr>`` line per token to a text file.

    The file is opened on construction and closed by close() or when used
    as a context manager.
    """

    def __init__(self, path: str):
        self.path = path
        self._file: TextIO = open(path, 'w', encoding='utf-8')

    def write(self, token: Token):
        self._file.write(f"Token: {token!r}\n")

    def close(self):
        if not self._file.closed:
            self._file.close()

"""
Tests for token sinks and file tokenization.

Author: xwest
"""

import unittest
import tempfile
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from pizzalang.lexer import (
    Lexer, TokenType, TokenSink, ListTokenSink, FileTokenSink, tokenize_file, tokenize_string
)


class TestListTokenSink(unittest.TestCase):

    def test_sink_sees_every_token(self):
        sink = ListTokenSink()
        tokens = Lexer("slice + 2").tokenize(sink=sink)
        self.assertEqual(sink.tokens, tokens)
        self.assertEqual(sink.tokens[-1].type, TokenType.EOF)

    def test_tokenize_string_with_sink(self):
        sink = ListTokenSink()
        tokens = tokenize_string("a", sink=sink)
        self.assertEqual(len(sink.tokens), 2)
        self.assertEqual(sink.tokens, tokens)

    def test_custom_sink_subclass(self):
        class CountingSink(TokenSink):
            def __init__(self):
                self.counts = {}

            def write(self, token):
                self.counts[token.type] = self.counts.get(token.type, 0) + 1

        sink = CountingSink()
        tokenize_string("topping a = a + a", sink=sink)
        self.assertEqual(sink.counts[TokenType.IDENTIFIER], 3)
        self.assertEqual(sink.counts[TokenType.EOF], 1)

    def test_base_sink_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            TokenSink().write(tokenize_string("")[0])


class TestFileTokenSink(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "tokens.txt")

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_one_line_per_token(self):
        with FileTokenSink(self.path) as sink:
            tokens = Lexer("topping x = 3").tokenize(sink=sink)

        with open(self.path, encoding="utf-8") as f:
            lines = f.read().splitlines()

        self.assertEqual(len(lines), len(tokens))
        self.assertEqual(
            lines[0],
            "Token: Token(TOPPING, 'topping' @ <unknown>:1:0)"
        )
        self.assertTrue(lines[-1].startswith("Token: Token(EOF, '' @ <unknown>:"))

    def test_close_is_idempotent(self):
        sink = FileTokenSink(self.path)
        sink.close()
        sink.close()
        self.assertTrue(os.path.exists(self.path))


class TestTokenizeFile(unittest.TestCase):

    def test_reads_utf8_and_records_filename(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "order.pizza")
            with open(path, "w", encoding="utf-8") as f:
                f.write('serve "pizza für alle"\n')

            tokens = tokenize_file(path)

        self.assertEqual([t.type for t in tokens], [TokenType.SERVE, TokenType.STRING, TokenType.EOF])
        self.assertEqual(tokens[1].lexeme, "pizza für alle")
        self.assertEqual(tokens[0].location.filename, path)

    def test_invalid_utf8_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "bad.pizza")
            with open(path, "wb") as f:
                f.write(b"\xff")
            with self.assertRaises(UnicodeDecodeError):
                tokenize_file(path)

    def test_missing_file_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(OSError):
                tokenize_file(os.path.join(tmpdir, "missing.pizza"))


if __name__ == "__main__":
    unittest.main()

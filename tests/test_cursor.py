"""
Tests for the lexer's position tracker.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from pizzalang.lexer.cursor import Cursor


class TestCursor(unittest.TestCase):
    """Line/column bookkeeping and lookahead."""

    def test_initial_state(self):
        cursor = Cursor("ab")
        self.assertEqual(cursor.index, 0)
        self.assertEqual(cursor.line, 1)
        self.assertEqual(cursor.column, 0)
        self.assertEqual(cursor.current, "a")
        self.assertFalse(cursor.at_end)

    def test_advance_through_newline(self):
        cursor = Cursor("ab\nc")
        cursor.advance()
        self.assertEqual((cursor.current, cursor.line, cursor.column), ("b", 1, 1))
        cursor.advance()
        self.assertEqual((cursor.current, cursor.line, cursor.column), ("\n", 1, 2))

        # Consuming the newline moves to the next line
        cursor.advance()
        self.assertEqual((cursor.current, cursor.line, cursor.column), ("c", 2, 0))
        self.assertEqual(cursor.index, 3)

        cursor.advance()
        self.assertTrue(cursor.at_end)
        self.assertEqual(cursor.current, "")
        self.assertEqual((cursor.line, cursor.column, cursor.index), (2, 1, 4))

    def test_line_counts_each_newline_once(self):
        cursor = Cursor("\n\n\n")
        for _ in range(3):
            cursor.advance()
        self.assertEqual(cursor.line, 4)
        self.assertEqual(cursor.column, 0)

    def test_advance_past_end_is_noop(self):
        cursor = Cursor("x")
        cursor.advance()
        cursor.advance()
        cursor.advance()
        self.assertEqual(cursor.index, 1)
        self.assertEqual(cursor.current, "")
        self.assertEqual(cursor.column, 1)

    def test_empty_source(self):
        cursor = Cursor("")
        self.assertTrue(cursor.at_end)
        self.assertEqual(cursor.current, "")
        self.assertEqual(cursor.peek(), "")

    def test_peek_does_not_move(self):
        cursor = Cursor("=>")
        self.assertEqual(cursor.peek(), ">")
        self.assertEqual(cursor.peek(), ">")
        self.assertEqual(cursor.index, 0)
        self.assertEqual(cursor.current, "=")

        cursor.advance()
        self.assertEqual(cursor.peek(), "")

    def test_location_snapshot(self):
        cursor = Cursor("a\nbc")
        cursor.advance()
        cursor.advance()
        cursor.advance()
        location = cursor.location("main.pizza")
        self.assertEqual(location.filename, "main.pizza")
        self.assertEqual((location.line, location.column, location.offset), (2, 1, 3))
        self.assertEqual(str(location), "main.pizza:2:1")


if __name__ == "__main__":
    unittest.main()

"""
Test suite for the descriptor and the enveloped parse API.

Author: xwest
"""

import math
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from numseq import (
    ClassificationError, ParseError, ParseOptions, ParsedSequence, SequenceKind,
    numseq_parse, parse_sequence
)


class TestParseSequence(unittest.TestCase):
    """Test cases for the strict descriptor entry point."""

    def test_itemized(self):
        sequence = parse_sequence("1,3,5")
        self.assertEqual(sequence.numbers, (1, 3, 5))
        self.assertFalse(sequence.has_ellipsis)
        self.assertEqual(sequence.kind, SequenceKind.ITEMIZED)
        self.assertIsNone(sequence.step)
        self.assertIsNone(sequence.last_bound)
        self.assertFalse(sequence.is_infinite)

    def test_arithmetic(self):
        sequence = parse_sequence("1,3,5,...")
        self.assertEqual(sequence.kind, SequenceKind.ARITHMETIC)
        self.assertEqual(sequence.step, 2)
        self.assertTrue(sequence.is_infinite)

    def test_geometric_bounded(self):
        sequence = parse_sequence("1,3,9,...,100")
        self.assertEqual(sequence.kind, SequenceKind.GEOMETRIC)
        self.assertEqual(sequence.step, 3)
        self.assertEqual(sequence.last_bound, 100)

    def test_idempotent(self):
        self.assertEqual(parse_sequence("10,8,6,...,0"), parse_sequence("10,8,6,...,0"))

    def test_errors_propagate(self):
        with self.assertRaises(ParseError):
            parse_sequence(",1,2,3")
        with self.assertRaises(ClassificationError):
            parse_sequence("1,2,5,...,100")

    def test_invariants_enforced(self):
        with self.assertRaises(ValueError):
            ParsedSequence(numbers=(), has_ellipsis=False, kind=SequenceKind.ITEMIZED)
        with self.assertRaises(ValueError):
            ParsedSequence(numbers=(1, 2, 3), has_ellipsis=False, kind=SequenceKind.ARITHMETIC, step=1)
        with self.assertRaises(ValueError):
            ParsedSequence(numbers=(1,), has_ellipsis=False, kind=SequenceKind.ITEMIZED, last_bound=3)

    def test_to_dict(self):
        self.assertEqual(
            parse_sequence("1,3,5").to_dict(),
            {"numbers": [1, 3, 5], "has_ellipsis": False, "type": "itemized", "inc": None},
        )
        self.assertEqual(
            parse_sequence("1,3,5,...").to_dict(),
            {"numbers": [1, 3, 5], "has_ellipsis": True, "last_number": None,
             "type": "arithmetic", "inc": 2},
        )


class TestNumseqParse(unittest.TestCase):
    """Test cases for the enveloped entry point."""

    def test_success(self):
        response = numseq_parse("1,3,5,...,13")
        self.assertEqual(response.status, 200)
        self.assertEqual(response.message, "OK")
        self.assertTrue(response.ok)
        self.assertEqual(response.payload["type"], "arithmetic")
        self.assertEqual(response.payload["inc"], 2)
        self.assertEqual(response.payload["last_number"], 13)

    def test_numbers_without_commas(self):
        response = numseq_parse("1-2")
        self.assertEqual(response.status, 200)
        self.assertEqual(response.payload["numbers"], [1, -2])
        self.assertEqual(response.payload["type"], "itemized")

        response = numseq_parse("1-1-3,...")
        self.assertEqual(response.status, 200)
        self.assertEqual(response.payload["type"], "arithmetic")
        self.assertEqual(response.payload["inc"], -2)

    def test_infinite_bound_payload(self):
        response = numseq_parse("1,3,9,...,-Inf")
        self.assertEqual(response.payload["type"], "geometric")
        self.assertEqual(response.payload["last_number"], -math.inf)

    def test_classification_failure(self):
        response = numseq_parse("1,2,5,...,100")
        self.assertEqual(response.status, 400)
        self.assertTrue(response.message.startswith("Parse fail: "))
        self.assertIn("cannot determine pattern from: 1, 2, 5", response.message)
        self.assertIsNone(response.payload)

    def test_syntax_failures(self):
        for spec, fragment in [
            (",1,2,3", "must not start with comma"),
            ("", "must specify one or more numbers"),
            ("1,2,...", "need at least three numbers before ellipsis"),
            ("1,2,3 4", "extraneous token"),
        ]:
            with self.subTest(spec=spec):
                response = numseq_parse(spec)
                self.assertEqual(response.status, 400)
                self.assertTrue(response.message.startswith("Parse fail: "))
                self.assertIn(fragment, response.message)

    def test_list_form(self):
        status, message, payload = numseq_parse("1,2")
        self.assertEqual((status, message), (200, "OK"))
        self.assertEqual(payload["numbers"], [1, 2])
        self.assertEqual(numseq_parse("").as_list()[0], 400)
        self.assertEqual(len(numseq_parse("").as_list()), 2)

    def test_options(self):
        self.assertEqual(numseq_parse({}, "1,2").status, 200)
        self.assertEqual(numseq_parse("1,2", options=ParseOptions()).status, 200)
        with self.assertLogs("numseq.config", level="WARNING"):
            self.assertEqual(numseq_parse({"bogus": 1}, "1,2").status, 200)

    def test_bad_arguments_are_not_enveloped(self):
        with self.assertRaises(TypeError):
            numseq_parse()
        with self.assertRaises(TypeError):
            numseq_parse(["not", "a", "mapping"], "1,2")
        with self.assertRaises(TypeError):
            numseq_parse({}, "1,2", options={})
        with self.assertRaises(TypeError):
            numseq_parse(42)


if __name__ == "__main__":
    unittest.main()

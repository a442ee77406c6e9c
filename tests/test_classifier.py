"""
Test suite for the arithmetic/geometric classifier.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from numseq.analyzer import (
    ClassificationError, SequenceKind, classify, common_difference, common_ratio
)


class TestClassifier(unittest.TestCase):
    """Test cases for pattern classification."""

    def test_arithmetic(self):
        result = classify([1, 3, 5])
        self.assertEqual(result.kind, SequenceKind.ARITHMETIC)
        self.assertEqual(result.step, 2)

    def test_decreasing_arithmetic(self):
        result = classify([10, 8, 6])
        self.assertEqual(result.kind, SequenceKind.ARITHMETIC)
        self.assertEqual(result.step, -2)

    def test_geometric(self):
        result = classify([1, 3, 9])
        self.assertEqual(result.kind, SequenceKind.GEOMETRIC)
        self.assertEqual(result.step, 3)

    def test_fractional_ratio(self):
        result = classify([8, 4, 2, 1])
        self.assertEqual(result.kind, SequenceKind.GEOMETRIC)
        self.assertEqual(result.step, 0.5)

    def test_equal_numbers_are_arithmetic(self):
        result = classify([5, 5, 5])
        self.assertEqual(result.kind, SequenceKind.ARITHMETIC)
        self.assertEqual(result.step, 0)

    def test_zero_start_is_not_geometric(self):
        self.assertIsNone(common_ratio([0, 1, 3]))
        with self.assertRaises(ClassificationError):
            classify([0, 1, 3])

    def test_zero_divisor_is_not_geometric(self):
        self.assertIsNone(common_ratio([2, 0, 0]))

    def test_common_difference(self):
        self.assertEqual(common_difference([1, 2, 3, 4]), 1)
        self.assertIsNone(common_difference([1, 2, 4]))

    def test_unclassifiable(self):
        with self.assertRaises(ClassificationError) as ctx:
            classify([1, 2, 5])
        error = ctx.exception
        self.assertIn("cannot determine pattern from: 1, 2, 5", error.message)
        self.assertEqual(error.numbers, (1, 2, 5))
        self.assertEqual(error.kind, "classification")
        self.assertEqual(error.code, "C001")

    def test_exact_equality(self):
        # 0.2 - 0.1 != 0.3 - 0.2 in binary floating point
        with self.assertRaises(ClassificationError):
            classify([0.1, 0.2, 0.3])

    def test_deterministic(self):
        self.assertEqual(classify([2, 6, 18]), classify([2, 6, 18]))


if __name__ == "__main__":
    unittest.main()

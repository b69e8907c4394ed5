"""
Unit tests for random sampling helpers.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from diamonds import random_utils
from diamonds.schema import HSL


class TestRandomInt(unittest.TestCase):
    """random_int samples an inclusive integer range from the shared generator."""

    def test_inclusive_bounds(self):
        random_utils.seed(1)
        values = {random_utils.random_int(0, 3) for _ in range(500)}
        self.assertEqual(values, {0, 1, 2, 3})

    def test_rounds_bounds_inward(self):
        """min is ceiled and max floored: [0.2, 2.8] samples from {1, 2}."""
        random_utils.seed(2)
        values = {random_utils.random_int(0.2, 2.8) for _ in range(300)}
        self.assertEqual(values, {1, 2})

    def test_single_value_range(self):
        self.assertEqual(random_utils.random_int(5, 5), 5)

    def test_empty_range_fails(self):
        with self.assertRaises(ValueError):
            random_utils.random_int(3.2, 3.8)

    def test_returns_python_int(self):
        self.assertIsInstance(random_utils.random_int(0, 10), int)

    def test_seed_reproduces_sequence(self):
        random_utils.seed(42)
        first = [random_utils.random_int(0, 1000) for _ in range(10)]
        random_utils.seed(42)
        second = [random_utils.random_int(0, 1000) for _ in range(10)]
        self.assertEqual(first, second)


class TestRandomColors(unittest.TestCase):
    """random_color / random_colors stay in legal HSL ranges."""

    def test_random_color_ranges(self):
        random_utils.seed(3)
        for _ in range(200):
            c = random_utils.random_color()
            self.assertIsInstance(c, HSL)
            self.assertTrue(0 <= c.hue <= 360)
            self.assertTrue(0 <= c.saturation <= 100)
            self.assertTrue(0 <= c.luminance <= 100)
            self.assertEqual(c.alpha, 1)

    def test_random_colors_count(self):
        self.assertEqual(random_utils.random_colors(0), [])
        self.assertEqual(len(random_utils.random_colors(4)), 4)


class TestApplyOpacityAndClip(unittest.TestCase):
    """apply_opacity only touches alpha; clip stays in bounds."""

    def test_apply_opacity_changes_only_alpha(self):
        base = HSL(200, 50, 40, 1)
        out = random_utils.apply_opacity(base, 0.25)
        self.assertEqual((out.hue, out.saturation, out.luminance), (200, 50, 40))
        self.assertEqual(out.alpha, 0.25)
        self.assertEqual(base.alpha, 1)  # original untouched

    def test_apply_opacity_accepts_sequence(self):
        self.assertEqual(random_utils.apply_opacity([10, 20, 30, 1], 0.5), HSL(10, 20, 30, 0.5))

    def test_clip_within_bounds_and_idempotent(self):
        for v in (-50, -0.5, 0, 42, 100, 100.5, 1000):
            once = random_utils.clip(v, 0, 100)
            self.assertTrue(0 <= once <= 100)
            self.assertEqual(random_utils.clip(once, 0, 100), once)
        self.assertEqual(random_utils.clip(42, 0, 100), 42)
        self.assertEqual(random_utils.clip(-1, 0, 100), 0)
        self.assertEqual(random_utils.clip(101, 0, 100), 100)


if __name__ == "__main__":
    unittest.main()

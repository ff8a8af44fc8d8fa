"""
Tests for pretzel simplification.

These tests verify:
1. Known simplifications reach the expected word
2. Words that cannot be simplified are left untouched
3. The link type (number of components) survives simplification
"""

import io
import unittest
from contextlib import redirect_stdout

from pretzelkit.pretzel import Pretzel, Twist
from pretzelkit.seifert import compute_genus, count_link_components
from pretzelkit.simplifier import (
    PretzelSimplifier,
    SimplificationMove,
    simplify,
    simplify_fully,
    yang_baxter,
)

SIMPLIFIABLE = [
    # d C D B C B => dDCDBC (YB twice) => CDBC (cancel inverses) => BB (trim)
    ([(4, -1), (3, 1), (4, 1), (2, 1), (3, 1), (2, 1)],
     [(2, 1), (2, 1)]),
    ([(2, 3), (3, 1), (4, -5), (3, 1), (3, 1)],
     [(2, 1), (2, 1), (2, 1)]),
    ([(1, 1), (2, -1), (1, 1), (3, -1), (2, -1), (3, -1)],
     [(1, 1), (2, -1), (1, 1), (2, -1), (2, -1)]),
]

NOT_SIMPLIFIABLE = [
    [(1, 1), (2, -1), (1, 1), (2, -1)],
    [(1, 3), (1, -3)],
]


class TestYangBaxter(unittest.TestCase):
    """Tests for the Yang-Baxter relation."""

    def test_positive_triple(self):
        """Test aba becomes bab."""
        result = yang_baxter(Twist(1, 1), Twist(2, 1), Twist(1, 1))
        self.assertEqual(result, (Twist(2, 1), Twist(1, 1), Twist(2, 1)))

    def test_mixed_signs(self):
        """Test signs move with the outer twists."""
        result = yang_baxter(Twist(1, 1), Twist(2, 1), Twist(1, -1))
        self.assertEqual(result, (Twist(2, -1), Twist(1, 1), Twist(2, 1)))

    def test_alternating_signs_rejected(self):
        """Test the +-+ and -+- patterns do not apply."""
        self.assertIsNone(yang_baxter(Twist(1, 1), Twist(2, -1), Twist(1, 1)))
        self.assertIsNone(yang_baxter(Twist(2, -1), Twist(1, 1), Twist(2, -1)))

    def test_shape_rejected(self):
        """Test distant strands, repeated strands and higher twists do not apply."""
        self.assertIsNone(yang_baxter(Twist(1, 1), Twist(3, 1), Twist(1, 1)))
        self.assertIsNone(yang_baxter(Twist(1, 1), Twist(2, 1), Twist(2, 1)))
        self.assertIsNone(yang_baxter(Twist(1, 3), Twist(2, 1), Twist(1, 1)))


class TestSimplify(unittest.TestCase):
    """Tests for single-pass simplification."""

    def test_simplify(self):
        """Test known words reach their simplified form."""
        for word, expected in SIMPLIFIABLE:
            with self.subTest(word=word):
                pr = Pretzel(word)
                self.assertTrue(simplify(pr))
                self.assertEqual(pr, Pretzel(expected))

    def test_non_simplify(self):
        """Test words that cannot be simplified stay unchanged."""
        for word in NOT_SIMPLIFIABLE:
            with self.subTest(word=word):
                pr = Pretzel(word)
                self.assertFalse(simplify(pr))
                self.assertEqual(pr, Pretzel(word))

    def test_empty(self):
        """Test the empty pretzel is already simple."""
        pr = Pretzel()
        self.assertFalse(simplify(pr))
        self.assertEqual(pr, Pretzel())

    def test_cancel_adjacent(self):
        """Test adjacent inverses cancel."""
        pr = Pretzel([(1, 1), (1, -1)])
        self.assertTrue(simplify(pr))
        self.assertEqual(pr, Pretzel())

    def test_cancel_across_distant_twist(self):
        """(1, 1) cancels with (1, -1) past the commuting (3, 1)."""
        pr = Pretzel([(1, 1), (3, 1), (1, -1), (3, 1)])
        simplifier = PretzelSimplifier()
        simplifier.simplify(pr)
        self.assertGreaterEqual(simplifier.stats["cancellations"], 1)
        self.assertNotIn(Twist(1, -1), pr.twists)

    def test_commute_distant(self):
        """Out-of-order distant twists are swapped."""
        pr = Pretzel([(3, 1), (1, 1), (3, 1), (1, 1)])
        simplifier = PretzelSimplifier()
        self.assertTrue(simplifier.simplify(pr))
        self.assertGreaterEqual(simplifier.stats["commutations"], 1)

    def test_lone_twist_trimmed(self):
        """Test a single twist is removed."""
        pr = Pretzel([(1, 1)])
        self.assertTrue(simplify(pr))
        self.assertEqual(pr, Pretzel())

    def test_trim_lowest_renumbers(self):
        """Test trimming the lowest strand shifts the rest down."""
        pr = Pretzel([(1, 3), (2, 1), (2, 1)])
        simplifier = PretzelSimplifier()
        self.assertTrue(simplifier.simplify(pr))
        self.assertEqual(simplifier.steps[0].move_type, SimplificationMove.TRIM_LOWEST)
        self.assertEqual(pr, Pretzel([(1, 1), (1, 1)]))


class TestSimplifyFully(unittest.TestCase):
    """Tests for fixed-point simplification."""

    def test_same_fixed_points(self):
        """Test one pass already reaches the fixed point for known words."""
        for word, expected in SIMPLIFIABLE:
            with self.subTest(word=word):
                pr = Pretzel(word)
                self.assertTrue(simplify_fully(pr))
                self.assertEqual(pr, Pretzel(expected))
                self.assertFalse(simplify(pr))

    def test_non_simplify(self):
        """Test words that cannot be simplified stay unchanged."""
        for word in NOT_SIMPLIFIABLE:
            with self.subTest(word=word):
                pr = Pretzel(word)
                self.assertFalse(simplify_fully(pr))
                self.assertEqual(pr, Pretzel(word))


class TestInvariantsPreserved(unittest.TestCase):
    """Simplification must not change the link."""

    def test_components_preserved(self):
        """Test the number of link components is kept."""
        for word, _ in SIMPLIFIABLE:
            with self.subTest(word=word):
                pr = Pretzel(word)
                before = count_link_components(pr)
                simplify_fully(pr)
                self.assertEqual(count_link_components(pr), before)

    def test_genus_does_not_increase(self):
        """Simplification can find a smaller Seifert surface, never a larger one."""
        for word, _ in SIMPLIFIABLE:
            with self.subTest(word=word):
                pr = Pretzel(word)
                before = compute_genus(pr)
                simplify_fully(pr)
                self.assertLessEqual(compute_genus(pr), before)


class TestSimplifierBookkeeping(unittest.TestCase):
    """Tests for step records, stats and verbose output."""

    def test_steps_account_for_length(self):
        """Test recorded removals explain the change in length."""
        word, expected = SIMPLIFIABLE[0]
        pr = Pretzel(word)
        simplifier = PretzelSimplifier()
        simplifier.simplify(pr)

        removed = 2 * simplifier.stats["cancellations"] + simplifier.stats["trims"]
        self.assertEqual(removed, len(word) - len(expected))
        self.assertEqual(simplifier.steps[0].before_length, len(word))
        self.assertEqual(simplifier.steps[-1].after_length, len(expected))

    def test_reset(self):
        """Test reset clears steps and stats."""
        simplifier = PretzelSimplifier()
        simplifier.simplify(Pretzel([(1, 1), (1, -1)]))
        self.assertTrue(simplifier.steps)

        simplifier.reset()
        self.assertEqual(simplifier.steps, [])
        self.assertTrue(all(v == 0 for v in simplifier.stats.values()))

    def test_verbose_prints_steps(self):
        """Test verbose mode prints each step."""
        out = io.StringIO()
        with redirect_stdout(out):
            PretzelSimplifier(verbose=True).simplify(Pretzel([(1, 1), (1, -1)]))
        self.assertIn("CANCELLATION", out.getvalue())

    def test_quiet_by_default(self):
        """Test nothing is printed by default."""
        out = io.StringIO()
        with redirect_stdout(out):
            PretzelSimplifier().simplify(Pretzel([(1, 1), (1, -1)]))
        self.assertEqual(out.getvalue(), "")


if __name__ == '__main__':
    unittest.main()

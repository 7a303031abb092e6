from unittest import TestCase

from mlspaces import ArithmeticOverflowError, Cardinality, Dimension
from mlspaces.core import MAX_FINITE_CARDINALITY


class TestCardinality(TestCase):
    def test_product(self):
        finite, infinite, null = Cardinality.finite, Cardinality.infinite, Cardinality.null
        card_tuples = [
            (finite(2), finite(3), finite(6)),
            (finite(1), finite(7), finite(7)),
            (finite(0), finite(7), finite(0)),
            (finite(4), infinite(), infinite()),
            (infinite(), infinite(), infinite()),
            (finite(0), infinite(), finite(0)),
            (null(), infinite(), null()),
            (null(), finite(3), null()),
            (null(), finite(0), null()),
        ]
        for left, right, expected in card_tuples:
            assert left * right == expected, "Expected {} * {} to equal {}".format(left, right, expected)
            assert right * left == expected, "Expected {} * {} to equal {}".format(right, left, expected)

    def test_sum(self):
        finite, infinite, null = Cardinality.finite, Cardinality.infinite, Cardinality.null
        card_tuples = [
            (finite(2), finite(3), finite(5)),
            (finite(0), finite(3), finite(3)),
            (finite(4), infinite(), infinite()),
            (null(), infinite(), infinite()),
            (null(), finite(3), finite(3)),
            (null(), finite(0), finite(0)),
            (null(), null(), null()),
        ]
        for left, right, expected in card_tuples:
            assert left + right == expected, "Expected {} + {} to equal {}".format(left, right, expected)
            assert right + left == expected, "Expected {} + {} to equal {}".format(right, left, expected)

    def test_overflow(self):
        big = Cardinality.finite(MAX_FINITE_CARDINALITY)
        with self.assertRaises(ArithmeticOverflowError):
            big * Cardinality.finite(2)
        with self.assertRaises(ArithmeticOverflowError):
            big + Cardinality.finite(1)
        with self.assertRaises(OverflowError):
            Cardinality.finite(MAX_FINITE_CARDINALITY + 1)
        assert big * Cardinality.finite(1) == big
        assert big * Cardinality.finite(0) == Cardinality.finite(0)

    def test_ordering(self):
        ordered = [Cardinality.null(), Cardinality.finite(0), Cardinality.finite(1), Cardinality.finite(100),
                   Cardinality.infinite()]
        for smaller, larger in zip(ordered[:-1], ordered[1:]):
            assert smaller < larger
            assert larger > smaller
            assert smaller != larger
        assert sorted(reversed(ordered)) == ordered

    def test_equality(self):
        assert Cardinality.finite(3) == Cardinality.finite(3)
        assert Cardinality.finite(0) != Cardinality.null()
        assert Cardinality.infinite() == Cardinality.infinite()
        assert len(set([Cardinality.finite(3), Cardinality.finite(3), Cardinality.null()])) == 2

    def test_bad_cardinality_calls(self):
        card_fns = [
            lambda: Cardinality.finite(-1),
            lambda: Cardinality.finite(1.5),
            lambda: Cardinality('countable'),
        ]
        for card_fn in card_fns:
            with self.assertRaises(AssertionError):
                card_fn()


class TestDimension(TestCase):
    def test_size(self):
        assert Dimension.scalar().size == 1
        assert Dimension.vector(4).size == 4
        assert Dimension.scalar().shape == ()
        assert Dimension.vector(4).shape == (4,)

    def test_concatenation(self):
        assert Dimension.scalar() + Dimension.scalar() == Dimension.vector(2)
        assert Dimension.vector(3) + Dimension.scalar() == Dimension.vector(4)
        assert Dimension.vector(3) + Dimension.vector(2) == Dimension.vector(5)

    def test_equality(self):
        assert Dimension.scalar() == Dimension.scalar()
        assert Dimension.scalar() != Dimension.vector(1)
        assert Dimension.vector(2) != Dimension.vector(3)

    def test_bad_dimension_calls(self):
        with self.assertRaises(AssertionError):
            Dimension.vector(0)
        with self.assertRaises(AssertionError):
            Dimension('matrix')

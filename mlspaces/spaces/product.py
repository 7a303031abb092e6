import itertools
from functools import reduce
from mlspaces.core import Cardinality, Dimension, ShapeMismatchError
from mlspaces.spaces.space import Space


class ProductSpace(Space):
    """
    A tuple (i.e., cartesian product) of simpler spaces.
    Elements are tuples holding one element of each sub-space, lists are promoted to tuples.

    The dimension of a product is always a vector whose length sums the flattened sizes of its sub-spaces.

    Example usage:
    self.observation_space = ProductSpace((DiscreteSpace(2), IntervalSpace(0., 1.)))
    self.action_space = ProductSpace.repeat(BinarySpace(), 4)
    """

    def __init__(self, spaces):
        self.spaces = tuple(spaces)
        for space in self.spaces:
            assert isinstance(space, Space), "Elements of the product must be instances of mlspaces.Space"
        if len(self.spaces) == 0:
            raise ShapeMismatchError('a product space needs at least one sub-space')

        # raises ArithmeticOverflowError when the product does not fit
        self.cardinality()

    @classmethod
    def repeat(cls, space, n):
        """Fixed-size array of n elements of the same space."""
        assert isinstance(n, int) and n > 0, 'the number of repetitions has to be a positive integer'
        return cls([space] * n)

    def extend(self, *spaces):
        """Return a new product with the given sub-spaces appended."""
        return ProductSpace(self.spaces + spaces)

    def cardinality(self):
        return reduce(lambda card, space: card * space.cardinality(), self.spaces, Cardinality.finite(1))

    def dimension(self):
        return Dimension.vector(sum([space.dimension().size for space in self.spaces]))

    def sample(self, generator=None):
        return tuple([space.sample(generator) for space in self.spaces])

    def contains(self, x):
        if isinstance(x, list):
            x = tuple(x)  # Promote list to tuple for contains check
        return isinstance(x, tuple) and len(x) == len(self.spaces) and all(
            space.contains(part) for (space, part) in zip(self.spaces, x))

    def clamp(self, x):
        return tuple([space.clamp(part) for (space, part) in zip(self.spaces, x)])

    def elements(self):
        if self.cardinality().is_empty():
            return iter(())
        return itertools.product(*[space.elements() for space in self.spaces])

    def __repr__(self):
        return "ProductSpace(" + ", ".join([str(s) for s in self.spaces]) + ")"

    def __getitem__(self, index):
        return self.spaces[index]

    def __len__(self):
        return len(self.spaces)

    def __eq__(self, other):
        return isinstance(other, ProductSpace) and self.spaces == other.spaces

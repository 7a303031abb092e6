import torch
from mlspaces.core import Cardinality, Dimension, EmptySpaceError
from mlspaces.spaces.space import Space


def _same_value(x, y):
    if isinstance(x, torch.Tensor) or isinstance(y, torch.Tensor):
        x = torch.as_tensor(x)
        y = torch.as_tensor(y)
        return x.shape == y.shape and bool(torch.all(x == y))
    return type(x) == type(y) and x == y


class SingletonSpace(Space):
    """
    A space holding exactly one value.

    Example usage:
    self.reward_space = SingletonSpace(0)
    """

    def __init__(self, value):
        self.value = value

    def cardinality(self):
        return Cardinality.finite(1)

    def dimension(self):
        return Dimension.scalar()

    def sample(self, generator=None):
        return self.value

    def contains(self, x):
        try:
            return _same_value(x, self.value)
        except (TypeError, ValueError, RuntimeError):  # values that cannot be compared
            return False

    def clamp(self, x):
        return self.value

    def elements(self):
        yield self.value

    def __repr__(self):
        return "SingletonSpace({!r})".format(self.value)

    def __eq__(self, other):
        return isinstance(other, SingletonSpace) and _same_value(self.value, other.value)


class NullSpace(Space):
    """The space without any element. Its cardinality is Null."""

    def cardinality(self):
        return Cardinality.null()

    def dimension(self):
        return Dimension.scalar()

    def sample(self, generator=None):
        raise EmptySpaceError('cannot sample from the null space')

    def contains(self, x):
        return False

    def clamp(self, x):
        raise EmptySpaceError('cannot clamp onto the null space')

    def elements(self):
        return iter(())

    def __repr__(self):
        return "NullSpace()"

    def __eq__(self, other):
        return isinstance(other, NullSpace)

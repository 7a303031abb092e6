import torch
from mlspaces.core import Cardinality, Dimension
from mlspaces.spaces.space import Space
from mlspaces.utils import sampling


class BinarySpace(Space):
    """
    The set {0, 1} of binary values.

    Elements are 0-d ``torch.bool`` tensors. Python bools and 0-d tensors holding 0 or 1 are accepted as members.

    Example Usage:

    >> space = BinarySpace()

    >> space.sample()

        tensor(True)

    """

    def __init__(self):
        self.dtype = torch.bool

    def cardinality(self):
        return Cardinality.finite(2)

    def dimension(self):
        return Dimension.scalar()

    def sample(self, generator=None):
        return torch.tensor(bool(sampling.randint(0, 2, generator=generator)), dtype=self.dtype)

    def contains(self, x):
        if isinstance(x, (bool, int)):
            return x in (0, 1)
        if isinstance(x, torch.Tensor) and x.shape == ():
            return bool((x == 0) | (x == 1))
        return False

    def clamp(self, x):
        return torch.as_tensor(x).bool()

    def elements(self):
        yield torch.tensor(False)
        yield torch.tensor(True)

    def __repr__(self):
        return "BinarySpace()"

    def __eq__(self, other):
        return isinstance(other, BinarySpace)

import torch
from mlspaces.core import Cardinality, Dimension, DuplicateLabelError, EmptySpaceError, InvalidBoundsError
from mlspaces.spaces.space import Space
from mlspaces.utils import sampling


class DiscreteSpace(Space):
    r"""A finite ordered set, either the integers of a range or a sequence of unique labels.

    Elements of an integer range are 0-d ``torch.int64`` tensors (plain ints are accepted by ``contains``),
    elements of a labelled space are the labels themselves.

    Example::

        >>> DiscreteSpace(2)  # {0, 1}
        >>> DiscreteSpace(range(-3, 4))  # {-3, ..., 3}
        >>> DiscreteSpace(labels=['left', 'right', 'noop'])

    """

    def __init__(self, n=None, labels=None):
        assert (n is None) != (labels is None), 'Use either DiscreteSpace(n) or DiscreteSpace(labels=[...])'
        if labels is not None:
            self.range = None
            self.labels = tuple(labels)
            self._index = {}
            for idx, label in enumerate(self.labels):
                if label in self._index:
                    raise DuplicateLabelError('label {!r} appears more than once in the discrete space'.format(label))
                self._index[label] = idx
        else:
            if isinstance(n, range):
                self.range = n
            else:
                assert n >= 0
                self.range = range(int(n))
            self.labels = None
            self._index = None

        # raises ArithmeticOverflowError for oversized ranges
        self.cardinality()
        info = torch.iinfo(torch.int64)
        if self.range is not None and self.n > 0 and not info.min <= self.low <= self.high <= info.max:
            raise InvalidBoundsError('{!r} has integers out of the range of torch.int64'.format(self.range))

    @property
    def n(self):
        if self.labels is not None:
            return len(self.labels)
        # len() is bounded by sys.maxsize, count by hand
        start, stop, step = self.range.start, self.range.stop, self.range.step
        if step > 0:
            return max(0, (stop - start + step - 1) // step)
        return max(0, (start - stop - step - 1) // -step)

    @property
    def low(self):
        """Smallest element of an integer range (None when labelled or empty)."""
        if self.range is None or self.n == 0:
            return None
        return min(self.range[0], self.range[-1])

    @property
    def high(self):
        """Largest element of an integer range (None when labelled or empty)."""
        if self.range is None or self.n == 0:
            return None
        return max(self.range[0], self.range[-1])

    def cardinality(self):
        return Cardinality.finite(self.n)

    def dimension(self):
        return Dimension.scalar()

    def element(self, index):
        """Return the element at position index of the ordered set."""
        if not 0 <= index < self.n:
            raise IndexError("index {} is out of {}".format(index, self))
        if self.labels is not None:
            return self.labels[index]
        return torch.tensor(self.range[index], dtype=torch.int64)

    def index(self, x):
        """Return the position of x in the ordered set."""
        if not self.contains(x):
            raise ValueError('{!r} is not in {}'.format(x, self))
        if self.labels is not None:
            return self._index[self._as_label(x)]
        return self.range.index(int(x))

    def sample(self, generator=None):
        if self.n == 0:
            raise EmptySpaceError('cannot sample from the empty space {}'.format(self))
        return self.element(sampling.randint(0, self.n, generator=generator))

    def _as_label(self, x):
        if isinstance(x, torch.Tensor) and x.shape == ():
            return x.item()
        return x

    def contains(self, x):
        if self.labels is not None:
            try:
                return self._as_label(x) in self._index
            except TypeError:  # unhashable
                return False
        if isinstance(x, int):
            as_int = x
        elif isinstance(x, torch.Tensor) and not x.dtype.is_floating_point and (x.shape == ()):  # integer or size 0
            as_int = int(x)
        else:
            return False
        return as_int in self.range

    def clamp(self, x):
        assert self.labels is None, 'labels have no order to clamp against'
        if self.n == 0:
            raise EmptySpaceError('cannot clamp onto the empty space {}'.format(self))
        if isinstance(x, torch.Tensor):
            x = x.item()
        # nearest point of the step grid of the range
        step = self.range.step
        idx = (2 * (int(round(x)) - self.range.start) + step) // (2 * step)
        idx = min(max(idx, 0), self.n - 1)
        return self.element(idx)

    def elements(self):
        for idx in range(self.n):
            yield self.element(idx)

    def __repr__(self):
        if self.labels is not None:
            return "DiscreteSpace(labels={!r})".format(list(self.labels))
        if self.range.start == 0 and self.range.step == 1:
            return "DiscreteSpace(%d)" % self.n
        return "DiscreteSpace({!r})".format(self.range)

    def __eq__(self, other):
        return isinstance(other, DiscreteSpace) and self.labels == other.labels and self.range == other.range

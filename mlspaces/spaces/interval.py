import math
import numbers
import warnings
import torch
from addict import Dict
from mlspaces.core import Cardinality, Dimension, EmptySpaceError, InvalidBoundsError
from mlspaces.spaces.space import Space
from mlspaces.utils import sampling


class IntervalSpace(Space):
    """
    A (possibly unbounded) interval of an ordered numeric type. Each side is either closed or open, giving
    intervals of the form [a, b], [a, b), (a, b], (a, b), [a, oo), (-oo, b] or (-oo, oo).
    Infinite sides are always open.

    Elements are 0-d tensors of ``dtype`` (plain Python numbers are accepted by ``contains``).

    * Continuous interval::
        >>> IntervalSpace(low=-1.0, high=2.0, right_closed=False)
        IntervalSpace([-1.0, 2.0), torch.float64)

    * Integer interval, bounds are normalized to the closest integers inside::
        >>> IntervalSpace(low=0, high=10, left_closed=False, dtype=torch.int64)
        IntervalSpace([1, 10], torch.int64)

    """

    @staticmethod
    def default_config():
        default_config = Dict()
        # fallback distributions for sides without bounds (uniform sampling is undefined there)
        default_config.normal_mean = 0.0
        default_config.normal_std = 1.0
        default_config.exponential_rate = 1.0
        # number of draws before giving up on reaching the inside of open sides
        default_config.max_rejections = 1000
        return default_config

    def __init__(self, low=-math.inf, high=math.inf, left_closed=True, right_closed=True, dtype=torch.float64,
                 config={}):
        assert dtype is not None, 'dtype must be explicitly provided. '
        assert dtype != torch.bool and not dtype.is_complex, 'dtype must be an ordered numeric type'
        self.dtype = dtype
        self.config = self.__class__.default_config()
        self.config.update(config)

        low = self._as_number(low)
        high = self._as_number(high)
        if math.isnan(low) or math.isnan(high):
            raise InvalidBoundsError('interval bounds cannot be NaN, got low={} and high={}'.format(low, high))
        if low > high:
            raise InvalidBoundsError('lower bound {} is greater than upper bound {}'.format(low, high))
        if low == math.inf or high == -math.inf:
            raise InvalidBoundsError('interval [{}, {}] contains no number'.format(low, high))

        if self.dtype.is_floating_point:
            # store the bounds as they are represented by dtype
            low, high = self._float_bound(low), self._float_bound(high)
        else:
            low, left_closed = self._integer_bound(low, left_closed, math.ceil, 1)
            high, right_closed = self._integer_bound(high, right_closed, math.floor, -1)
            if low <= high:
                info = torch.iinfo(self.dtype)
                for bound in (low, high):
                    if not math.isinf(bound) and not info.min <= bound <= info.max:
                        raise InvalidBoundsError(
                            'bound {} is out of the range [{}, {}] of {}'.format(bound, info.min, info.max, self.dtype))

        self.low = low
        self.high = high
        self.bounded_below = not math.isinf(self.low)
        self.bounded_above = not math.isinf(self.high)
        self.left_closed = bool(left_closed) and self.bounded_below
        self.right_closed = bool(right_closed) and self.bounded_above

        # raises ArithmeticOverflowError for oversized integer intervals
        self.cardinality()

    @staticmethod
    def _as_number(x):
        if isinstance(x, torch.Tensor):
            assert x.shape == (), 'bounds must be scalars'
            x = x.item()
        assert isinstance(x, numbers.Real) and not isinstance(x, bool), 'bounds must be real numbers'
        return x

    def _float_bound(self, bound):
        as_dtype = float(torch.tensor(float(bound), dtype=self.dtype))
        if math.isinf(as_dtype) and not math.isinf(bound):
            raise InvalidBoundsError('bound {} overflows {}'.format(bound, self.dtype))
        return as_dtype

    @staticmethod
    def _integer_bound(bound, closed, rounding, step):
        if math.isinf(bound):
            return float(bound), False
        integral = rounding(bound)
        if integral != bound:
            warnings.warn('bound {} of an integer interval is rounded to {}'.format(bound, integral))
        elif not closed:
            integral += step
        return int(integral), True

    def is_bounded(self, manner="both"):
        below = self.bounded_below
        above = self.bounded_above
        if manner == "both":
            return below and above
        elif manner == "below":
            return below
        elif manner == "above":
            return above
        else:
            raise ValueError("manner is not in {'below', 'above', 'both'}")

    def is_empty(self):
        if not self.dtype.is_floating_point:
            return self.low > self.high
        return self.low == self.high and not (self.left_closed and self.right_closed)

    def cardinality(self):
        if self.is_empty():
            return Cardinality.finite(0)
        if not self.dtype.is_floating_point:
            if not self.is_bounded():
                return Cardinality.infinite()
            return Cardinality.finite(self.high - self.low + 1)
        if self.low == self.high:
            return Cardinality.finite(1)
        return Cardinality.infinite()

    def dimension(self):
        return Dimension.scalar()

    def _sample_real(self, generator):
        """
        Samples a float according to the form of the interval:

        * [a, b] : uniform distribution
        * [a, oo) : shifted exponential distribution
        * (-oo, b] : shifted negative exponential distribution
        * (-oo, oo) : normal distribution
        """
        if self.is_bounded():
            return sampling.uniform(self.low, self.high, generator=generator)
        elif self.bounded_below:
            return self.low + sampling.exponential(self.config.exponential_rate, generator=generator)
        elif self.bounded_above:
            return self.high - sampling.exponential(self.config.exponential_rate, generator=generator)
        return sampling.normal(self.config.normal_mean, self.config.normal_std, generator=generator)

    def _sample_integer(self, generator):
        if self.is_bounded():
            return sampling.randint(self.low, self.high + 1, generator=generator)
        elif self.bounded_below:
            return self.low + math.floor(sampling.exponential(self.config.exponential_rate, generator=generator))
        elif self.bounded_above:
            return self.high - math.floor(sampling.exponential(self.config.exponential_rate, generator=generator))
        return math.floor(sampling.normal(self.config.normal_mean, self.config.normal_std, generator=generator))

    def sample(self, generator=None):
        if self.is_empty():
            raise EmptySpaceError('cannot sample from the empty space {}'.format(self))

        if not self.dtype.is_floating_point:  # integer
            info = torch.iinfo(self.dtype)
            # unbounded sides stop at the range of dtype
            x = min(max(self._sample_integer(generator), info.min), info.max)
            return torch.tensor(x, dtype=self.dtype)

        if self.low == self.high:
            return torch.tensor(self.low, dtype=self.dtype)

        # open sides and dtype rounding can land on an excluded bound: draw again
        for _ in range(self.config.max_rejections):
            x = torch.tensor(self._sample_real(generator), dtype=self.dtype)
            if self.contains(x):
                return x
        raise EmptySpaceError('no value of {} found strictly inside {}'.format(self.dtype, self))

    def contains(self, x):
        if isinstance(x, torch.Tensor):
            if x.shape != () or x.dtype == torch.bool or x.dtype.is_complex:
                return False
            x = x.item()
        elif isinstance(x, bool) or not isinstance(x, numbers.Real):
            return False
        if math.isnan(x) or math.isinf(x):
            return False
        if not self.dtype.is_floating_point:
            info = torch.iinfo(self.dtype)
            if x != math.floor(x) or not info.min <= x <= info.max:
                return False
        if x < self.low or (x == self.low and not self.left_closed):
            return False
        if x > self.high or (x == self.high and not self.right_closed):
            return False
        return True

    def clamp(self, x):
        if self.is_empty():
            raise EmptySpaceError('cannot clamp onto the empty space {}'.format(self))
        x = self._as_number(x)
        if math.isnan(x):
            raise ValueError('cannot clamp NaN onto {}'.format(self))

        if self.dtype.is_floating_point:
            x = torch.tensor(x, dtype=self.dtype)
            low = torch.tensor(self.low, dtype=self.dtype)
            high = torch.tensor(self.high, dtype=self.dtype)
            if x < low or (x == low and not self.left_closed):
                x = low if self.left_closed else torch.nextafter(low, high)
            if x > high or (x == high and not self.right_closed):
                x = high if self.right_closed else torch.nextafter(high, low)
            return x

        if math.isinf(x):
            x = self.high if x > 0 else self.low
            if math.isinf(x):
                raise ValueError('no integer of {} is closest to {}'.format(self, x))
        info = torch.iinfo(self.dtype)
        x = min(max(int(round(x)), self.low, info.min), self.high, info.max)
        return torch.tensor(x, dtype=self.dtype)

    def elements(self):
        if not self.cardinality().is_finite():
            return super(IntervalSpace, self).elements()
        if self.dtype.is_floating_point:
            return iter([torch.tensor(self.low, dtype=self.dtype)] if not self.is_empty() else [])
        return (torch.tensor(v, dtype=self.dtype) for v in range(self.low, self.high + 1))

    def __repr__(self):
        return "IntervalSpace({}{}, {}{}, {})".format('[' if self.left_closed else '(', self.low, self.high,
                                                      ']' if self.right_closed else ')', self.dtype)

    def __eq__(self, other):
        return isinstance(other, IntervalSpace) and self.dtype == other.dtype and self.low == other.low and \
               self.high == other.high and self.left_closed == other.left_closed and \
               self.right_closed == other.right_closed


class NaturalsSpace(IntervalSpace):
    """The set of natural numbers {0, 1, 2, ...}, sampled from a geometric distribution."""

    def __init__(self, config={}):
        IntervalSpace.__init__(self, low=0, high=math.inf, dtype=torch.int64, config=config)

    def __repr__(self):
        return "NaturalsSpace()"

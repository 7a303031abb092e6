from functools import total_ordering

# Largest finite count a Cardinality can hold (size of a 64 bits unsigned integer).
MAX_FINITE_CARDINALITY = 2 ** 64 - 1


class SpaceError(Exception):
    """Base of all errors raised by mlspaces."""
    pass


class InvalidBoundsError(SpaceError, ValueError):
    pass


class DuplicateLabelError(SpaceError, ValueError):
    pass


class ShapeMismatchError(SpaceError, ValueError):
    pass


class ArithmeticOverflowError(SpaceError, OverflowError):
    pass


class EmptySpaceError(SpaceError, ValueError):
    """Raised when an element is requested from a space that has none."""
    pass


@total_ordering
class Cardinality(object):
    """
    Size class of a space: ``Finite(n)``, ``Infinite`` or ``Null``.

    ``Null`` describes a space without any valid element, ``Finite(0)`` an empty but typed one.
    Cardinalities combine with ``*`` (product of spaces) and ``+`` (union of spaces):

        >>> Cardinality.finite(2) * Cardinality.finite(3)
        Finite(6)
        >>> Cardinality.finite(2) + Cardinality.infinite()
        Infinite
        >>> Cardinality.null() * Cardinality.infinite()
        Null

    They are ordered as Null < Finite(0) < Finite(1) < ... < Infinite. The order is only meant for diagnostics.
    """

    FINITE = 'finite'
    INFINITE = 'infinite'
    NULL = 'null'

    def __init__(self, kind, count=None):
        assert kind in (self.FINITE, self.INFINITE, self.NULL), 'unknown cardinality kind {!r}'.format(kind)
        if kind == self.FINITE:
            assert isinstance(count, int) and not isinstance(count, bool), 'finite cardinality needs an integer count'
            assert count >= 0, 'finite cardinality count has to be non-negative'
            if count > MAX_FINITE_CARDINALITY:
                raise ArithmeticOverflowError(
                    'cardinality {} exceeds the largest representable count {}'.format(count, MAX_FINITE_CARDINALITY))
        else:
            assert count is None, 'only finite cardinalities carry a count'
        self._kind = kind
        self._count = count

    @classmethod
    def finite(cls, count):
        return cls(cls.FINITE, count)

    @classmethod
    def infinite(cls):
        return cls(cls.INFINITE)

    @classmethod
    def null(cls):
        return cls(cls.NULL)

    @property
    def kind(self):
        return self._kind

    @property
    def count(self):
        """Number of elements, None unless the cardinality is finite."""
        return self._count

    def is_finite(self):
        return self._kind == self.FINITE

    def is_infinite(self):
        return self._kind == self.INFINITE

    def is_null(self):
        return self._kind == self.NULL

    def is_empty(self):
        """True for both Null and Finite(0)."""
        return self.is_null() or self._count == 0

    def _rank(self):
        if self.is_null():
            return (0, 0)
        elif self.is_finite():
            return (1, self._count)
        return (2, 0)

    def __mul__(self, other):
        if not isinstance(other, Cardinality):
            return NotImplemented
        if self.is_null() or other.is_null():
            return Cardinality.null()
        # an empty factor empties the whole product
        if self._count == 0 or other._count == 0:
            return Cardinality.finite(0)
        if self.is_infinite() or other.is_infinite():
            return Cardinality.infinite()
        return Cardinality.finite(self._count * other._count)

    def __add__(self, other):
        if not isinstance(other, Cardinality):
            return NotImplemented
        if self.is_null():
            return other
        if other.is_null():
            return self
        if self.is_infinite() or other.is_infinite():
            return Cardinality.infinite()
        return Cardinality.finite(self._count + other._count)

    def __eq__(self, other):
        return isinstance(other, Cardinality) and self._kind == other._kind and self._count == other._count

    def __lt__(self, other):
        if not isinstance(other, Cardinality):
            return NotImplemented
        return self._rank() < other._rank()

    def __hash__(self):
        return hash((self._kind, self._count))

    def __repr__(self):
        if self.is_finite():
            return "Finite({})".format(self._count)
        return "Infinite" if self.is_infinite() else "Null"


class Dimension(object):
    """
    Shape of an element of a space: ``Scalar`` or ``Vector(length)``.

    ``size`` is the length of the flattened element (1 for a scalar).
    Concatenating dimensions with ``+`` adds their sizes and always gives a vector.
    """

    SCALAR = 'scalar'
    VECTOR = 'vector'

    def __init__(self, kind, length=None):
        assert kind in (self.SCALAR, self.VECTOR), 'unknown dimension kind {!r}'.format(kind)
        if kind == self.VECTOR:
            assert isinstance(length, int) and length > 0, 'vector length has to be a positive integer'
        else:
            assert length is None, 'a scalar dimension has no length'
        self._kind = kind
        self._length = length

    @classmethod
    def scalar(cls):
        return cls(cls.SCALAR)

    @classmethod
    def vector(cls, length):
        return cls(cls.VECTOR, length)

    @property
    def kind(self):
        return self._kind

    @property
    def length(self):
        return self._length

    @property
    def size(self):
        return 1 if self.is_scalar() else self._length

    @property
    def shape(self):
        return () if self.is_scalar() else (self._length,)

    def is_scalar(self):
        return self._kind == self.SCALAR

    def __add__(self, other):
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension.vector(self.size + other.size)

    def __eq__(self, other):
        return isinstance(other, Dimension) and self._kind == other._kind and self._length == other._length

    def __hash__(self):
        return hash((self._kind, self._length))

    def __repr__(self):
        return "Scalar" if self.is_scalar() else "Vector({})".format(self._length)

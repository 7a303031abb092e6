import itertools
from functools import reduce
from addict import Dict
from mlspaces.core import Cardinality, DuplicateLabelError, EmptySpaceError, ShapeMismatchError
from mlspaces.spaces.space import Space
from mlspaces.utils import sampling


class UnionSpace(Space):
    """
    A tagged choice among simpler spaces. Elements are ``(tag, value)`` pairs where value belongs to the
    branch named by tag. All branches must share the same dimension.

    Example usage:
    self.action_space = UnionSpace([("move", IntervalSpace(-1., 1.)), ("wait", SingletonSpace(0.))])

    Example usage [keywords]:
    self.action_space = UnionSpace(move=IntervalSpace(-1., 1.), wait=SingletonSpace(0.))
    """

    def __init__(self, spaces=None, **spaces_kwargs):
        assert (spaces is None) or (
            not spaces_kwargs), 'Use either UnionSpace(spaces=[(tag, space), ...]) or UnionSpace(foo=x, bar=z)'
        if spaces is None:
            spaces = spaces_kwargs
        if isinstance(spaces, dict):
            spaces = list(spaces.items())

        self.spaces = Dict()
        for tag, space in spaces:
            assert isinstance(space, Space), 'Branches of the union should be instances of mlspaces.Space'
            if tag in self.spaces:
                raise DuplicateLabelError('tag {!r} appears more than once in the union space'.format(tag))
            self.spaces[tag] = space

        if len(self.spaces) == 0:
            raise ShapeMismatchError('a union space needs at least one branch')
        dimensions = set([space.dimension() for space in self.spaces.values()])
        if len(dimensions) > 1:
            raise ShapeMismatchError('branches of a union must share the same dimension, got {}'.format(
                ", ".join([str(tag) + ":" + str(s.dimension()) for tag, s in self.spaces.items()])))

        # raises ArithmeticOverflowError when the sum does not fit
        self.cardinality()

    def with_branch(self, tag, space):
        """Return a new union with an extra branch."""
        return UnionSpace(list(self.spaces.items()) + [(tag, space)])

    @property
    def tags(self):
        return list(self.spaces.keys())

    def cardinality(self):
        return reduce(lambda card, space: card + space.cardinality(), self.spaces.values(), Cardinality.null())

    def dimension(self):
        return next(iter(self.spaces.values())).dimension()

    def sample(self, generator=None):
        """
        Picks a branch then samples it. When every branch is finite, branches are weighted by their
        cardinality so that elements of the union are equally likely. Otherwise non-empty branches are
        equally likely.
        """
        tags = [tag for tag, space in self.spaces.items() if not space.cardinality().is_empty()]
        if len(tags) == 0:
            raise EmptySpaceError('cannot sample from {}: every branch is empty'.format(self))
        cards = [self.spaces[tag].cardinality() for tag in tags]
        if all([card.is_finite() for card in cards]):
            weights = [float(card.count) for card in cards]
        else:
            weights = [1.0] * len(tags)
        tag = tags[sampling.categorical(weights, generator=generator)]
        return (tag, self.spaces[tag].sample(generator))

    def contains(self, x):
        if isinstance(x, list):
            x = tuple(x)  # Promote list to tuple for contains check
        if not isinstance(x, tuple) or len(x) != 2:
            return False
        tag, value = x
        try:
            if tag not in self.spaces:
                return False
        except TypeError:  # unhashable
            return False
        return self.spaces[tag].contains(value)

    def tag_of(self, value):
        """Return the tag of the only branch containing the untagged value, None if zero or several do."""
        tags = [tag for tag, space in self.spaces.items() if space.contains(value)]
        return tags[0] if len(tags) == 1 else None

    def clamp(self, x):
        tag, value = x
        return (tag, self[tag].clamp(value))

    def elements(self):
        if self.cardinality().is_infinite():
            return super(UnionSpace, self).elements()
        return itertools.chain.from_iterable(
            [zip(itertools.repeat(tag), space.elements()) for tag, space in self.spaces.items()])

    def __getitem__(self, tag):
        if tag not in self.spaces:  # addict would hand back an empty Dict
            raise KeyError(tag)
        return self.spaces[tag]

    def __len__(self):
        return len(self.spaces)

    def __repr__(self):
        return "UnionSpace(" + ", ".join([str(k) + ":" + str(s) for k, s in self.spaces.items()]) + ")"

    def __eq__(self, other):
        return isinstance(other, UnionSpace) and list(self.spaces.items()) == list(other.spaces.items())

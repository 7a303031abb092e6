import torch
from mlspaces.core import EmptySpaceError
from mlspaces.spaces import BinarySpace
from mlspaces.spaces import DiscreteSpace
from mlspaces.spaces import IntervalSpace
from mlspaces.spaces import NullSpace
from mlspaces.spaces import ProductSpace
from mlspaces.spaces import SingletonSpace
from mlspaces.spaces import UnionSpace


def flatdim(space):
    """Return the number of dimensions a flattened equivalent of this space
    would have, i.e. the size of its Dimension.
    """
    return space.dimension().size


def flatten(space, x):
    """Flatten a data point from a space.

    This is useful when e.g. points from spaces must be passed to a neural
    network, which only understands flat arrays of floats.

    Accepts a space and a point from that space. Always returns a 1D float64
    tensor of length ``flatdim(space)``. Discrete points are encoded by their
    position in the ordered set and union points lose their tag.
    Raises ``NotImplementedError`` if the space is not defined in
    ``mlspaces.spaces``.
    """
    if isinstance(space, IntervalSpace):
        return torch.as_tensor(x, dtype=torch.float64).reshape(1)
    elif isinstance(space, DiscreteSpace):
        return torch.tensor([float(space.index(x))], dtype=torch.float64)
    elif isinstance(space, BinarySpace):
        return torch.tensor([float(bool(x))], dtype=torch.float64)
    elif isinstance(space, SingletonSpace):
        return torch.zeros(1, dtype=torch.float64)
    elif isinstance(space, NullSpace):
        raise EmptySpaceError('the null space has no point to flatten')
    elif isinstance(space, ProductSpace):
        return torch.cat(
            [flatten(s, x_part) for x_part, s in zip(x, space.spaces)])
    elif isinstance(space, UnionSpace):
        tag, value = x
        return flatten(space.spaces[tag], value)
    else:
        raise NotImplementedError


def unflatten(space, x):
    """Unflatten a data point from a space.

    This reverses the transformation applied by ``flatten()``. You must ensure
    that the ``space`` argument is the same as for the ``flatten()`` call.

    Accepts a space and a flattened point. Returns a point with a structure
    that matches the space. The tag of a union point is recovered from the
    only branch containing the unflattened value, ``ValueError`` is raised
    when zero or several branches do. Raises ``NotImplementedError`` if the
    space is not defined in ``mlspaces.spaces``.
    """
    x = torch.as_tensor(x, dtype=torch.float64)
    if isinstance(space, IntervalSpace):
        return x.reshape(()).type(space.dtype)
    elif isinstance(space, DiscreteSpace):
        index = float(x.reshape(()))
        if index != int(index):
            raise ValueError("{} is not the position of an element of {}".format(index, space))
        return space.element(int(index))
    elif isinstance(space, BinarySpace):
        if float(x.reshape(())) not in (0., 1.):
            raise ValueError("{} is not a flattened binary value".format(x))
        return x.reshape(()).bool()
    elif isinstance(space, SingletonSpace):
        return space.value
    elif isinstance(space, NullSpace):
        raise EmptySpaceError('the null space has no point to unflatten')
    elif isinstance(space, ProductSpace):
        dims = [flatdim(s) for s in space.spaces]
        list_flattened = torch.split(x, dims)
        list_unflattened = [
            unflatten(s, flattened)
            for flattened, s in zip(list_flattened, space.spaces)
        ]
        return tuple(list_unflattened)
    elif isinstance(space, UnionSpace):
        candidates = []
        for tag, s in space.spaces.items():
            try:
                value = unflatten(s, x)
            except (IndexError, ValueError):  # x is not a flattened point of this branch
                continue
            if s.contains(value):
                candidates.append((tag, value))
        if len(candidates) != 1:
            raise ValueError('{} branches of {} match the flattened point {}'.format(len(candidates), space, x))
        return candidates[0]
    else:
        raise NotImplementedError

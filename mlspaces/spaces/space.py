import warnings


class Space(object):
    """
    Defines the set of legal values a variable can take, e.g. the state or action domain of a decision problem.

    Every space reports its cardinality and dimension, tests membership and samples elements.
    Spaces are never modified after construction.
    """

    def cardinality(self):
        """Return the Cardinality of this space, recomputed from its structure."""
        raise NotImplementedError

    def dimension(self):
        """Return the Dimension of an element of this space."""
        raise NotImplementedError

    @property
    def shape(self):
        return self.dimension().shape

    def sample(self, generator=None):
        """
        Randomly sample an element of this space, drawing from the provided torch.Generator.
        Can be uniform or non-uniform sampling based on boundedness of space."""
        raise NotImplementedError

    def contains(self, x):
        """
        Return boolean specifying if x is a valid
        member of this space
        """
        raise NotImplementedError

    def clamp(self, x):
        """
        Return a valid clamped value of x inside space's bounds
        """
        raise NotImplementedError

    def project(self, x):
        """
        Return x if it belongs to the space, its clamped value otherwise
        """
        if not self.contains(x):
            x = self.clamp(x)
            warnings.warn('provided value is not in the space range and is therefore clamped')
        return x

    def elements(self):
        """
        Iterate over every element of a finite space, in a deterministic order
        """
        raise TypeError("{} is not a finite space and cannot be enumerated".format(self))

    def __contains__(self, x):
        return self.contains(x)

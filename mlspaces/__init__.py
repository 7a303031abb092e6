from mlspaces.core import ArithmeticOverflowError
from mlspaces.core import Cardinality
from mlspaces.core import Dimension
from mlspaces.core import DuplicateLabelError
from mlspaces.core import EmptySpaceError
from mlspaces.core import InvalidBoundsError
from mlspaces.core import ShapeMismatchError
from mlspaces.core import SpaceError
from mlspaces.spaces import Space

__all__ = ["Space", "Cardinality", "Dimension", "SpaceError", "InvalidBoundsError", "DuplicateLabelError",
           "ShapeMismatchError", "ArithmeticOverflowError", "EmptySpaceError"]

from mlspaces.spaces.space import Space
from mlspaces.spaces.binary import BinarySpace
from mlspaces.spaces.discrete import DiscreteSpace
from mlspaces.spaces.interval import IntervalSpace
from mlspaces.spaces.interval import NaturalsSpace
from mlspaces.spaces.singleton import NullSpace
from mlspaces.spaces.singleton import SingletonSpace
from mlspaces.spaces.product import ProductSpace
from mlspaces.spaces.union import UnionSpace
from mlspaces.spaces.utils import flatdim
from mlspaces.spaces.utils import flatten
from mlspaces.spaces.utils import unflatten
from mlspaces.spaces.serialization import from_dict
from mlspaces.spaces.serialization import from_json
from mlspaces.spaces.serialization import to_dict
from mlspaces.spaces.serialization import to_json

__all__ = ["Space", "BinarySpace", "DiscreteSpace", "IntervalSpace", "NaturalsSpace", "NullSpace", "SingletonSpace",
           "ProductSpace", "UnionSpace", "flatdim", "flatten", "unflatten", "to_dict", "from_dict", "to_json",
           "from_json"]

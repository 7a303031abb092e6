from mlspaces.utils.sampling import categorical
from mlspaces.utils.sampling import exponential
from mlspaces.utils.sampling import normal
from mlspaces.utils.sampling import randint
from mlspaces.utils.sampling import uniform

__all__ = ["randint", "uniform", "exponential", "normal", "categorical"]

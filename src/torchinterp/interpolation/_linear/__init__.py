from ._linear import Linear, LinearStrategy, linear
from ._linear_evaluate import linear_evaluate

__all__ = [
    "Linear",
    "LinearStrategy",
    "linear",
    "linear_evaluate",
]

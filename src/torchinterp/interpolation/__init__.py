"""Differentiable one-dimensional interpolation for PyTorch tensors.

Data of shape (n_points, *row_shape) is interpolated along its first axis;
every trailing index is an independent row sharing the coordinates.

Convenience Functions
---------------------
cubic_spline
    Create a cubic spline interpolator from data (fit + callable).
linear
    Create a piecewise linear interpolator from data (fit + callable).

Interpolator
------------
Interpolator1D
    Validates coordinates and data and evaluates a strategy.

Strategies
----------
CubicSpline
    Cubic spline strategy builder.
CubicSplineStrategy
    Fitted cubic spline coefficients.
cubic_spline_fit
    Fit a cubic spline to data points.
cubic_spline_evaluate
    Evaluate a cubic spline at query points.
Linear
    Piecewise linear strategy builder.
LinearStrategy
    Fitted linear strategy.
linear_evaluate
    Evaluate the linear interpolant at query points.
Strategy, StrategyBuilder
    Protocols implemented by every strategy.

Boundary Conditions
-------------------
NotAKnot, Natural, Clamped, Periodic, Individual
    Dataset level boundary conditions (default NotAKnot).
Mixed
    Separate left and right condition for one row.
FirstDerivative, SecondDerivative
    Prescribed derivative at one end of one row.

Linear Algebra
--------------
solve_tridiagonal
    Thomas algorithm, batched over the right-hand side.
solve_cyclic_tridiagonal
    Periodic tridiagonal systems.

Exceptions
----------
InterpolationError
    Base exception for interpolation operations.
BuilderError
    Base exception for construction failures.
NotEnoughDataError, MonotonicError, AxisLengthError, ShapeError,
DimensionError, BoundaryValueError
    Construction failures.
OutOfBoundsError
    Query point outside the domain.
"""

# Import base exceptions first
from ._interpolation_error import InterpolationError
from ._builder_error import BuilderError

# Import exception subclasses
from ._axis_length_error import AxisLengthError
from ._boundary_value_error import BoundaryValueError
from ._dimension_error import DimensionError
from ._monotonic_error import MonotonicError
from ._not_enough_data_error import NotEnoughDataError
from ._out_of_bounds_error import OutOfBoundsError
from ._shape_error import ShapeError

from ._boundary_condition import (
    BoundaryCondition,
    Clamped,
    FirstDerivative,
    Individual,
    Mixed,
    Natural,
    NotAKnot,
    Periodic,
    RowBoundary,
    SecondDerivative,
    SingleBoundary,
)
from ._cubic_spline import (
    CubicSpline,
    CubicSplineStrategy,
    cubic_spline,
    cubic_spline_evaluate,
    cubic_spline_fit,
)
from ._interpolator_1d import Interpolator1D
from ._linear import Linear, LinearStrategy, linear, linear_evaluate
from ._solve_cyclic_tridiagonal import solve_cyclic_tridiagonal
from ._solve_tridiagonal import solve_tridiagonal
from ._strategy import Strategy, StrategyBuilder

__all__ = [
    "AxisLengthError",
    "BoundaryCondition",
    "BoundaryValueError",
    "BuilderError",
    "Clamped",
    "CubicSpline",
    "CubicSplineStrategy",
    "DimensionError",
    "FirstDerivative",
    "Individual",
    "InterpolationError",
    "Interpolator1D",
    "Linear",
    "LinearStrategy",
    "Mixed",
    "MonotonicError",
    "Natural",
    "NotAKnot",
    "NotEnoughDataError",
    "OutOfBoundsError",
    "Periodic",
    "RowBoundary",
    "SecondDerivative",
    "ShapeError",
    "SingleBoundary",
    "Strategy",
    "StrategyBuilder",
    "cubic_spline",
    "cubic_spline_evaluate",
    "cubic_spline_fit",
    "linear",
    "linear_evaluate",
    "solve_cyclic_tridiagonal",
    "solve_tridiagonal",
]

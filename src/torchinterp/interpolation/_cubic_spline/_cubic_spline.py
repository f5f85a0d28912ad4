"""Cubic spline interpolation."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, ClassVar, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._boundary_condition import BoundaryCondition
from .._dimension_error import DimensionError
from ._cubic_spline_evaluate import cubic_spline_evaluate
from ._cubic_spline_fit import cubic_spline_fit

if TYPE_CHECKING:
    from .._interpolator_1d import Interpolator1D


@tensorclass
class CubicSplineStrategy:
    """Fitted cubic spline.

    Holds the segment coefficients only; knots and data stay with the
    :class:`Interpolator1D` the strategy was built for.

    Attributes
    ----------
    a : Tensor
        Left coefficients, shape (n_segments, *row_shape).
    b : Tensor
        Right coefficients, shape (n_segments, *row_shape).
        On segment i with ``t = (x - x[i]) / (x[i+1] - x[i])`` the spline is
        ``(1-t)*y[i] + t*y[i+1] + t*(1-t)*(a[i]*(1-t) + b[i]*t)``.
    extrapolate : str
        Extrapolation mode: "error", "extend", "periodic".
    """

    a: Tensor
    b: Tensor
    extrapolate: str

    def evaluate(self, interpolator: "Interpolator1D", t: Tensor) -> Tensor:
        return cubic_spline_evaluate(self, interpolator, t)

    def interpolate_into(
        self,
        interpolator: "Interpolator1D",
        target: Tensor,
        t: Tensor,
    ) -> None:
        expected = (*t.shape, *interpolator.row_shape)
        if tuple(target.shape) != expected:
            raise DimensionError(
                f"Target has wrong shape. Expected: {expected}, "
                f"got: {tuple(target.shape)}"
            )

        target.copy_(cubic_spline_evaluate(self, interpolator, t))


@dataclass
class CubicSpline:
    """Cubic spline strategy builder.

    Parameters
    ----------
    boundary : BoundaryCondition or str, optional
        Boundary condition. Default is not-a-knot. See
        :func:`cubic_spline_fit`.
    extrapolate : bool, optional
        Allow queries outside the knot range. Default is ``False``.

    Examples
    --------
    >>> import torch
    >>> y = torch.tensor([0.5, 0.0, 3.0], dtype=torch.float64)
    >>> x = torch.tensor([-1.0, 0.0, 3.0], dtype=torch.float64)
    >>> f = Interpolator1D(y, x, strategy=CubicSpline())
    >>> f(torch.linspace(-1.0, 3.0, 10, dtype=torch.float64))
    """

    boundary: Union[BoundaryCondition, str] = "not_a_knot"
    extrapolate: bool = False

    minimum_data_length: ClassVar[int] = 3

    def build(self, x: Tensor, y: Tensor) -> "CubicSplineStrategy":
        return cubic_spline_fit(
            x,
            y,
            boundary=self.boundary,
            extrapolate=self.extrapolate,
        )


def cubic_spline(
    x: torch.Tensor,
    y: torch.Tensor,
    boundary: Union[BoundaryCondition, str] = "not_a_knot",
    extrapolate: bool = False,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a cubic spline interpolator from data.

    This is a convenience function that fits a cubic spline and returns
    a callable that evaluates it.

    Parameters
    ----------
    x : Tensor
        Data x-coordinates. Must be strictly monotonically increasing.
    y : Tensor
        Data y-values, shape (len(x), *row_shape).
    boundary : BoundaryCondition or str, optional
        Boundary condition. One of:

        - ``"not_a_knot"``: Third derivative continuity at second and
          second-to-last knots (default).
        - ``"natural"``: Zero second derivative at endpoints.
        - ``"clamped"``: Zero first derivative at endpoints.
        - ``"periodic"``: Periodic boundary conditions, requires
          ``y[0] == y[-1]``.
        - a boundary object, e.g. ``Individual(...)`` for per-row and
          per-side conditions.

    extrapolate : bool, optional
        Whether out-of-domain queries are allowed. Periodic splines wrap
        the query into the domain, all others extend the boundary
        polynomial. Default is ``False``, which raises OutOfBoundsError.

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(0, 1, 10)
    >>> y = torch.sin(x * 2 * torch.pi)
    >>> f = cubic_spline(x, y)
    >>> f(torch.tensor([0.5]))  # Evaluate at x=0.5
    """
    from .._interpolator_1d import Interpolator1D

    interpolator = Interpolator1D(
        y,
        x,
        strategy=CubicSpline(boundary=boundary, extrapolate=extrapolate),
    )
    return interpolator.interpolate

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Union

import numpy
import torch
from torch import Tensor

from .._axis_length_error import AxisLengthError
from .._boundary_condition import (
    BoundaryCondition,
    FirstDerivative,
    Individual,
    InternalBoundary,
    Mixed,
    NotAKnot,
    Periodic,
    SecondDerivative,
    as_boundary_condition,
    as_internal_boundary,
    specialize_internal_boundary,
    specialize_single_boundary,
)
from .._boundary_value_error import BoundaryValueError
from .._not_enough_data_error import NotEnoughDataError
from .._shape_error import ShapeError
from .._solve_cyclic_tridiagonal import solve_cyclic_tridiagonal
from .._solve_tridiagonal import solve_tridiagonal

if TYPE_CHECKING:
    from ._cubic_spline import CubicSplineStrategy


def cubic_spline_fit(
    x: Tensor,
    y: Tensor,
    boundary: Union[BoundaryCondition, str] = "not_a_knot",
    extrapolate: bool = False,
) -> CubicSplineStrategy:
    """
    Fit a cubic spline to data points.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,). Must be strictly increasing.
    y : Tensor
        Values at knots, shape (n_points, *row_shape). Every trailing index
        is an independent row sharing the knots.
    boundary : BoundaryCondition or str
        Boundary condition: ``NotAKnot`` (default), ``Natural``, ``Clamped``,
        ``Periodic`` or ``Individual``, or the names ``"not_a_knot"``,
        ``"natural"``, ``"clamped"``, ``"periodic"``.
    extrapolate : bool
        Whether queries outside ``[x[0], x[-1]]`` are allowed. For a periodic
        boundary, out of range queries are wrapped into the domain,
        otherwise the boundary polynomial is extended.

    Returns
    -------
    CubicSplineStrategy
        Fitted coefficients, ``a`` and ``b`` of shape
        (n_points - 1, *row_shape).

    Raises
    ------
    NotEnoughDataError
        If there are fewer than 3 points.
    AxisLengthError
        If ``x`` and ``y`` have different lengths.
    ShapeError
        If an ``Individual`` boundary array does not have shape
        ``(1, *row_shape)``.
    BoundaryValueError
        If the boundary is periodic and ``y[0] != y[-1]``.

    Notes
    -----
    The spline is parametrised by its slopes ``k`` at the knots. On segment
    i with ``t = (x - x[i]) / dx[i]``

        s(x) = (1-t)*y[i] + t*y[i+1] + t*(1-t)*(a[i]*(1-t) + b[i]*t)

    with ``a[i] = k[i]*dx[i] - dy[i]`` and ``b[i] = dy[i] - k[i+1]*dx[i]``.
    The slopes are the solution of a tridiagonal (cyclic for periodic
    boundaries) linear system, see
    https://en.wikipedia.org/wiki/Spline_interpolation#Example
    """
    n = x.shape[0]

    if n < 3:
        raise NotEnoughDataError(
            f"Cubic spline needs at least 3 points, got {n}"
        )
    if y.shape[0] != n:
        raise AxisLengthError(
            f"Lengths of x ({n}) and interpolation axis of y "
            f"({y.shape[0]}) do not match"
        )

    boundary = as_boundary_condition(boundary)

    if isinstance(boundary, Individual):
        expected = (1, *y.shape[1:])
        if boundary.shape != expected:
            raise ShapeError(
                f"Boundary conditions array has wrong shape. "
                f"Expected: {expected}, got: {boundary.shape}"
            )
        k = _solve_for_slopes_individual(x, y, boundary.boundaries)
    else:
        k = _solve_for_slopes(x, y, boundary)

    if not torch.all(torch.isfinite(k)):
        warnings.warn(
            "Cubic spline slopes contain non-finite values; the data are "
            "non-finite or the boundary system is singular",
            RuntimeWarning,
            stacklevel=2,
        )

    dx = _expand(x[1:] - x[:-1], y)
    dy = y[1:] - y[:-1]

    a = k[:-1] * dx - dy
    b = dy - k[1:] * dx

    if not extrapolate:
        mode = "error"
    elif isinstance(boundary, Periodic):
        mode = "periodic"
    else:
        mode = "extend"

    # Lazy import to avoid circular dependency
    from ._cubic_spline import CubicSplineStrategy

    return CubicSplineStrategy(
        a=a,
        b=b,
        extrapolate=mode,
        batch_size=[],
    )


def _expand(v: Tensor, like: Tensor) -> Tensor:
    """(n,) -> (n, 1, ..., 1) so ``v`` broadcasts along the leading axis of ``like``."""
    return v.view(-1, *([1] * (like.dim() - 1)))


def _solve_for_slopes_individual(
    x: Tensor,
    y: Tensor,
    boundaries: numpy.ndarray,
) -> Tensor:
    """Solve row by row, recursing over the last axis of ``y``."""
    if y.dim() > 1:
        if y.shape[-1] == 0:
            return torch.zeros_like(y)
        return torch.stack(
            [
                _solve_for_slopes_individual(x, y[..., i], boundaries[..., i])
                for i in range(y.shape[-1])
            ],
            dim=-1,
        )

    # boundaries has shape (1,) after the shape check
    return _solve_for_slopes(x, y, as_internal_boundary(boundaries[0]))


def _solve_for_slopes(
    x: Tensor,
    y: Tensor,
    boundary: InternalBoundary,
) -> Tensor:
    """
    Solve ``A k = rhs`` for the slopes ``k``, one boundary for all rows.

    Returns a tensor shaped like ``y``.
    """
    n = x.shape[0]
    boundary = specialize_internal_boundary(boundary)

    if isinstance(boundary, Periodic):
        return _solve_for_slopes_periodic(x, y)

    # Specialization leaves only Periodic and Mixed
    assert isinstance(boundary, Mixed)

    dx = x[1:] - x[:-1]
    dy = y[1:] - y[:-1]
    slope = dy / _expand(dx, y)

    # Bands of A
    lower = torch.zeros(n, dtype=x.dtype, device=x.device)
    diag = torch.zeros(n, dtype=x.dtype, device=x.device)
    upper = torch.zeros(n, dtype=x.dtype, device=x.device)

    # Interior rows:
    # dx[i]*k[i-1] + 2*(dx[i-1]+dx[i])*k[i] + dx[i-1]*k[i+1]
    #     = 3*(dx[i]*slope[i-1] + dx[i-1]*slope[i])
    lower[1:-1] = dx[1:]
    diag[1:-1] = 2 * (dx[:-1] + dx[1:])
    upper[1:-1] = dx[:-1]

    rhs = torch.zeros_like(y)
    rhs[1:-1] = 3 * (
        _expand(dx[1:], y) * slope[:-1] + _expand(dx[:-1], y) * slope[1:]
    )

    if (
        n == 3
        and isinstance(boundary.left, NotAKnot)
        and isinstance(boundary.right, NotAKnot)
    ):
        # Both third derivative conditions collapse onto the middle knot:
        # the interpolant is the parabola through the three points.
        diag[0] = 1
        upper[0] = 1
        lower[1] = dx[1]
        diag[1] = 2 * (dx[0] + dx[1])
        upper[1] = dx[0]
        lower[2] = 1
        diag[2] = 1

        rhs[0] = 2 * slope[0]
        rhs[1] = 3 * (slope[1] * dx[0] + slope[0] * dx[1])
        rhs[2] = 2 * slope[1]

        return solve_tridiagonal(lower, diag, upper, rhs)

    _apply_left_boundary(boundary.left, x, dx, dy, slope, diag, upper, rhs)
    _apply_right_boundary(
        boundary.right, x, dx, dy, slope, lower, diag, rhs
    )

    return solve_tridiagonal(lower, diag, upper, rhs)


def _apply_left_boundary(boundary, x, dx, dy, slope, diag, upper, rhs):
    boundary = specialize_single_boundary(boundary)

    if isinstance(boundary, NotAKnot):
        # Equal third derivative on the first two segments
        d = x[2] - x[0]
        diag[0] = dx[1]
        upper[0] = d
        rhs[0] = (
            (dx[0] + 2 * d) * dx[1] * slope[0] + dx[0] ** 2 * slope[1]
        ) / d
    elif isinstance(boundary, FirstDerivative):
        diag[0] = 1
        upper[0] = 0
        rhs[0] = boundary.value
    elif isinstance(boundary, SecondDerivative):
        diag[0] = 2 * dx[0]
        upper[0] = dx[0]
        rhs[0] = 3 * dy[0] - boundary.value * dx[0] ** 2 / 2
    else:
        raise AssertionError(f"unspecialized boundary {boundary!r}")


def _apply_right_boundary(boundary, x, dx, dy, slope, lower, diag, rhs):
    boundary = specialize_single_boundary(boundary)

    if isinstance(boundary, NotAKnot):
        # Equal third derivative on the last two segments
        d = x[-1] - x[-3]
        diag[-1] = dx[-2]
        lower[-1] = d
        rhs[-1] = (
            dx[-1] ** 2 * slope[-2] + (2 * d + dx[-1]) * dx[-2] * slope[-1]
        ) / d
    elif isinstance(boundary, FirstDerivative):
        diag[-1] = 1
        lower[-1] = 0
        rhs[-1] = boundary.value
    elif isinstance(boundary, SecondDerivative):
        diag[-1] = 2 * dx[-1]
        lower[-1] = dx[-1]
        rhs[-1] = 3 * dy[-1] + boundary.value * dx[-1] ** 2 / 2
    else:
        raise AssertionError(f"unspecialized boundary {boundary!r}")


def _solve_for_slopes_periodic(x: Tensor, y: Tensor) -> Tensor:
    if not torch.equal(y[0], y[-1]):
        raise BoundaryValueError(
            f"For periodic boundary condition the first and last value "
            f"must be equal. First: {y[0].tolist()}, last: {y[-1].tolist()}"
        )

    n = x.shape[0]
    dx = x[1:] - x[:-1]
    slope = (y[1:] - y[:-1]) / _expand(dx, y)

    if n == 3:
        # Closed form: the slope is equal at every knot
        k = (slope[0] / dx[0] + slope[1] / dx[1]) / (1 / dx[0] + 1 / dx[1])
        return k.unsqueeze(0).expand_as(y).clone()

    # Unknowns k[0], ..., k[n-2]; k[n-1] == k[0]. Row i couples k[i-1] and
    # k[i+1] cyclically, dx[-1] and slope[-1] being the last segment.
    dx_prev = torch.roll(dx, 1, dims=0)
    slope_prev = torch.roll(slope, 1, dims=0)

    lower = dx
    diag = 2 * (dx_prev + dx)
    upper = dx_prev
    rhs = 3 * (_expand(dx, y) * slope_prev + _expand(dx_prev, y) * slope)

    k = solve_cyclic_tridiagonal(lower, diag, upper, rhs)

    return torch.cat([k, k[:1]], dim=0)

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._out_of_bounds_error import OutOfBoundsError

if TYPE_CHECKING:
    from .._interpolator_1d import Interpolator1D
    from ._cubic_spline import CubicSplineStrategy


def cubic_spline_evaluate(
    spline: CubicSplineStrategy,
    interpolator: Interpolator1D,
    t: Tensor,
) -> Tensor:
    """
    Evaluate a cubic spline at query points.

    Parameters
    ----------
    spline : CubicSplineStrategy
        Fitted coefficients from cubic_spline_fit.
    interpolator : Interpolator1D
        The interpolator holding the knots and data the spline was fitted
        to.
    t : Tensor
        Query points, shape (*query_shape) or scalar.

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape, *row_shape).

    Raises
    ------
    OutOfBoundsError
        If any query point is outside the spline domain and
        spline.extrapolate == 'error'.
    """
    knots = interpolator.x
    extrapolate = spline.extrapolate

    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = t.flatten()

    in_range = interpolator.is_in_range(t_flat)

    if extrapolate == "error":
        if not torch.all(in_range):
            outside = t_flat[~in_range]
            raise OutOfBoundsError(
                f"x = {outside[0].item()} is not in range "
                f"[{knots[0].item()}, {knots[-1].item()}]"
                + (
                    f" ({outside.numel()} query points outside)"
                    if outside.numel() > 1
                    else ""
                )
            )
    elif extrapolate == "periodic":
        x0 = knots[0]
        period = knots[-1] - x0
        # torch.remainder takes the sign of the divisor, so the wrapped
        # value is always in [x0, x0 + period)
        wrapped = torch.remainder(t_flat - x0, period) + x0
        t_flat = torch.where(in_range, t_flat, wrapped)

    # Out of range queries in "extend" mode land in the first or last
    # segment, which extends the boundary polynomial.
    segment_idx = interpolator.index_left_of(t_flat)

    x_left, y_left = interpolator.index_point(segment_idx)
    x_right, y_right = interpolator.index_point(segment_idx + 1)
    a = spline.a[segment_idx]
    b = spline.b[segment_idx]

    u = (t_flat - x_left) / (x_right - x_left)

    row_shape = y_left.shape[1:]
    if row_shape:
        u = u.view(-1, *([1] * len(row_shape)))

    one_minus_u = 1 - u

    y = (
        one_minus_u * y_left
        + u * y_right
        + u * one_minus_u * (a * one_minus_u + b * u)
    )

    y = y.view(*query_shape, *row_shape)

    if is_scalar:
        y = y.squeeze(0)

    return y

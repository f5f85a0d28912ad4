from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._out_of_bounds_error import OutOfBoundsError

if TYPE_CHECKING:
    from .._interpolator_1d import Interpolator1D
    from ._linear import LinearStrategy


def linear_evaluate(
    strategy: LinearStrategy,
    interpolator: Interpolator1D,
    t: Tensor,
) -> Tensor:
    """
    Evaluate the piecewise linear interpolant at query points.

    Parameters
    ----------
    strategy : LinearStrategy
        Fitted linear strategy.
    interpolator : Interpolator1D
        The interpolator holding the knots and data.
    t : Tensor
        Query points, shape (*query_shape) or scalar.

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape, *row_shape).

    Raises
    ------
    OutOfBoundsError
        If any query point is outside the domain and
        strategy.extrapolate == 'error'.
    """
    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = t.flatten()

    if strategy.extrapolate == "error":
        in_range = interpolator.is_in_range(t_flat)
        if not torch.all(in_range):
            knots = interpolator.x
            raise OutOfBoundsError(
                f"x = {t_flat[~in_range][0].item()} is not in range "
                f"[{knots[0].item()}, {knots[-1].item()}]"
            )

    idx = interpolator.index_left_of(t_flat)
    x0, y0 = interpolator.index_point(idx)
    x1, y1 = interpolator.index_point(idx + 1)

    alpha = (t_flat - x0) / (x1 - x0)

    row_shape = y0.shape[1:]
    for _ in range(len(row_shape)):
        alpha = alpha.unsqueeze(-1)

    y = (1 - alpha) * y0 + alpha * y1

    y = y.view(*query_shape, *row_shape)

    if is_scalar:
        y = y.squeeze(0)

    return y

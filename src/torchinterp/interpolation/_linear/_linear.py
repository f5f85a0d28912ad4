"""Piecewise linear interpolation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, ClassVar

import torch
from torch import Tensor

from .._dimension_error import DimensionError
from ._linear_evaluate import linear_evaluate

if TYPE_CHECKING:
    from .._interpolator_1d import Interpolator1D


@dataclass
class LinearStrategy:
    """Fitted linear strategy. Nothing is precomputed.

    Attributes
    ----------
    extrapolate : str
        Extrapolation mode: "error" or "extend".
    """

    extrapolate: str

    def evaluate(self, interpolator: Interpolator1D, t: Tensor) -> Tensor:
        return linear_evaluate(self, interpolator, t)

    def interpolate_into(
        self,
        interpolator: Interpolator1D,
        target: Tensor,
        t: Tensor,
    ) -> None:
        expected = (*t.shape, *interpolator.row_shape)
        if tuple(target.shape) != expected:
            raise DimensionError(
                f"Target has wrong shape. Expected: {expected}, "
                f"got: {tuple(target.shape)}"
            )

        target.copy_(linear_evaluate(self, interpolator, t))


@dataclass
class Linear:
    """Linear strategy builder.

    Parameters
    ----------
    extrapolate : bool, optional
        Extend the first and last segment beyond the knot range.
        Default is ``False``.
    """

    extrapolate: bool = False

    minimum_data_length: ClassVar[int] = 2

    def build(self, x: Tensor, y: Tensor) -> LinearStrategy:
        return LinearStrategy(
            extrapolate="extend" if self.extrapolate else "error"
        )


def linear(
    x: torch.Tensor,
    y: torch.Tensor,
    extrapolate: bool = False,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a piecewise linear interpolator from data.

    Parameters
    ----------
    x : Tensor
        Data x-coordinates. Must be strictly monotonically increasing.
    y : Tensor
        Data y-values, shape (len(x), *row_shape).
    extrapolate : bool, optional
        Whether out-of-domain queries extend the boundary segments.
        Default is ``False``, which raises OutOfBoundsError.

    Returns
    -------
    Callable[[Tensor], Tensor]
        Function that evaluates the interpolant at given points.
    """
    from .._interpolator_1d import Interpolator1D

    interpolator = Interpolator1D(
        y, x, strategy=Linear(extrapolate=extrapolate)
    )
    return interpolator.interpolate

"""One-dimensional interpolation of n-dimensional data."""

from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from ._axis_length_error import AxisLengthError
from ._dimension_error import DimensionError
from ._linear import Linear
from ._monotonic_error import MonotonicError
from ._not_enough_data_error import NotEnoughDataError
from ._strategy import Strategy, StrategyBuilder


class Interpolator1D:
    """
    Interpolate data along its first axis.

    Every trailing index of ``y`` is an independent row that shares the
    coordinates ``x``.

    Parameters
    ----------
    y : Tensor
        Data, shape (n_points, *row_shape). Integer data is converted to the
        default floating point dtype.
    x : Tensor, optional
        Coordinates, shape (n_points,), strictly increasing. Cast to the
        dtype and device of ``y``. Defaults to ``arange(n_points)``.
    strategy : StrategyBuilder, optional
        Interpolation algorithm, e.g. :class:`Linear` (default) or
        :class:`CubicSpline`.

    Raises
    ------
    DimensionError
        If ``y`` is 0-dimensional or ``x`` is not 1-dimensional.
    AxisLengthError
        If ``len(x) != y.shape[0]``.
    NotEnoughDataError
        If there are fewer points than the strategy needs.
    MonotonicError
        If ``x`` is not strictly increasing.

    Examples
    --------
    >>> import torch
    >>> y = torch.tensor([[0.0, 1.0], [1.0, 3.0], [4.0, 2.0]])
    >>> f = Interpolator1D(y, torch.tensor([0.0, 1.0, 2.0]))
    >>> f(torch.tensor(0.5))
    tensor([0.5000, 2.0000])
    """

    def __init__(
        self,
        y: Tensor,
        x: Optional[Tensor] = None,
        strategy: Optional[StrategyBuilder] = None,
    ):
        y = torch.as_tensor(y)
        if not y.is_floating_point():
            y = y.to(torch.get_default_dtype())

        if y.dim() == 0:
            raise DimensionError(
                "Data must have at least one dimension, got a scalar"
            )

        if x is None:
            x = torch.arange(y.shape[0], dtype=y.dtype, device=y.device)
        else:
            x = torch.as_tensor(x, dtype=y.dtype, device=y.device)

        if x.dim() != 1:
            raise DimensionError(
                f"Coordinates must be one-dimensional, got shape "
                f"{tuple(x.shape)}"
            )

        if x.shape[0] != y.shape[0]:
            raise AxisLengthError(
                f"Lengths of x ({x.shape[0]}) and interpolation axis of y "
                f"({y.shape[0]}) do not match"
            )

        if strategy is None:
            strategy = Linear()

        if x.shape[0] < strategy.minimum_data_length:
            raise NotEnoughDataError(
                f"{type(strategy).__name__} needs at least "
                f"{strategy.minimum_data_length} points, got {x.shape[0]}"
            )

        if not torch.all(x[1:] > x[:-1]):
            raise MonotonicError("Values in x must be strictly increasing")

        self.x = x
        self.y = y
        self.strategy: Strategy = strategy.build(x, y)

    def __len__(self) -> int:
        return self.x.shape[0]

    @property
    def row_shape(self) -> torch.Size:
        return self.y.shape[1:]

    def is_in_range(self, t: Tensor) -> Tensor:
        """Element-wise ``x[0] <= t <= x[-1]``."""
        return (t >= self.x[0]) & (t <= self.x[-1])

    def index_left_of(self, t: Tensor) -> Tensor:
        """
        Index ``i`` of the segment ``[x[i], x[i+1]]`` holding each query.

        Queries outside the domain get the index of the nearest boundary
        segment, so the result is always in ``[0, len(x) - 2]``.
        """
        idx = torch.searchsorted(
            self.x, t.reshape(-1).contiguous(), right=True
        ).reshape(t.shape)
        return torch.clamp(idx - 1, 0, self.x.shape[0] - 2)

    def index_point(self, i: Union[int, Tensor]) -> Tuple[Tensor, Tensor]:
        """Coordinate and data row(s) at index ``i``."""
        return self.x[i], self.y[i]

    def _as_query(self, t: Union[float, Tensor]) -> Tensor:
        return torch.as_tensor(t, dtype=self.x.dtype, device=self.x.device)

    def interpolate(self, t: Union[float, Tensor]) -> Tensor:
        """
        Interpolate at query point(s).

        Parameters
        ----------
        t : float or Tensor
            Query points, any shape.

        Returns
        -------
        Tensor
            Values, shape (*t.shape, *row_shape).

        Raises
        ------
        OutOfBoundsError
            If a query is outside ``[x[0], x[-1]]`` and the strategy does
            not extrapolate.
        """
        return self.strategy.evaluate(self, self._as_query(t))

    __call__ = interpolate

    def interpolate_into(
        self,
        target: Tensor,
        t: Union[float, Tensor],
    ) -> Tensor:
        """
        Interpolate at query point(s), writing into ``target``.

        ``target`` must have shape (*t.shape, *row_shape). It is returned
        for convenience.

        Raises
        ------
        DimensionError
            If ``target`` has a different shape.
        OutOfBoundsError
            If a query is outside ``[x[0], x[-1]]`` and the strategy does
            not extrapolate.
        """
        self.strategy.interpolate_into(self, target, self._as_query(t))
        return target

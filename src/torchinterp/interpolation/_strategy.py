"""Interfaces between :class:`Interpolator1D` and interpolation algorithms.

An algorithm is split into a builder, which carries the user configuration
and fits the data once, and the fitted strategy it returns, which is only
read afterwards. The fitted state is specific to the algorithm and opaque to
the interpolator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol

from torch import Tensor

if TYPE_CHECKING:
    from ._interpolator_1d import Interpolator1D


class Strategy(Protocol):
    """A fitted interpolation algorithm."""

    def evaluate(self, interpolator: Interpolator1D, t: Tensor) -> Tensor:
        """Interpolate at ``t``, returning shape (*t.shape, *row_shape)."""
        ...

    def interpolate_into(
        self,
        interpolator: Interpolator1D,
        target: Tensor,
        t: Tensor,
    ) -> None:
        """Interpolate at ``t`` and write the result into ``target``."""
        ...


class StrategyBuilder(Protocol):
    """Configuration of an interpolation algorithm.

    ``build`` is called once by :class:`Interpolator1D` after it validated
    the knots and data. The knots are strictly increasing and their number
    is at least ``minimum_data_length``.
    """

    minimum_data_length: ClassVar[int]

    def build(self, x: Tensor, y: Tensor) -> Strategy: ...

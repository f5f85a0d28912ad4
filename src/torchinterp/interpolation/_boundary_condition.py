"""Boundary conditions for cubic spline interpolation.

Boundary conditions are organised in three levels:

- dataset level (:data:`BoundaryCondition`): applies to every row of the data,
- row level (:data:`RowBoundary`): applies to one row, used with
  :class:`Individual`,
- single level (:data:`SingleBoundary`): applies to one end of one row, used
  with :class:`Mixed`.

The default at every level is :class:`NotAKnot`.

=================  =======  ===  ======
Variant            dataset  row  single
=================  =======  ===  ======
NotAKnot           yes      yes  yes
Natural            yes      yes  yes
Clamped            yes      yes  yes
Periodic           yes      no   no
Individual         yes      no   no
Mixed              no       yes  no
FirstDerivative    no       no   yes
SecondDerivative   no       no   yes
=================  =======  ===  ======

``Natural`` is the same as ``SecondDerivative(0.0)`` and ``Clamped`` the same
as ``FirstDerivative(0.0)``. Periodicity couples both ends of every row, so it
can only be requested for the whole dataset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

import numpy
from torch import Tensor


@dataclass(frozen=True)
class NotAKnot:
    """The first and second segment at a curve end are the same polynomial."""


@dataclass(frozen=True)
class Natural:
    """Zero second derivative at the curve end."""


@dataclass(frozen=True)
class Clamped:
    """Zero first derivative at the curve end."""


@dataclass(frozen=True)
class Periodic:
    """The interpolated function repeats with period ``x[-1] - x[0]``.

    The first and last data value must be equal.
    """


@dataclass(frozen=True)
class FirstDerivative:
    """Prescribed first derivative at one curve end."""

    value: Union[float, Tensor]


@dataclass(frozen=True)
class SecondDerivative:
    """Prescribed second derivative at one curve end."""

    value: Union[float, Tensor]


@dataclass(frozen=True)
class Mixed:
    """Separate conditions for the left and right end of a row.

    Parameters
    ----------
    left, right : SingleBoundary
        One of NotAKnot, Natural, Clamped, FirstDerivative or
        SecondDerivative.
    """

    left: SingleBoundary = NotAKnot()
    right: SingleBoundary = NotAKnot()

    def __post_init__(self):
        for side, boundary in (("left", self.left), ("right", self.right)):
            if not isinstance(boundary, _SINGLE_BOUNDARY_TYPES):
                raise TypeError(
                    f"{side} boundary must be one of "
                    f"{_type_names(_SINGLE_BOUNDARY_TYPES)}, got {boundary!r}"
                )


@dataclass(frozen=True, eq=False)
class Individual:
    """A separate row boundary for every row of the data.

    Parameters
    ----------
    boundaries : array_like of RowBoundary
        Nested sequence (or object array) of row boundaries. Its shape must
        be the data shape with the interpolation axis collapsed to 1, i.e.
        ``(1, *y.shape[1:])``.

    Examples
    --------
    First data column natural, second column not-a-knot on the left and
    with a first derivative of 0.5 on the right:

    >>> Individual(
    ...     [[Natural(), Mixed(left=NotAKnot(), right=FirstDerivative(0.5))]]
    ... )
    """

    boundaries: numpy.ndarray

    def __post_init__(self):
        boundaries = _as_object_array(self.boundaries)
        for boundary in boundaries.flat:
            if not isinstance(boundary, _ROW_BOUNDARY_TYPES):
                raise TypeError(
                    f"row boundaries must be one of "
                    f"{_type_names(_ROW_BOUNDARY_TYPES)}, got {boundary!r}"
                )
        object.__setattr__(self, "boundaries", boundaries)

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self.boundaries.shape)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Individual):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            a == b for a, b in zip(self.boundaries.flat, other.boundaries.flat)
        )


SingleBoundary = Union[
    NotAKnot, Natural, Clamped, FirstDerivative, SecondDerivative
]
RowBoundary = Union[NotAKnot, Natural, Clamped, Mixed]
InternalBoundary = Union[NotAKnot, Natural, Clamped, Periodic, Mixed]
BoundaryCondition = Union[NotAKnot, Natural, Clamped, Periodic, Individual]

_SINGLE_BOUNDARY_TYPES = (
    NotAKnot,
    Natural,
    Clamped,
    FirstDerivative,
    SecondDerivative,
)
_ROW_BOUNDARY_TYPES = (NotAKnot, Natural, Clamped, Mixed)
_BOUNDARY_CONDITION_TYPES = (NotAKnot, Natural, Clamped, Periodic, Individual)

_BOUNDARY_NAMES = {
    "not_a_knot": NotAKnot,
    "natural": Natural,
    "clamped": Clamped,
    "periodic": Periodic,
}


def _type_names(types: tuple[type, ...]) -> str:
    return ", ".join(t.__name__ for t in types)


def _as_object_array(boundaries: Any) -> numpy.ndarray:
    if isinstance(boundaries, numpy.ndarray) and boundaries.dtype == object:
        return boundaries
    return numpy.asarray(boundaries, dtype=object)


def as_boundary_condition(
    boundary: Union[BoundaryCondition, str],
) -> BoundaryCondition:
    """
    Convert a dataset level boundary specification to a variant instance.

    Parameters
    ----------
    boundary : BoundaryCondition or str
        A boundary variant or one of ``"not_a_knot"``, ``"natural"``,
        ``"clamped"``, ``"periodic"``.

    Returns
    -------
    BoundaryCondition
        The boundary condition instance.

    Raises
    ------
    ValueError
        If the string is not a known boundary condition name.
    TypeError
        If the object is not a dataset level boundary condition.
    """
    if isinstance(boundary, str):
        try:
            return _BOUNDARY_NAMES[boundary]()
        except KeyError:
            raise ValueError(
                f"Unknown boundary condition: {boundary}. Expected one of "
                f"{', '.join(_BOUNDARY_NAMES)}"
            ) from None

    if isinstance(boundary, type) and issubclass(
        boundary, (NotAKnot, Natural, Clamped, Periodic)
    ):
        return boundary()

    if not isinstance(boundary, _BOUNDARY_CONDITION_TYPES):
        raise TypeError(
            f"boundary must be one of "
            f"{_type_names(_BOUNDARY_CONDITION_TYPES)} or a string, "
            f"got {boundary!r}"
        )

    return boundary


def as_internal_boundary(boundary: RowBoundary) -> InternalBoundary:
    """Lift a row boundary (or a uniform dataset boundary) to the internal level."""
    if isinstance(boundary, (NotAKnot, Natural, Clamped, Periodic, Mixed)):
        return boundary

    raise TypeError(
        f"{boundary!r} can not be used as the boundary of a single row"
    )


def specialize_single_boundary(boundary: SingleBoundary) -> SingleBoundary:
    """
    Rewrite the named single boundaries into derivative form.

    ``Natural`` becomes ``SecondDerivative(0.0)`` and ``Clamped`` becomes
    ``FirstDerivative(0.0)``; every other boundary is returned unchanged.
    """
    if isinstance(boundary, Natural):
        return SecondDerivative(0.0)
    if isinstance(boundary, Clamped):
        return FirstDerivative(0.0)
    return boundary


def specialize_internal_boundary(boundary: InternalBoundary) -> InternalBoundary:
    """
    Rewrite a uniform boundary into ``Mixed`` with identical sides.

    After specialization only ``Periodic`` and ``Mixed`` remain, which lets
    the system assembly treat dataset wide and per-side conditions alike.
    """
    if isinstance(boundary, NotAKnot):
        return Mixed(left=NotAKnot(), right=NotAKnot())
    if isinstance(boundary, Natural):
        return Mixed(left=Natural(), right=Natural())
    if isinstance(boundary, Clamped):
        return Mixed(left=Clamped(), right=Clamped())
    return boundary

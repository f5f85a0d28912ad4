from ._interpolation_error import InterpolationError


class OutOfBoundsError(InterpolationError):
    """Raised when a query point is outside the domain and extrapolation is off."""

    pass

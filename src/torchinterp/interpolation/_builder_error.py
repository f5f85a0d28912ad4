from ._interpolation_error import InterpolationError


class BuilderError(InterpolationError):
    """Raised when an interpolator or strategy cannot be constructed.

    Build-time errors are fatal to the construction attempt: no partially
    fitted strategy is returned.
    """

    pass

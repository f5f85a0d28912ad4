from ._builder_error import BuilderError


class MonotonicError(BuilderError):
    """Raised when the interpolation axis is not strictly increasing."""

    pass

from ._builder_error import BuilderError


class AxisLengthError(BuilderError):
    """Raised when the coordinate and data axis lengths differ."""

    pass

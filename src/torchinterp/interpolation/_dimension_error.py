from ._builder_error import BuilderError


class DimensionError(BuilderError):
    """Raised when coordinates or data have an unsupported number of dimensions."""

    pass

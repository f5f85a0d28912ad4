from ._builder_error import BuilderError


class ShapeError(BuilderError):
    """Raised when a per-row boundary array does not match the data shape."""

    pass

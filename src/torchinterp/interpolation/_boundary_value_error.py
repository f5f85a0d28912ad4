from ._builder_error import BuilderError


class BoundaryValueError(BuilderError, ValueError):
    """Data values incompatible with the requested boundary condition.

    Raised by the periodic boundary when the first and last data values
    differ.
    """

    pass

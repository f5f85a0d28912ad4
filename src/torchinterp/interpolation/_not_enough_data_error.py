from ._builder_error import BuilderError


class NotEnoughDataError(BuilderError):
    """Raised when there are fewer points than the strategy requires."""

    pass

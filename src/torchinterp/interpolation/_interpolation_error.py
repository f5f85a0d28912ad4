class InterpolationError(Exception):
    """Base exception for interpolation operations."""

    pass

"""Base exceptions for faacheck domain."""


class FaaCheckError(Exception):
    """Root exception for all faacheck errors.

    All domain exceptions inherit from this.
    Allows catching all faacheck-specific errors.
    """

"""Module classification exceptions."""

from faacheck.domain.exceptions.base import FaaCheckError


class ClassificationError(FaaCheckError):
    """Module path could not be assigned to a layer or slice.

    Fatal for the module being classified. The audit cannot proceed
    without a classification, so callers surface it directly.

    Attributes:
        path: Offending module path
        reason: Why classification failed
    """

    def __init__(self, path: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Cannot classify {path!r}: {reason}")

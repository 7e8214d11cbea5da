"""Configuration validation exceptions."""

from faacheck.domain.exceptions.base import FaaCheckError


class ConfigError(FaaCheckError):
    """Error in user configuration.

    Raised when a [tool.faacheck] value has the wrong type or shape.
    FAIL-FIRST: validates inputs immediately.

    Attributes:
        key: Configuration key (must not be empty)
        reason: Why the value is invalid (must not be empty)
    """

    def __init__(self, key: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not key:
            raise ValueError("key must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.key = key
        self.reason = reason
        super().__init__(f"Invalid config '{key}': {reason}")

"""Graph document parsing exceptions."""

from faacheck.domain.exceptions.base import FaaCheckError


class GraphFormatError(FaaCheckError):
    """Module graph document is malformed.

    Attributes:
        source: Where the document came from (file path or "<string>")
        reason: What is wrong with it
    """

    def __init__(self, source: str, reason: str) -> None:
        if not source:
            raise ValueError("source must be non-empty string")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.source = source
        self.reason = reason
        super().__init__(f"Malformed module graph {source}: {reason}")

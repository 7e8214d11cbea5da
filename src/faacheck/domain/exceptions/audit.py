"""Audit input exceptions."""

from faacheck.domain.exceptions.base import FaaCheckError


class AuditError(FaaCheckError):
    """Inconsistent input graph.

    Raised when an edge references a module id that is not in the module
    set, or when one id is supplied twice with different classifications.
    Aborts the whole run: this is an input problem, not an architecture one.

    Attributes:
        module_id: Offending module id
        reason: What is inconsistent
    """

    def __init__(self, module_id: str, reason: str) -> None:
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.module_id = module_id
        self.reason = reason
        super().__init__(f"Invalid audit input at {module_id!r}: {reason}")

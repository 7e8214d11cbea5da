"""Layering rules applied to single import edges.

- EdgeValidator: layer direction and horizontal slice isolation
- BoundaryEnforcer: public-surface rules for downward edges into slices
"""

from faacheck.application.validators.boundary_enforcer import BoundaryEnforcer
from faacheck.application.validators.edge_validator import EdgeValidator

__all__ = [
    "EdgeValidator",
    "BoundaryEnforcer",
]

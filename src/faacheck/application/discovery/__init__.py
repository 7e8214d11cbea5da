"""Project structure discovery.

Functions to discover structure the layout config does not spell out:
- Slice groups (directories that only hold nested slices)
"""

from faacheck.application.discovery.slices import discover_slice_groups

__all__ = [
    "discover_slice_groups",
]

"""Assertion helpers for architecture tests."""

from faacheck.presentation.api.assertions import assert_architecture

__all__ = [
    "assert_architecture",
]

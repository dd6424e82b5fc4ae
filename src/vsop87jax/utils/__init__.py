"""Shared utility functions for vsop87jax.

Provides angle conversion and normalization helpers.
"""

from vsop87jax.utils._angle import from_radians, wrap_to_two_pi

__all__ = [
    "from_radians",
    "wrap_to_two_pi",
]

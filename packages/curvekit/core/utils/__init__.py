"""Shared utilities for curvekit."""

from curvekit.core.utils.math import scale, transform
from curvekit.core.utils.random_source import BoundedRandomSource, make_random_generator

__all__ = [
    "BoundedRandomSource",
    "make_random_generator",
    "scale",
    "transform",
]

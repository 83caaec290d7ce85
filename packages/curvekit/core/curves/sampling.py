"""Curve sampling infrastructure.

This module provides functions for sampling a constructed curve at evenly
spaced x-values, e.g. to precompute an animation or difficulty table.
"""

from __future__ import annotations

import numpy as np

from curvekit.core.curves.intuitive import Curve
from curvekit.core.curves.models import CurvePoint


def sample_uniform_grid(n: int) -> list[float]:
    """Generate N evenly-spaced fractions in [0, 1], both ends included.

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        List of N evenly-spaced float values from 0.0 to 1.0.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [i / (n - 1) for i in range(n)]


def sample_curve(
    curve: Curve,
    n_samples: int,
    start: float | None = None,
    end: float | None = None,
) -> list[CurvePoint]:
    """Sample a curve at n_samples evenly spaced x-values.

    Args:
        curve: Curve to sample.
        n_samples: Number of samples (must be >= 2).
        start: First x-value. Defaults to the curve's apparent start.
        end: Last x-value. Defaults to the curve's apparent end.

    Returns:
        List of CurvePoints from start to end inclusive.

    Raises:
        ValueError: If n_samples < 2.
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    x_start = curve.spec.start if start is None else start
    x_end = curve.spec.end if end is None else end

    xs = np.linspace(x_start, x_end, n_samples)
    ys = curve.apply_array(xs)

    return [CurvePoint(x=float(x), y=float(y)) for x, y in zip(xs, ys, strict=True)]

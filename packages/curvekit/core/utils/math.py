"""Math utilities for common operations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

ScalarFunction = Callable[[Any], Any]


def scale(start: float, end: float, fraction: float) -> float:
    """Return the value a given fraction of the way from start to end.

    Fractions outside [0, 1] extrapolate along the same line, which is how
    callers recover an unknown endpoint from a known endpoint and an
    interior point.

    Args:
        start: Value at fraction 0
        end: Value at fraction 1
        fraction: Position along the line from start to end

    Returns:
        Interpolated (or extrapolated) value

    Example:
        >>> scale(0.0, 10.0, 0.25)
        2.5
        >>> scale(0.0, 1.0, 2.0)
        2.0
    """
    return start + fraction * (end - start)


def transform(
    f: ScalarFunction,
    a: float = 1.0,
    b: float = 1.0,
    h: float = 0.0,
    d: float = 0.0,
) -> ScalarFunction:
    """Wrap f with the standard affine transformation parameters.

    The returned function computes ``a * f(b * (x - h)) + d``. The defaults
    leave f untransformed. f may be a scalar function (``math.tanh``) or a
    numpy ufunc (``np.tanh``), in which case the result accepts arrays too.

    Args:
        f: Function to transform
        a: Vertical scale factor
        b: Horizontal scale factor
        h: Horizontal shift
        d: Vertical shift

    Returns:
        Transformed function of one argument
    """

    def transformed(x: Any) -> Any:
        return a * f(b * (x - h)) + d

    return transformed

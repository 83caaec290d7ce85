"""Intuitive hyperbolic-tangent curves.

An untransformed hyperbolic tangent is a smooth, continuously increasing "S"
with a horizontal asymptote on each end. A ``Curve`` lets you describe such a
shape by where it *appears* to start and end: the x-values where the curve
comes within ``percent_inset`` of the span of each of its limits.

The range is set by any pair of vertical handles with distinct roles (two
limits, two intercepts, or one of each).

Examples:
    Rises from 0.01 at x = 0 to 0.99 at x = 100, limits exactly 0 and 1:

        >>> curve = Curve.construct(0, 100)

    Exactly 0 at x = 0 and 1 at x = 100, limits slightly beyond:

        >>> curve = Curve.construct(
        ...     0, 100,
        ...     handles=(VerticalHandle.left_intercept(0), VerticalHandle.right_intercept(1)),
        ... )

    A decreasing curve is built by passing a start greater than the end.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from curvekit.core.curves.defaults import DEFAULT_PERCENT_INSET
from curvekit.core.curves.errors import CurveConfigurationError
from curvekit.core.curves.models import (
    DEFAULT_HANDLES,
    CurveSpec,
    ResolvedCurve,
    VerticalHandle,
)
from curvekit.core.curves.solver import base_function, inverse_base_function, solve_curve
from curvekit.core.utils.math import ScalarFunction, transform

if TYPE_CHECKING:
    from curvekit.core.config.models import CurveDefaults

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Curve:
    """A fully resolved, immutable hyperbolic-tangent curve.

    All parameters are derived eagerly when the curve is created; construction
    either returns a usable curve or raises ``CurveConfigurationError``.
    ``apply`` and ``apply_inverse`` are pure and can be stored and called
    repeatedly, or passed to ``transform`` for further composition.

    Attributes:
        spec: The input the curve was built from.
        resolved: Every derived parameter (limits, intercepts, a, b, h, d).
    """

    spec: CurveSpec
    resolved: ResolvedCurve = field(init=False)
    _forward: ScalarFunction = field(init=False, repr=False, compare=False)
    _inverse: ScalarFunction = field(init=False, repr=False, compare=False)
    _vectorized: ScalarFunction = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            resolved = solve_curve(self.spec)
        except CurveConfigurationError as e:
            logger.debug("Curve construction failed for %s: %s", self.spec, e)
            raise

        a, b, h, d = resolved.a, resolved.b, resolved.h, resolved.d
        object.__setattr__(self, "resolved", resolved)
        object.__setattr__(self, "_forward", transform(base_function, a=a, b=b, h=h, d=d))
        # Inverse of a * f(b * (x - h)) + d swaps the roles of scale and shift
        object.__setattr__(
            self,
            "_inverse",
            transform(inverse_base_function, a=1 / b, b=1 / a, h=d, d=h),
        )
        object.__setattr__(self, "_vectorized", transform(np.tanh, a=a, b=b, h=h, d=d))

    @classmethod
    def construct(
        cls,
        start: float,
        end: float,
        handles: tuple[VerticalHandle, VerticalHandle] = DEFAULT_HANDLES,
        percent_inset: float = DEFAULT_PERCENT_INSET,
    ) -> Curve:
        """Build a curve from its apparent start and end x-values.

        Args:
            start: x-value where the curve appears to leave its left limit.
            end: x-value where the curve appears to reach its right limit.
            handles: Two vertical handles with distinct roles.
            percent_inset: Fraction of the limit span between each limit and
                its intercept, strictly inside (0, 0.5).

        Returns:
            The resolved curve.

        Raises:
            DuplicateHandleRoleError: If both handles share a role.
            DegenerateGeometryError: If the inputs do not describe a curve.
            pydantic.ValidationError: If an input is not a finite number.
        """
        return cls(CurveSpec(start=start, end=end, handles=handles, percent_inset=percent_inset))

    @classmethod
    def from_spec(cls, spec: CurveSpec) -> Curve:
        return cls(spec)

    @classmethod
    def from_defaults(cls, start: float, end: float, defaults: CurveDefaults) -> Curve:
        """Build a curve using configured default limits and inset."""
        return cls.construct(
            start,
            end,
            handles=defaults.default_handles(),
            percent_inset=defaults.percent_inset,
        )

    @property
    def left_limit(self) -> float:
        return self.resolved.left_limit

    @property
    def right_limit(self) -> float:
        return self.resolved.right_limit

    @property
    def left_intercept(self) -> float:
        return self.resolved.left_intercept

    @property
    def right_intercept(self) -> float:
        return self.resolved.right_intercept

    def apply(self, x: float) -> float:
        """Evaluate the curve at x."""
        return float(self._forward(x))

    def apply_inverse(self, y: float) -> float:
        """Return the x at which the curve takes the value y.

        Raises:
            InverseOutOfRangeError: If y is not strictly between the limits.
        """
        return float(self._inverse(y))

    def apply_array(self, xs: Sequence[float] | NDArray[np.float64]) -> NDArray[np.float64]:
        """Evaluate the curve at every x in xs."""
        result: NDArray[np.float64] = self._vectorized(np.asarray(xs, dtype=np.float64))
        return result

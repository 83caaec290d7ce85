"""Parameter solver for intuitive hyperbolic-tangent curves.

Given two vertical handles and the apparent start and end x-values, this
module derives the remaining vertical references and the affine constants
(a, b, h, d) that make ``a * tanh(b * (x - h)) + d`` pass exactly through
the two apparent endpoints.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from curvekit.core.curves.errors import (
    DegenerateGeometryError,
    DuplicateHandleRoleError,
    InverseOutOfRangeError,
)
from curvekit.core.curves.models import (
    CurvePoint,
    CurveSpec,
    HandleRole,
    ResolvedCurve,
    VerticalHandle,
)
from curvekit.core.utils.math import scale

logger = logging.getLogger(__name__)


def base_function(x: float) -> float:
    """Odd, bounded base function every curve is built from."""
    return math.tanh(x)


def inverse_base_function(y: float) -> float:
    """Inverse of the base function, defined on the open interval (-1, 1).

    Raises:
        InverseOutOfRangeError: If y is outside (-1, 1).
    """
    if not -1.0 < y < 1.0:
        raise InverseOutOfRangeError(f"Inverse base function is undefined at {y!r}")
    return math.atanh(y)


@dataclass(frozen=True)
class VerticalReferences:
    """All four vertical references of a curve, start side to end side."""

    left_limit: float
    left_intercept: float
    right_intercept: float
    right_limit: float


def _validate_percent_inset(percent_inset: float) -> None:
    if not 0.0 < percent_inset < 0.5:
        raise DegenerateGeometryError(
            f"percent_inset must be in (0, 0.5), got {percent_inset}"
        )


def resolve_vertical_references(
    handles: tuple[VerticalHandle, VerticalHandle],
    percent_inset: float,
) -> VerticalReferences:
    """Derive all four vertical references from two handles.

    Each of the six role pairs has its own closed-form derivation:
    both limits give both intercepts directly; a limit plus an intercept
    extrapolates the far limit first; two intercepts extrapolate both limits.

    Args:
        handles: Two handles with distinct roles.
        percent_inset: Inset fraction, strictly inside (0, 0.5).

    Returns:
        The resolved left limit, left intercept, right intercept and right limit.

    Raises:
        DuplicateHandleRoleError: If both handles share a role.
        DegenerateGeometryError: If percent_inset is out of range or the
            limits coincide.

    Example:
        >>> refs = resolve_vertical_references(
        ...     (VerticalHandle.left_limit(0.0), VerticalHandle.right_limit(1.0)), 0.1
        ... )
        >>> refs.left_intercept, refs.right_intercept
        (0.1, 0.9)
    """
    first, second = handles
    if first.same_role(second):
        raise DuplicateHandleRoleError(
            f"Both vertical handles use the role {first.role.value!r}"
        )
    _validate_percent_inset(percent_inset)

    known: dict[HandleRole, float | None] = dict.fromkeys(HandleRole)
    known[first.role] = first.value
    known[second.role] = second.value

    left_limit = known[HandleRole.LEFT_LIMIT]
    left_intercept = known[HandleRole.LEFT_INTERCEPT]
    right_intercept = known[HandleRole.RIGHT_INTERCEPT]
    right_limit = known[HandleRole.RIGHT_LIMIT]
    p = percent_inset

    if left_limit is not None and right_limit is not None:
        left_intercept = scale(left_limit, right_limit, p)
        right_intercept = scale(left_limit, right_limit, 1 - p)
    elif left_limit is not None and right_intercept is not None:
        right_limit = scale(left_limit, right_intercept, 1 / (1 - p))
        left_intercept = scale(left_limit, right_limit, p)
    elif left_limit is not None and left_intercept is not None:
        right_limit = scale(left_limit, left_intercept, 1 / p)
        right_intercept = scale(left_limit, right_limit, 1 - p)
    elif left_intercept is not None and right_limit is not None:
        left_limit = scale(right_limit, left_intercept, 1 / (1 - p))
        right_intercept = scale(left_limit, right_limit, 1 - p)
    elif left_intercept is not None and right_intercept is not None:
        right_limit = scale(left_intercept, right_intercept, (1 - p) / (1 - 2 * p))
        left_limit = scale(right_limit, left_intercept, 1 / (1 - p))
    elif right_intercept is not None and right_limit is not None:
        left_limit = scale(right_limit, right_intercept, 1 / p)
        left_intercept = scale(left_limit, right_limit, p)

    if (
        left_limit is None
        or left_intercept is None
        or right_intercept is None
        or right_limit is None
    ):
        raise DegenerateGeometryError("Vertical references could not be resolved from handles")

    references = VerticalReferences(
        left_limit=left_limit,
        left_intercept=left_intercept,
        right_intercept=right_intercept,
        right_limit=right_limit,
    )
    values = (left_limit, left_intercept, right_intercept, right_limit)
    if not all(math.isfinite(v) for v in values):
        raise DegenerateGeometryError(f"Vertical references are not finite: {references}")
    if left_limit == right_limit:
        raise DegenerateGeometryError(
            f"Left and right limits coincide at {left_limit}; the curve has no vertical span"
        )

    return references


def solve_curve(spec: CurveSpec) -> ResolvedCurve:
    """Resolve every parameter of the curve described by spec.

    Args:
        spec: Apparent endpoints, handles and inset fraction.

    Returns:
        Fully resolved, immutable curve parameters.

    Raises:
        DuplicateHandleRoleError: If both handles share a role.
        DegenerateGeometryError: If the inputs do not describe a curve.
    """
    refs = resolve_vertical_references(spec.handles, spec.percent_inset)

    if spec.start == spec.end:
        raise DegenerateGeometryError(
            f"Apparent start and end must differ, both are {spec.start}"
        )

    # Vertical scale and shift center the base function between the limits
    a = (refs.right_limit - refs.left_limit) / 2
    d = refs.right_limit - a

    # x-positions of the intercepts before any horizontal transformation
    unscaled_left = inverse_base_function((refs.left_intercept - d) / a)
    unscaled_right = inverse_base_function((refs.right_intercept - d) / a)

    b = (unscaled_right - unscaled_left) / (spec.end - spec.start)
    if b == 0 or not math.isfinite(b):
        raise DegenerateGeometryError(f"Horizontal scale is degenerate: b={b}")

    scaled_left = unscaled_left / b
    scaled_right = unscaled_right / b
    h = (scaled_right - scaled_left) / 2 + spec.start

    logger.debug(
        "Resolved curve: limits=(%s, %s) intercepts=(%s, %s) a=%s b=%s h=%s d=%s",
        refs.left_limit,
        refs.right_limit,
        refs.left_intercept,
        refs.right_intercept,
        a,
        b,
        h,
        d,
    )

    return ResolvedCurve(
        left_limit=refs.left_limit,
        left_intercept=refs.left_intercept,
        right_intercept=refs.right_intercept,
        right_limit=refs.right_limit,
        left_intersection=CurvePoint(x=spec.start, y=refs.left_intercept),
        right_intersection=CurvePoint(x=spec.end, y=refs.right_intercept),
        percent_inset=spec.percent_inset,
        a=a,
        b=b,
        h=h,
        d=d,
    )

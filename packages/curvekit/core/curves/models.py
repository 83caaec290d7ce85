"""Schema models for intuitive hyperbolic-tangent curves.

This module defines the value types used by the curve solver:
- HandleRole: The four vertical roles a handle can take, top to bottom
- VerticalHandle: A role plus the vertical value it is dragged to
- CurvePoint: A single (x, y) point on a curve
- CurveSpec: Immutable input describing a curve by its apparent endpoints
- ResolvedCurve: Immutable output holding every derived parameter

Field types are validated by pydantic. Geometric validity (distinct roles,
non-degenerate spans) is checked by the solver, which raises the errors in
``curvekit.core.curves.errors``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from curvekit.core.curves.defaults import (
    DEFAULT_LEFT_LIMIT,
    DEFAULT_PERCENT_INSET,
    DEFAULT_RIGHT_LIMIT,
)


class HandleRole(str, Enum):
    """Vertical handle roles, listed from the top of an increasing curve down."""

    RIGHT_LIMIT = "right_limit"  # Asymptote as x -> +inf
    RIGHT_INTERCEPT = "right_intercept"  # Curve value at the right apparent endpoint
    LEFT_INTERCEPT = "left_intercept"  # Curve value at the left apparent endpoint
    LEFT_LIMIT = "left_limit"  # Asymptote as x -> -inf


class VerticalHandle(BaseModel):
    """A draggable vertical customization point on a curve.

    The role says where on the curve the handle is attached and the value
    says where, vertically, it is dragged. Any two handles with distinct
    roles fully determine the curve's range.

    Attributes:
        role: Which of the four vertical references this handle sets.
        value: The vertical value for that reference.

    Example:
        >>> handle = VerticalHandle.left_limit(0.0)
        >>> handle.role
        <HandleRole.LEFT_LIMIT: 'left_limit'>
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    role: HandleRole
    value: float = Field(..., allow_inf_nan=False)

    @classmethod
    def right_limit(cls, value: float) -> VerticalHandle:
        return cls(role=HandleRole.RIGHT_LIMIT, value=value)

    @classmethod
    def right_intercept(cls, value: float) -> VerticalHandle:
        return cls(role=HandleRole.RIGHT_INTERCEPT, value=value)

    @classmethod
    def left_intercept(cls, value: float) -> VerticalHandle:
        return cls(role=HandleRole.LEFT_INTERCEPT, value=value)

    @classmethod
    def left_limit(cls, value: float) -> VerticalHandle:
        return cls(role=HandleRole.LEFT_LIMIT, value=value)

    def same_role(self, other: VerticalHandle) -> bool:
        """Return True if both handles set the same reference, ignoring values."""
        return self.role is other.role

    # Handles are identified by role alone; the value is where it is dragged
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VerticalHandle):
            return NotImplemented
        return self.same_role(other)

    def __hash__(self) -> int:
        return hash(self.role)


DEFAULT_HANDLES: tuple[VerticalHandle, VerticalHandle] = (
    VerticalHandle.left_limit(DEFAULT_LEFT_LIMIT),
    VerticalHandle.right_limit(DEFAULT_RIGHT_LIMIT),
)


class CurvePoint(BaseModel):
    """A single (x, y) point on a curve. Immutable."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float
    y: float


class CurveSpec(BaseModel):
    """Input describing a curve by its apparent endpoints.

    A decreasing curve is described by a start greater than its end.

    Attributes:
        start: Apparent start x, where the curve leaves its left asymptote.
        end: Apparent end x, where the curve reaches its right asymptote.
        handles: Two vertical handles with distinct roles.
        percent_inset: Fraction of the limit-to-limit span between each
            limit and its intercept. Must lie strictly inside (0, 0.5).

    Example:
        >>> spec = CurveSpec(start=0.0, end=100.0)
        >>> spec.percent_inset
        0.01
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: float = Field(..., allow_inf_nan=False)
    end: float = Field(..., allow_inf_nan=False)
    handles: tuple[VerticalHandle, VerticalHandle] = DEFAULT_HANDLES
    percent_inset: float = Field(default=DEFAULT_PERCENT_INSET, allow_inf_nan=False)


class ResolvedCurve(BaseModel):
    """Every parameter of a constructed curve.

    The curve is ``a * tanh(b * (x - h)) + d``. Limits and intercepts are
    ordered left_limit < left_intercept < right_intercept < right_limit for
    a rising range, and reversed for a falling one.

    "Left" and "right" name the apparent start and end sides. When start is
    greater than end, b is negative and the left limit is the asymptote as
    x -> +inf instead of -inf.

    Attributes:
        left_limit: Asymptote on the start side (x -> -inf when start < end).
        left_intercept: Curve value at the apparent start.
        right_intercept: Curve value at the apparent end.
        right_limit: Asymptote on the end side (x -> +inf when start < end).
        left_intersection: Apparent start point (start, left_intercept).
        right_intersection: Apparent end point (end, right_intercept).
        percent_inset: Inset fraction the curve was built with.
        a: Vertical scale.
        b: Horizontal scale.
        h: Horizontal shift.
        d: Vertical shift.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    left_limit: float
    left_intercept: float
    right_intercept: float
    right_limit: float
    left_intersection: CurvePoint
    right_intersection: CurvePoint
    percent_inset: float
    a: float
    b: float
    h: float
    d: float

    @property
    def is_increasing(self) -> bool:
        """True when the curve rises as x increases."""
        return (self.right_limit > self.left_limit) == (self.b > 0)

    @property
    def vertical_references(self) -> tuple[float, float, float, float]:
        """Left limit, left intercept, right intercept and right limit, in order."""
        return (self.left_limit, self.left_intercept, self.right_intercept, self.right_limit)

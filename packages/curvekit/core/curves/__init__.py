"""Intuitive hyperbolic-tangent curves and their parameter solver."""

from curvekit.core.curves.errors import (
    CurveConfigurationError,
    DegenerateGeometryError,
    DuplicateHandleRoleError,
    InverseOutOfRangeError,
)
from curvekit.core.curves.intuitive import Curve
from curvekit.core.curves.models import (
    DEFAULT_HANDLES,
    CurvePoint,
    CurveSpec,
    HandleRole,
    ResolvedCurve,
    VerticalHandle,
)
from curvekit.core.curves.solver import resolve_vertical_references, solve_curve

__all__ = [
    "DEFAULT_HANDLES",
    "Curve",
    "CurveConfigurationError",
    "CurvePoint",
    "CurveSpec",
    "DegenerateGeometryError",
    "DuplicateHandleRoleError",
    "HandleRole",
    "InverseOutOfRangeError",
    "ResolvedCurve",
    "VerticalHandle",
    "resolve_vertical_references",
    "solve_curve",
]

"""Curve construction errors."""


class CurveConfigurationError(ValueError):
    """Base exception for curves that cannot be constructed.

    Raised at construction time, before any curve is returned. These are
    caller errors and are not worth retrying.
    """


class DuplicateHandleRoleError(CurveConfigurationError):
    """Both vertical handles designate the same role."""


class DegenerateGeometryError(CurveConfigurationError):
    """Inputs describe a curve with no well-defined shape.

    Covers equal apparent endpoints, zero span between limits, an inset
    fraction outside (0, 0.5) and intercepts outside the open limit interval.
    """


class InverseOutOfRangeError(DegenerateGeometryError):
    """Argument to the inverse base function has magnitude >= 1."""

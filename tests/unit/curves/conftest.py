"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from curvekit.core.curves.intuitive import Curve
from curvekit.core.curves.models import VerticalHandle


@pytest.fixture
def default_curve() -> Curve:
    """Curve from x=0 to x=100 with limits 0 and 1 and 1% inset."""
    return Curve.construct(0, 100)


@pytest.fixture
def wide_inset_curve() -> Curve:
    """Curve from x=0 to x=100 with limits 0 and 1 and 10% inset."""
    return Curve.construct(0, 100, percent_inset=0.1)


@pytest.fixture
def decreasing_curve() -> Curve:
    """Curve whose apparent start lies to the right of its apparent end."""
    return Curve.construct(100, 0)


@pytest.fixture
def falling_range_curve() -> Curve:
    """Curve from x=0 to x=100 whose range falls from 1 to 0."""
    return Curve.construct(
        0,
        100,
        handles=(VerticalHandle.left_limit(1.0), VerticalHandle.right_limit(0.0)),
    )


@pytest.fixture
def reference_values() -> dict[str, float]:
    """Vertical references of a 0..10 range with a 10% inset."""
    return {
        "left_limit": 0.0,
        "left_intercept": 1.0,
        "right_intercept": 9.0,
        "right_limit": 10.0,
    }

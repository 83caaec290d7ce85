"""Shared pytest fixtures for curvekit tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Randomness Fixtures
# ============================================================================


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random.Random for reproducible draws."""
    return random.Random(1234)


# ============================================================================
# Config File Fixtures
# ============================================================================


@pytest.fixture
def write_config_file(tmp_path: Path):
    """Factory fixture writing a config file into tmp_path."""

    def _write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write

"""Test suite for curvekit.

Test Structure:
- unit/: Unit tests for individual components
  - curves/: Handle models, parameter solver, curve construction and sampling
  - config/: Configuration models and loaders
  - utils/: Interpolation, transforms, random sources and logging
- conftest.py: Shared fixtures and test configuration
"""

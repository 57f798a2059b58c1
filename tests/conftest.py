"""Pytest configuration for tuple and simulation tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts. Kernels compare
    against host float64 results, so fast math is disabled.
    """
    ti.init(arch=ti.cpu, default_fp=ti.f64, fast_math=False)
    yield


@pytest.fixture
def environment():
    """The standard environment: gravity (0, -9.8, 0) and wind (1, 0, 0)."""
    from src.python.simulation.projectile import default_environment

    return default_environment()


@pytest.fixture
def projectile():
    """The standard launch from (0, 1, 0) with velocity (50, 100, 0)."""
    from src.python.simulation.projectile import launch

    return launch()

# tests/conftest.py
import os
import sys

# Add project root to path so "src." imports resolve
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from src.round_opening_generator.config.settings import OpeningSettings
from src.round_opening_generator.model.slab_wall import build_round_duct, build_slab_wall


@pytest.fixture
def settings():
    """Default opening settings."""
    return OpeningSettings()


@pytest.fixture
def x_wall():
    """Wall along the X axis: base line (0,0)-(10,0), 1 ft thick, 10 ft tall.

    Side faces sit at y = -0.5 (orientation side) and y = +0.5.
    """
    return build_slab_wall("wall_x", (0.0, 0.0), (10.0, 0.0), width=1.0, height=10.0)


@pytest.fixture
def y_wall():
    """Wall along the Y axis: base line (20,0)-(20,10), 1 ft thick, 10 ft tall."""
    return build_slab_wall("wall_y", (20.0, 0.0), (20.0, 10.0), width=1.0, height=10.0)


@pytest.fixture
def perpendicular_duct():
    """0.5 ft duct crossing wall_x at right angles at x=5, z=3."""
    return build_round_duct("duct_perp", (5.0, -5.0, 3.0), (5.0, 5.0, 3.0), diameter=0.5)


@pytest.fixture
def skewed_duct():
    """0.5 ft duct crossing wall_x obliquely.

    Crosses y=-0.5 at (4.8, -0.5, 3.8) and y=+0.5 at (5.2, 0.5, 4.2).
    """
    return build_round_duct("duct_skew", (3.0, -5.0, 2.0), (7.0, 5.0, 6.0), diameter=0.5)

# File: src/round_opening_generator/config/__init__.py
"""
Configuration package for the round opening generator.

- Length units and conversion
- Opening family, parameter names and geometric tolerances
"""

from .units import ProjectUnits, convert_to_feet, convert_from_feet
from .settings import OpeningSettings

__all__ = [
    "ProjectUnits",
    "convert_to_feet",
    "convert_from_feet",
    "OpeningSettings",
]

# File: src/round_opening_generator/config/units.py

"""
Length units for reporting opening dimensions.

Revit stores every length in internal units (decimal feet), so walls,
ducts and openings flow through the generator in feet. These helpers
convert to and from the units a user wants to read.
"""

from enum import Enum
from typing import Dict, Union


class ProjectUnits(Enum):
    """Supported length units."""
    FEET = "feet"
    INCHES = "inches"
    METERS = "meters"
    MILLIMETERS = "millimeters"


# Length of one unit expressed in feet
_FEET_PER_UNIT: Dict[ProjectUnits, float] = {
    ProjectUnits.FEET: 1.0,
    ProjectUnits.INCHES: 1 / 12.0,
    ProjectUnits.METERS: 1 / 0.3048,
    ProjectUnits.MILLIMETERS: 1 / 304.8,
}


def parse_units(units: Union[ProjectUnits, str]) -> ProjectUnits:
    """
    Resolve a units argument to a ProjectUnits member.

    Args:
        units: ProjectUnits member or its string value (case-insensitive)

    Raises:
        ValueError: If the units are not supported
    """
    if isinstance(units, ProjectUnits):
        return units
    if isinstance(units, str):
        try:
            return ProjectUnits(units.lower())
        except ValueError:
            raise ValueError(f"Unsupported unit: {units}")
    raise ValueError(f"Units must be ProjectUnits enum or string, got {type(units)}")


def convert_to_feet(value: float, current_units: Union[ProjectUnits, str]) -> float:
    """
    Converts a value from the specified units to feet.

    Args:
        value: The numeric value to convert
        current_units: The units to convert from

    Returns:
        The value converted to feet
    """
    return value * _FEET_PER_UNIT[parse_units(current_units)]


def convert_from_feet(value: float, target_units: Union[ProjectUnits, str]) -> float:
    """
    Converts a value from feet to the specified target units.

    Args:
        value: The numeric value in feet to convert
        target_units: The units to convert to

    Returns:
        The converted value in the target units
    """
    return value / _FEET_PER_UNIT[parse_units(target_units)]

# File: src/round_opening_generator/openings/__init__.py
"""
Round opening algorithm.

Submodules:
    face_selector: Side faces of a wall solid
    duct_curve: Duct centerline
    intersection: Centerline/face crossing
    opening_calculator: Opening center, diameter and depth
    opening_creator: Model-wide orchestration

Example:
    >>> from src.round_opening_generator.openings import RoundOpeningCreator
    >>> report = RoundOpeningCreator(repository, placement).auto_create_objects()
"""

from .face_selector import find_wall_faces, find_wall_side_faces
from .duct_curve import find_duct_curve
from .intersection import SetComparisonResult, intersect_face, find_intersection
from .opening_calculator import (
    OffsetAxis,
    get_ref_dir,
    select_offset_axis,
    get_diameter,
    compute_opening_spec,
)
from .opening_creator import RoundOpeningCreator, CreationReport

__all__ = [
    "find_wall_faces",
    "find_wall_side_faces",
    "find_duct_curve",
    "SetComparisonResult",
    "intersect_face",
    "find_intersection",
    "OffsetAxis",
    "get_ref_dir",
    "select_offset_axis",
    "get_diameter",
    "compute_opening_spec",
    "RoundOpeningCreator",
    "CreationReport",
]

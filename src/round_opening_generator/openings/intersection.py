# File: src/round_opening_generator/openings/intersection.py
"""
Line/face intersection.

The duct centerline is intersected with the infinite plane of a face,
then the hit point is tested against the face's bounded region in the
face's own (u, v) parameter space using shapely. Holes in the face
(inner edge loops) are not part of the region.

The result mirrors a set comparison: DISJOINT when the line misses the
face, OVERLAP with the intersection points otherwise. A line lying in
the face plane overlaps it without a single crossing point, so it
reports OVERLAP with no points.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from shapely.geometry import Point, Polygon

from src.round_opening_generator.config.settings import OpeningSettings
from src.round_opening_generator.core.geometry import Point3, dot, subtract
from src.round_opening_generator.core.model_types import PlanarFace, UnboundLine

logger = logging.getLogger(__name__)


class SetComparisonResult(Enum):
    """Outcome of comparing a curve with a face region."""
    DISJOINT = "disjoint"
    OVERLAP = "overlap"

    def __str__(self) -> str:
        return self.value


def _face_region(face: PlanarFace, tolerance: float) -> Polygon:
    region = Polygon(face.boundary_uv(), face.inner_loops_uv())
    if tolerance > 0:
        region = region.buffer(tolerance)
    return region


def intersect_face(
    line: UnboundLine,
    face: PlanarFace,
    settings: Optional[OpeningSettings] = None,
) -> Tuple[SetComparisonResult, List[Point3]]:
    """
    Compare an unbounded line with a bounded planar face.

    Args:
        line: Duct centerline
        face: Planar face with a boundary loop
        settings: Parallel and boundary tolerances

    Returns:
        Tuple of (comparison result, intersection points)
    """
    settings = settings or OpeningSettings()

    denominator = dot(face.normal, line.direction)
    offset = dot(face.normal, subtract(face.origin, line.origin))

    if abs(denominator) <= settings.parallel_tolerance:
        # Parallel: either in the plane or never touching it
        if abs(offset) <= settings.parallel_tolerance:
            return SetComparisonResult.OVERLAP, []
        return SetComparisonResult.DISJOINT, []

    hit = line.point_at(offset / denominator)
    u, v = face.to_uv(hit)

    if not _face_region(face, settings.boundary_tolerance).covers(Point(u, v)):
        return SetComparisonResult.DISJOINT, []

    return SetComparisonResult.OVERLAP, [hit]


def find_intersection(
    line: UnboundLine,
    face: PlanarFace,
    settings: Optional[OpeningSettings] = None,
) -> Optional[Point3]:
    """
    Point where a line crosses a face.

    Only the first intersection point is used.

    Args:
        line: Duct centerline
        face: Wall side face
        settings: Tolerances

    Returns:
        The intersection point, or None if there is none
    """
    result, points = intersect_face(line, face, settings)

    if result is SetComparisonResult.DISJOINT or not points:
        logger.debug(f"No intersection with face {face.id} ({result})")
        return None

    return points[0]

# File: src/round_opening_generator/model/slab_wall.py
"""
Builders for simple model geometry.

build_slab_wall() produces the solid of a straight rectangular wall: two
side faces, two end caps, a top and a bottom face, each with an outward
normal and a boundary loop. build_round_duct() produces a straight duct
with two connectors. Both are used by in-memory repositories and tests.

Coordinates are world XYZ; the wall base line runs at base_elevation.
"""

from typing import List, Sequence

from src.round_opening_generator.core.errors import GeometryError
from src.round_opening_generator.core.geometry import (
    BASIS_Z,
    BoundingBox,
    Point3,
    add,
    cross,
    normalize,
    scale,
)
from src.round_opening_generator.core.model_types import (
    DuctGeometry,
    PlanarFace,
    WallGeometry,
)


def _as_point(p: Sequence[float], z: float = 0.0) -> Point3:
    if len(p) == 2:
        return (float(p[0]), float(p[1]), float(z))
    return (float(p[0]), float(p[1]), float(p[2]))


def build_slab_wall(
    wall_id: str,
    start: Sequence[float],
    end: Sequence[float],
    width: float,
    height: float,
    base_elevation: float = 0.0,
) -> WallGeometry:
    """
    Build a straight slab wall along a base line.

    The orientation is the horizontal unit vector run x Z, i.e. the wall
    normal on the right of the base line when looking from start to end.

    Args:
        wall_id: Wall identifier
        start: Base line start (x, y); any z is ignored
        end: Base line end (x, y); any z is ignored
        width: Wall thickness, centered on the base line
        height: Wall height above base_elevation
        base_elevation: Z of the wall bottom

    Returns:
        WallGeometry with six planar faces

    Raises:
        GeometryError: For a zero-length base line or non-positive dimensions
    """
    if width <= 0 or height <= 0:
        raise GeometryError(f"Wall {wall_id} needs positive width and height")

    s = (float(start[0]), float(start[1]), float(base_elevation))
    e = (float(end[0]), float(end[1]), float(base_elevation))
    try:
        run = normalize((e[0] - s[0], e[1] - s[1], 0.0))
    except ValueError:
        raise GeometryError(f"Wall {wall_id} base line has zero length")

    orientation = cross(run, BASIS_Z)
    half = scale(orientation, width / 2.0)
    up = (0.0, 0.0, float(height))

    # Base corners on the orientation side (+) and the opposite side (-)
    s_pos, s_neg = add(s, half), add(s, scale(half, -1.0))
    e_pos, e_neg = add(e, half), add(e, scale(half, -1.0))
    s_pos_top, s_neg_top = add(s_pos, up), add(s_neg, up)
    e_pos_top, e_neg_top = add(e_pos, up), add(e_neg, up)

    faces: List[PlanarFace] = [
        PlanarFace(
            id=f"{wall_id}_side_pos",
            origin=s_pos,
            normal=orientation,
            x_vector=run,
            boundary=[s_pos, e_pos, e_pos_top, s_pos_top],
        ),
        PlanarFace(
            id=f"{wall_id}_side_neg",
            origin=e_neg,
            normal=scale(orientation, -1.0),
            x_vector=scale(run, -1.0),
            boundary=[e_neg, s_neg, s_neg_top, e_neg_top],
        ),
        PlanarFace(
            id=f"{wall_id}_end_start",
            origin=s_neg,
            normal=scale(run, -1.0),
            x_vector=orientation,
            boundary=[s_neg, s_pos, s_pos_top, s_neg_top],
        ),
        PlanarFace(
            id=f"{wall_id}_end_end",
            origin=e_pos,
            normal=run,
            x_vector=scale(orientation, -1.0),
            boundary=[e_pos, e_neg, e_neg_top, e_pos_top],
        ),
        PlanarFace(
            id=f"{wall_id}_top",
            origin=s_pos_top,
            normal=BASIS_Z,
            x_vector=run,
            boundary=[s_pos_top, e_pos_top, e_neg_top, s_neg_top],
        ),
        PlanarFace(
            id=f"{wall_id}_bottom",
            origin=s_neg,
            normal=scale(BASIS_Z, -1.0),
            x_vector=run,
            boundary=[s_neg, e_neg, e_pos, s_pos],
        ),
    ]

    corners = [s_pos, s_neg, e_pos, e_neg, s_pos_top, s_neg_top, e_pos_top, e_neg_top]
    return WallGeometry(
        id=wall_id,
        bounding_box=BoundingBox.from_points(corners),
        orientation=orientation,
        width=float(width),
        faces=faces,
    )


def build_round_duct(
    duct_id: str,
    start: Sequence[float],
    end: Sequence[float],
    diameter: float,
) -> DuctGeometry:
    """Straight round duct with connectors at start and end."""
    return DuctGeometry(
        id=duct_id,
        diameter=float(diameter),
        connector_origins=[_as_point(start), _as_point(end)],
    )

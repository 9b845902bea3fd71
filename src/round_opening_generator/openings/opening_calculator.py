# File: src/round_opening_generator/openings/opening_calculator.py
"""
Opening parameter calculation.

Given where a duct centerline crosses the two side faces of a wall, this
module derives the opening that has to be cut:

- Reference direction: horizontal in-plane vector of the front face
- Center: midpoint between the front and back crossings, taken along
  the in-plane horizontal axis and along Z
- Diameter: duct diameter enlarged for oblique crossings
- Depth: the wall width

Diameter enlargement:
    A duct crossing the wall at an angle leaves an elongated footprint.
    With ``diff`` the lateral skew between the two crossings,

        scale = diff / width
        edge = diameter * scale
        enlarged = sqrt(diameter^2 + edge^2) + diff

    and the duct diameter is kept unchanged when ``diff`` is zero. This
    approximates the containing circle; it is not an exact ellipse fit.
"""

import logging
import math
from enum import Enum
from typing import Optional, Tuple

from src.round_opening_generator.core.errors import GeometryError
from src.round_opening_generator.core.geometry import BASIS_Z, Point3, Vector3, cross
from src.round_opening_generator.core.model_types import OpeningSpec, PlanarFace

logger = logging.getLogger(__name__)


class OffsetAxis(Enum):
    """Model axis used as the in-plane horizontal axis of a wall face."""
    X = "x"
    Y = "y"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


def get_ref_dir(face: PlanarFace) -> Vector3:
    """
    Horizontal reference direction lying in a face.

    The face normal is evaluated at the center of the face's parametric
    bounding box and crossed with the global Z axis.
    """
    center = face.get_bounding_box().center
    normal = face.compute_normal(center)
    return cross(normal, BASIS_Z)


def select_offset_axis(ref_dir: Vector3) -> OffsetAxis:
    """
    Pick the model axis closest to the reference direction.

    Returns OffsetAxis.NONE when |X| and |Y| are exactly equal (a wall
    running at 45 degrees); no horizontal offset is applied then.
    """
    abs_x = abs(ref_dir[0])
    abs_y = abs(ref_dir[1])

    if abs_y > abs_x:
        return OffsetAxis.Y
    if abs_x > abs_y:
        return OffsetAxis.X

    logger.warning(
        f"Reference direction {ref_dir} has equal X and Y magnitude; "
        f"no horizontal offset applied"
    )
    return OffsetAxis.NONE


def calculate_differences(
    front: Point3,
    back: Point3,
    axis: OffsetAxis,
) -> Tuple[float, float]:
    """
    Offsets between the front and back crossings.

    Returns:
        Tuple of (horizontal_diff, vertical_diff); horizontal_diff is 0
        when no axis is selected
    """
    vertical_diff = front[2] - back[2]

    if axis is OffsetAxis.X:
        horizontal_diff = front[0] - back[0]
    elif axis is OffsetAxis.Y:
        horizontal_diff = front[1] - back[1]
    else:
        horizontal_diff = 0.0

    return horizontal_diff, vertical_diff


def calculate_center(
    front: Point3,
    horizontal_diff: float,
    vertical_diff: float,
    axis: OffsetAxis,
) -> Point3:
    """Move the front crossing halfway towards the back crossing."""
    x, y, z = front
    z -= vertical_diff / 2

    if axis is OffsetAxis.X:
        x -= horizontal_diff / 2
    elif axis is OffsetAxis.Y:
        y -= horizontal_diff / 2

    return (x, y, z)


def get_diameter(
    horizontal_diff: float,
    vertical_diff: float,
    width: float,
    diameter: float,
) -> float:
    """
    Opening diameter for a duct crossing a wall.

    Args:
        horizontal_diff: In-plane horizontal offset between the crossings
        vertical_diff: Vertical offset between the crossings
        width: Wall thickness
        diameter: Duct diameter

    Returns:
        Enlarged diameter, equal to ``diameter`` for perpendicular crossings
    """
    diff = math.sqrt(vertical_diff * vertical_diff + horizontal_diff * horizontal_diff)
    if diff > 0:
        coff = diff / width
        edge = diameter * coff
        new_diameter = math.sqrt(diameter * diameter + edge * edge)
        return new_diameter + diff
    return diameter


def compute_opening_spec(
    front: Optional[Point3],
    back: Optional[Point3],
    ref_dir: Vector3,
    width: float,
    diameter: float,
    wall_id: Optional[str] = None,
    duct_id: Optional[str] = None,
) -> Optional[OpeningSpec]:
    """
    Compute the opening for one duct crossing one wall.

    Args:
        front: Crossing on the front side face, or None
        back: Crossing on the back side face, or None
        ref_dir: Reference direction of the front face (see get_ref_dir)
        width: Wall thickness
        diameter: Duct diameter
        wall_id: Host wall identifier, copied to the spec
        duct_id: Duct identifier, copied to the spec

    Returns:
        OpeningSpec, or None when either crossing is missing

    Raises:
        GeometryError: If width or diameter is not positive
    """
    if front is None or back is None:
        return None

    if width <= 0:
        raise GeometryError(f"Wall width must be positive, got {width}", extra={"wall_id": wall_id})
    if diameter <= 0:
        raise GeometryError(
            f"Duct diameter must be positive, got {diameter}", extra={"duct_id": duct_id}
        )

    axis = select_offset_axis(ref_dir)
    horizontal_diff, vertical_diff = calculate_differences(front, back, axis)

    spec = OpeningSpec(
        center=calculate_center(front, horizontal_diff, vertical_diff, axis),
        orientation=ref_dir,
        diameter=get_diameter(horizontal_diff, vertical_diff, width, diameter),
        depth=width,
        wall_id=wall_id,
        duct_id=duct_id,
    )
    logger.debug(
        f"Opening wall={wall_id} duct={duct_id} axis={axis} "
        f"center={spec.center} diameter={spec.diameter:.4f} depth={spec.depth:.4f}"
    )
    return spec

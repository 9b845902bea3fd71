# File: src/round_opening_generator/openings/face_selector.py
"""
Side face selection for wall solids.

A simple slab wall has exactly two large faces bounding its thickness.
They are the planar faces whose normal is horizontal and lines up with
the wall orientation on the X or Y axis. Top, bottom and end caps fail
one of those tests.
"""

import logging
from typing import Iterable, List, Optional

from src.round_opening_generator.config.settings import OpeningSettings
from src.round_opening_generator.core.geometry import Vector3
from src.round_opening_generator.core.model_types import Face, PlanarFace, WallGeometry
from src.round_opening_generator.utils.logging_config import OpeningLogger

logger = logging.getLogger(__name__)


def is_side_face(
    face: Face,
    orientation: Vector3,
    settings: Optional[OpeningSettings] = None,
) -> bool:
    """
    Check whether a face is one of the wall's side faces.

    Args:
        face: Any face of the wall solid
        orientation: Wall orientation (unit vector across the thickness)
        settings: Tolerances; defaults are used when omitted

    Returns:
        True if the face is planar, its normal has no Z component and
        its |X| or |Y| component equals the orientation's
    """
    settings = settings or OpeningSettings()

    if not isinstance(face, PlanarFace):
        return False

    normal = face.normal
    if abs(normal[2]) > settings.horizontal_tolerance:
        return False

    tol = settings.component_tolerance
    return (
        abs(abs(orientation[0]) - abs(normal[0])) <= tol
        or abs(abs(orientation[1]) - abs(normal[1])) <= tol
    )


def find_wall_faces(
    faces: Iterable[Face],
    orientation: Vector3,
    settings: Optional[OpeningSettings] = None,
) -> List[PlanarFace]:
    """
    Select the side faces of a wall solid.

    The result keeps the enumeration order of the input; callers take the
    first face as the front. Any count other than two
    means the wall is not a simple planar slab.

    Args:
        faces: Faces of the wall solid
        orientation: Wall orientation vector
        settings: Tolerances

    Returns:
        Side faces, possibly empty
    """
    return [face for face in faces if is_side_face(face, orientation, settings)]


def find_wall_side_faces(
    wall: WallGeometry,
    settings: Optional[OpeningSettings] = None,
) -> List[PlanarFace]:
    """Side faces of a wall."""
    side_faces = find_wall_faces(wall.faces, wall.orientation, settings)
    side_ids = {face.id for face in side_faces}
    for face in wall.faces:
        logger.log(
            OpeningLogger.TRACE_LEVEL,
            f"Wall {wall.id}: face {face.id} side={face.id in side_ids}",
        )
    logger.debug(
        f"Wall {wall.id}: {len(side_faces)} side face(s) out of {len(wall.faces)}"
    )
    return side_faces

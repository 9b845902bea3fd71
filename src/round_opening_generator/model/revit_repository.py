# File: src/round_opening_generator/model/revit_repository.py
"""
Model repository reading walls and ducts from a Revit document.

The conversion functions only touch attributes of the Revit objects
(getattr-style), so they work on any object exposing the same members.
Only the document queries need the Revit API itself.

Usage (inside Revit / Rhino.Inside.Revit only):
    from src.round_opening_generator.model.revit_repository import RevitModelRepository

    repository = RevitModelRepository(doc)
    walls = repository.get_walls()
"""

import logging
from typing import Any, Iterable, List, Optional

from src.round_opening_generator.core.errors import GeometryError, OpeningGenerationError
from src.round_opening_generator.core.geometry import BoundingBox, Point3
from src.round_opening_generator.core.interfaces import ModelRepository
from src.round_opening_generator.core.model_types import (
    CurvedFace,
    DuctGeometry,
    Face,
    PlanarFace,
    WallGeometry,
)
from src.round_opening_generator.model import revit_api

logger = logging.getLogger(__name__)


# =============================================================================
# Conversion helpers
# =============================================================================

def xyz_to_tuple(xyz: Any) -> Point3:
    """Convert a Revit XYZ to an (x, y, z) tuple."""
    return (float(xyz.X), float(xyz.Y), float(xyz.Z))


def get_element_id(element: Any) -> str:
    """
    Element id as a string.

    Revit 2024+ exposes ElementId.Value, older versions IntegerValue.
    """
    element_id = getattr(element, "Id", None)
    if element_id is None:
        return "unknown"
    for attr in ("Value", "IntegerValue"):
        value = getattr(element_id, attr, None)
        if value is not None:
            return str(int(value))
    return str(element_id)


def _size(collection: Any) -> int:
    size = getattr(collection, "Size", None)
    if size is not None:
        return int(size)
    return len(collection)


def _loop_points(curve_loop: Any) -> List[Point3]:
    """Tessellated points of one edge loop, without repeats."""
    points: List[Point3] = []
    for curve in curve_loop:
        tessellated = [xyz_to_tuple(p) for p in curve.Tessellate()]
        # Each curve ends where the next one starts
        points.extend(tessellated[:-1])
    return points


def _edge_loops_points(revit_face: Any) -> List[List[Point3]]:
    """Points of every edge loop of a face; the outer loop comes first."""
    return [_loop_points(loop) for loop in revit_face.GetEdgesAsCurveLoops()]


def face_from_revit(revit_face: Any, face_id: str) -> Face:
    """
    Convert a Revit face.

    Planar faces (those exposing FaceNormal) become PlanarFace with the
    Revit face kept as reference for hosting; anything else becomes
    CurvedFace. Edge loops after the first are holes in the face.
    """
    normal = getattr(revit_face, "FaceNormal", None)
    if normal is None:
        return CurvedFace(id=face_id, reference=revit_face)

    loops = _edge_loops_points(revit_face)
    return PlanarFace(
        id=face_id,
        origin=xyz_to_tuple(revit_face.Origin),
        normal=xyz_to_tuple(normal),
        x_vector=xyz_to_tuple(revit_face.XVector),
        boundary=loops[0] if loops else [],
        inner_loops=loops[1:],
        reference=revit_face,
    )


def wall_from_revit(
    revit_wall: Any,
    geometry_element: Optional[Iterable[Any]],
) -> WallGeometry:
    """
    Convert a Revit wall and its geometry.

    Args:
        revit_wall: Revit Wall
        geometry_element: Result of wall.get_Geometry(options)

    Returns:
        WallGeometry with the faces of every non-empty solid

    Raises:
        GeometryError: The wall has no geometry or no bounding box
    """
    wall_id = get_element_id(revit_wall)
    if geometry_element is None:
        raise GeometryError(f"Wall {wall_id} has no geometry", extra={"wall_id": wall_id})

    bounding = revit_wall.get_BoundingBox(None)
    if bounding is None:
        raise GeometryError(f"Wall {wall_id} has no bounding box", extra={"wall_id": wall_id})

    faces: List[Face] = []

    for obj in geometry_element:
        solid_faces = getattr(obj, "Faces", None)
        if solid_faces is None or _size(solid_faces) == 0:
            continue
        for revit_face in solid_faces:
            faces.append(face_from_revit(revit_face, f"{wall_id}_face_{len(faces)}"))

    return WallGeometry(
        id=wall_id,
        bounding_box=BoundingBox(xyz_to_tuple(bounding.Min), xyz_to_tuple(bounding.Max)),
        orientation=xyz_to_tuple(revit_wall.Orientation),
        width=float(revit_wall.Width),
        faces=faces,
        reference=revit_wall,
    )


def duct_from_revit(revit_duct: Any) -> Optional[DuctGeometry]:
    """
    Convert a Revit duct.

    Returns:
        DuctGeometry, or None for ducts without a round diameter
    """
    duct_id = get_element_id(revit_duct)

    try:
        diameter = float(revit_duct.Diameter)
    except Exception as e:
        # Rectangular and oval ducts throw on Diameter
        logger.warning(f"Duct {duct_id} has no round diameter: {e}")
        return None

    origins = []
    connector_manager = getattr(revit_duct, "ConnectorManager", None)
    if connector_manager is not None:
        for connector in connector_manager.Connectors:
            origins.append(xyz_to_tuple(connector.Origin))

    return DuctGeometry(
        id=duct_id,
        diameter=diameter,
        connector_origins=origins,
        reference=revit_duct,
    )


# =============================================================================
# Repository
# =============================================================================

class RevitModelRepository(ModelRepository):
    """Walls and ducts of a Revit document.

    Args:
        doc: Revit Document

    Raises:
        RevitUnavailableError: Outside a Revit session
    """

    def __init__(self, doc: Any):
        revit_api.require_revit("RevitModelRepository")
        self._doc = doc

    def _geometry_options(self) -> Any:
        DB = revit_api.DB
        options = DB.Options()
        options.ComputeReferences = True
        options.DetailLevel = DB.ViewDetailLevel.Fine
        return options

    def get_walls(self) -> List[WallGeometry]:
        DB = revit_api.DB
        options = self._geometry_options()
        walls = []

        for revit_wall in DB.FilteredElementCollector(self._doc).OfClass(DB.Wall):
            try:
                walls.append(wall_from_revit(revit_wall, revit_wall.get_Geometry(options)))
            except OpeningGenerationError as e:
                logger.error(f"Skipping wall {get_element_id(revit_wall)}: {e}")

        logger.info(f"Read {len(walls)} walls")
        return walls

    def find_ducts_intersecting(self, bounding_box: BoundingBox) -> List[DuctGeometry]:
        DB = revit_api.DB
        outline = DB.Outline(DB.XYZ(*bounding_box.min_point), DB.XYZ(*bounding_box.max_point))
        bb_filter = DB.BoundingBoxIntersectsFilter(outline)
        collector = (
            DB.FilteredElementCollector(self._doc)
            .OfClass(revit_api.Duct)
            .WherePasses(bb_filter)
        )

        ducts = []
        for revit_duct in collector:
            duct = duct_from_revit(revit_duct)
            if duct is not None:
                ducts.append(duct)
        return ducts

# File: src/round_opening_generator/core/model_types.py
"""
Data model for duct/wall penetration openings.

This module defines the value types exchanged between the model
repository, the opening algorithm and the placement service:

- PlanarFace: Planar boundary face of a wall solid with its (u, v) frame
- CurvedFace: Any non-planar face (kept so a wall's face list is complete)
- WallGeometry: Wall bounding box, orientation, width and solid faces
- DuctGeometry: Round duct diameter and connector endpoints
- UnboundLine: Infinite line through a duct's connectors
- OpeningSpec: Computed center, direction, diameter and depth of an opening

Host handles (Revit faces, walls, ducts) ride along in ``reference``
fields. They are borrowed views, valid for one generation pass only.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from src.round_opening_generator.config.units import ProjectUnits, convert_from_feet
from src.round_opening_generator.core.errors import GeometryError
from src.round_opening_generator.core.geometry import (
    BoundingBox,
    BoundingBoxUV,
    Point3,
    PointUV,
    Vector3,
    add,
    cross,
    dot,
    normalize,
    point_from_dict,
    point_to_dict,
    scale,
    subtract,
)


@dataclass
class PlanarFace:
    """
    Planar face of a wall solid.

    The face is described by a parametric frame (origin, x_vector,
    y_vector = normal x x_vector) and its outer boundary loop. Parametric
    coordinates (u, v) are distances along x_vector and y_vector from the
    origin, matching how Revit evaluates a PlanarFace.

    Attributes:
        id: Identifier of the face (unique within its wall)
        origin: A point on the plane (x, y, z)
        normal: Outward unit normal
        x_vector: In-plane direction of the u parameter
        boundary: Outer boundary loop in model coordinates, not closed
        inner_loops: Boundaries of holes in the face, same convention
        reference: Optional host face handle used when placing openings
    """
    id: str
    origin: Point3
    normal: Vector3
    x_vector: Vector3
    boundary: List[Point3]
    inner_loops: List[List[Point3]] = field(default_factory=list)
    reference: Any = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        try:
            self.normal = normalize(self.normal)
            # Project the u direction into the plane before normalizing
            self.x_vector = normalize(
                subtract(self.x_vector, scale(self.normal, dot(self.x_vector, self.normal)))
            )
        except ValueError as e:
            raise GeometryError(f"Face '{self.id}' has a degenerate frame: {e}")

        if len(self.boundary) < 3:
            raise GeometryError(
                f"Face '{self.id}' boundary needs at least 3 points, got {len(self.boundary)}"
            )

    @property
    def y_vector(self) -> Vector3:
        return cross(self.normal, self.x_vector)

    def to_uv(self, point: Point3) -> PointUV:
        """Parametric coordinates of a point projected onto the plane."""
        offset = subtract(point, self.origin)
        return (dot(offset, self.x_vector), dot(offset, self.y_vector))

    def evaluate(self, uv: PointUV) -> Point3:
        """Model point at parametric coordinates (u, v)."""
        return add(
            self.origin,
            add(scale(self.x_vector, uv[0]), scale(self.y_vector, uv[1])),
        )

    def compute_normal(self, uv: PointUV) -> Vector3:
        """Normal at (u, v); constant for a planar face."""
        return self.normal

    def boundary_uv(self) -> List[PointUV]:
        return [self.to_uv(p) for p in self.boundary]

    def inner_loops_uv(self) -> List[List[PointUV]]:
        return [[self.to_uv(p) for p in loop] for loop in self.inner_loops]

    def get_bounding_box(self) -> BoundingBoxUV:
        """Parametric bounding box of the boundary loop."""
        uvs = self.boundary_uv()
        return BoundingBoxUV(
            (min(uv[0] for uv in uvs), min(uv[1] for uv in uvs)),
            (max(uv[0] for uv in uvs), max(uv[1] for uv in uvs)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "origin": point_to_dict(self.origin),
            "normal": point_to_dict(self.normal),
            "x_vector": point_to_dict(self.x_vector),
            "boundary": [point_to_dict(p) for p in self.boundary],
            "inner_loops": [[point_to_dict(p) for p in loop] for loop in self.inner_loops],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlanarFace":
        return cls(
            id=data["id"],
            origin=point_from_dict(data["origin"]),
            normal=point_from_dict(data["normal"]),
            x_vector=point_from_dict(data["x_vector"]),
            boundary=[point_from_dict(p) for p in data["boundary"]],
            inner_loops=[
                [point_from_dict(p) for p in loop] for loop in data.get("inner_loops", [])
            ],
        )


@dataclass
class CurvedFace:
    """Non-planar face (cylindrical, ruled, ...). Never a side face."""
    id: str
    reference: Any = field(default=None, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "planar": False}


Face = Union[PlanarFace, CurvedFace]


@dataclass
class WallGeometry:
    """
    Geometry of a wall as seen by the opening generator.

    Attributes:
        id: Wall identifier (Revit ElementId as string)
        bounding_box: Model-space bounding box of the wall
        orientation: Horizontal unit vector across the wall thickness
        width: Wall thickness
        faces: All faces of the wall's solid geometry
        reference: Optional host wall handle
    """
    id: str
    bounding_box: BoundingBox
    orientation: Vector3
    width: float
    faces: List[Face] = field(default_factory=list)
    reference: Any = field(default=None, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "bounding_box": self.bounding_box.to_dict(),
            "orientation": point_to_dict(self.orientation),
            "width": self.width,
            "faces": [f.to_dict() for f in self.faces],
        }


@dataclass
class DuctGeometry:
    """
    Round duct segment.

    Attributes:
        id: Duct identifier
        diameter: Outside diameter of the duct
        connector_origins: Connector endpoint positions, in connector order
        reference: Optional host duct handle
    """
    id: str
    diameter: float
    connector_origins: List[Point3] = field(default_factory=list)
    reference: Any = field(default=None, repr=False, compare=False)

    @property
    def bounding_box(self) -> Optional[BoundingBox]:
        """Box around the connectors grown by the duct radius, None without connectors."""
        if not self.connector_origins:
            return None
        return BoundingBox.from_points(self.connector_origins).expanded(self.diameter / 2.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "diameter": self.diameter,
            "connector_origins": [point_to_dict(p) for p in self.connector_origins],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DuctGeometry":
        return cls(
            id=data["id"],
            diameter=float(data["diameter"]),
            connector_origins=[point_from_dict(p) for p in data.get("connector_origins", [])],
        )


@dataclass(frozen=True)
class UnboundLine:
    """Infinite line through origin along a unit direction."""
    origin: Point3
    direction: Vector3

    def point_at(self, t: float) -> Point3:
        return add(self.origin, scale(self.direction, t))


@dataclass
class OpeningSpec:
    """
    Placement parameters of one circular wall opening.

    Attributes:
        center: Insertion point, midway through the wall along the duct
        orientation: In-plane horizontal reference direction of the host face
        diameter: Opening diameter (never smaller than the duct diameter)
        depth: Opening depth (the wall width)
        wall_id: Host wall identifier
        duct_id: Penetrating duct identifier
    """
    center: Point3
    orientation: Vector3
    diameter: float
    depth: float
    wall_id: Optional[str] = None
    duct_id: Optional[str] = None

    def __post_init__(self):
        if self.diameter <= 0:
            raise GeometryError(f"Opening diameter must be positive, got {self.diameter}")
        if self.depth <= 0:
            raise GeometryError(f"Opening depth must be positive, got {self.depth}")

    def to_dict(self, units: Optional[Union[ProjectUnits, str]] = None) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            units: Optional target units; values are assumed to be in feet
                and converted when given

        Returns:
            Dictionary representation of the opening
        """
        def length_value(value: float) -> float:
            return convert_from_feet(value, units) if units is not None else value

        return {
            "wall_id": self.wall_id,
            "duct_id": self.duct_id,
            "center": {axis: length_value(v) for axis, v in point_to_dict(self.center).items()},
            "orientation": point_to_dict(self.orientation),
            "diameter": length_value(self.diameter),
            "depth": length_value(self.depth),
        }

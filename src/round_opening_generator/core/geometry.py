# File: src/round_opening_generator/core/geometry.py
"""
Lightweight 3D geometry primitives.

Points and vectors are plain (x, y, z) float tuples so they serialize
directly to JSON and never hold on to host (Revit) objects. This module
provides:

- Vector helpers (add, subtract, scale, dot, cross, length, normalize)
- BoundingBox: axis-aligned 3D box used for the broad-phase duct filter
- BoundingBoxUV: 2D parametric box of a planar face

All lengths are in model units (Revit internal units are feet).
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

Point3 = Tuple[float, float, float]
Vector3 = Tuple[float, float, float]
PointUV = Tuple[float, float]

BASIS_X: Vector3 = (1.0, 0.0, 0.0)
BASIS_Y: Vector3 = (0.0, 1.0, 0.0)
BASIS_Z: Vector3 = (0.0, 0.0, 1.0)

_ZERO_LENGTH = 1e-12


def add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def subtract(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(v: Vector3, factor: float) -> Vector3:
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def dot(a: Vector3, b: Vector3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Right-handed cross product a x b."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(v: Vector3) -> float:
    return math.sqrt(dot(v, v))


def normalize(v: Vector3) -> Vector3:
    """
    Scale a vector to unit length.

    Raises:
        ValueError: If the vector has (near) zero length
    """
    size = length(v)
    if size < _ZERO_LENGTH:
        raise ValueError(f"Cannot normalize zero-length vector {v}")
    return (v[0] / size, v[1] / size, v[2] / size)


def is_almost_equal(a: Vector3, b: Vector3, tolerance: float = 1e-9) -> bool:
    """Component-wise comparison within an absolute tolerance."""
    return all(abs(a[i] - b[i]) <= tolerance for i in range(3))


def point_to_dict(p: Point3) -> Dict[str, float]:
    return {"x": p[0], "y": p[1], "z": p[2]}


def point_from_dict(data: Dict[str, float]) -> Point3:
    return (float(data.get("x", 0.0)), float(data.get("y", 0.0)), float(data.get("z", 0.0)))


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned 3D bounding box.

    Attributes:
        min_point: Minimum corner (x, y, z)
        max_point: Maximum corner (x, y, z)
    """
    min_point: Point3
    max_point: Point3

    def __post_init__(self):
        if any(self.min_point[i] > self.max_point[i] for i in range(3)):
            raise ValueError(
                f"Bounding box min {self.min_point} exceeds max {self.max_point}"
            )

    @classmethod
    def from_points(cls, points: Iterable[Point3]) -> "BoundingBox":
        """
        Smallest box containing all points.

        Raises:
            ValueError: If no points are given
        """
        pts = list(points)
        if not pts:
            raise ValueError("Cannot build a bounding box from zero points")
        return cls(
            (min(p[0] for p in pts), min(p[1] for p in pts), min(p[2] for p in pts)),
            (max(p[0] for p in pts), max(p[1] for p in pts), max(p[2] for p in pts)),
        )

    def intersects(self, other: "BoundingBox") -> bool:
        """True if the boxes overlap or touch on every axis."""
        return all(
            self.min_point[i] <= other.max_point[i]
            and other.min_point[i] <= self.max_point[i]
            for i in range(3)
        )

    def expanded(self, margin: float) -> "BoundingBox":
        """Box grown by margin on every side."""
        return BoundingBox(
            subtract(self.min_point, (margin, margin, margin)),
            add(self.max_point, (margin, margin, margin)),
        )

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {"min": point_to_dict(self.min_point), "max": point_to_dict(self.max_point)}

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, float]]) -> "BoundingBox":
        return cls(point_from_dict(data["min"]), point_from_dict(data["max"]))


@dataclass(frozen=True)
class BoundingBoxUV:
    """2D bounding box in a face's parametric (u, v) space."""
    min_uv: PointUV
    max_uv: PointUV

    @property
    def center(self) -> PointUV:
        return (
            (self.min_uv[0] + self.max_uv[0]) / 2.0,
            (self.min_uv[1] + self.max_uv[1]) / 2.0,
        )

# File: src/round_opening_generator/core/__init__.py
"""
Core types of the round opening generator.

Classes:
    PlanarFace, CurvedFace: Wall solid faces
    WallGeometry, DuctGeometry: Model elements read by a repository
    UnboundLine: Duct centerline
    OpeningSpec: Computed opening parameters
    ModelRepository, PlacementService, AutoCreateObjects: Collaborator interfaces
"""

from .errors import (
    OpeningGenerationError,
    MalformedDuctError,
    GeometryError,
    PlacementError,
    ConfigurationError,
    RevitUnavailableError,
)
from .geometry import BoundingBox, BoundingBoxUV
from .model_types import (
    PlanarFace,
    CurvedFace,
    WallGeometry,
    DuctGeometry,
    UnboundLine,
    OpeningSpec,
)
from .interfaces import ModelRepository, PlacementService, AutoCreateObjects

__all__ = [
    "OpeningGenerationError",
    "MalformedDuctError",
    "GeometryError",
    "PlacementError",
    "ConfigurationError",
    "RevitUnavailableError",
    "BoundingBox",
    "BoundingBoxUV",
    "PlanarFace",
    "CurvedFace",
    "WallGeometry",
    "DuctGeometry",
    "UnboundLine",
    "OpeningSpec",
    "ModelRepository",
    "PlacementService",
    "AutoCreateObjects",
]

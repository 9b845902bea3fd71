# File: src/round_opening_generator/model/in_memory.py
"""
In-memory model repository and placement service.

Useful outside a host application: walls and ducts are plain data, the
broad-phase query is a bounding-box overlap test, and placed openings are
recorded in a list.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from src.round_opening_generator.core.geometry import BoundingBox
from src.round_opening_generator.core.interfaces import ModelRepository, PlacementService
from src.round_opening_generator.core.model_types import (
    DuctGeometry,
    OpeningSpec,
    PlanarFace,
    WallGeometry,
)

logger = logging.getLogger(__name__)


class InMemoryModelRepository(ModelRepository):
    """Model repository backed by lists of walls and ducts."""

    def __init__(
        self,
        walls: Optional[Iterable[WallGeometry]] = None,
        ducts: Optional[Iterable[DuctGeometry]] = None,
    ):
        self._walls: List[WallGeometry] = list(walls or [])
        self._ducts: List[DuctGeometry] = list(ducts or [])

    def add_wall(self, wall: WallGeometry) -> None:
        self._walls.append(wall)

    def add_duct(self, duct: DuctGeometry) -> None:
        self._ducts.append(duct)

    def get_walls(self) -> List[WallGeometry]:
        return list(self._walls)

    def find_ducts_intersecting(self, bounding_box: BoundingBox) -> List[DuctGeometry]:
        """Ducts whose box overlaps or touches the given box, in insertion order."""
        result = []
        for duct in self._ducts:
            duct_box = duct.bounding_box
            if duct_box is None:
                logger.warning(f"Duct {duct.id} has no connectors and cannot be located")
                continue
            if duct_box.intersects(bounding_box):
                result.append(duct)
        return result


@dataclass
class PlacedOpening:
    """An opening accepted by RecordingPlacementService."""
    id: str
    spec: OpeningSpec
    host_face_id: str


class RecordingPlacementService(PlacementService):
    """Placement service that keeps every opening it receives."""

    def __init__(self, id_prefix: str = "opening"):
        self._id_prefix = id_prefix
        self.placed: List[PlacedOpening] = []

    def place_opening(self, spec: OpeningSpec, host_face: PlanarFace) -> PlacedOpening:
        opening = PlacedOpening(
            id=f"{self._id_prefix}_{len(self.placed) + 1}",
            spec=spec,
            host_face_id=host_face.id,
        )
        self.placed.append(opening)
        logger.debug(f"Recorded {opening.id} on face {host_face.id}")
        return opening

# File: src/round_opening_generator/core/interfaces.py
"""
Collaborator interfaces of the opening generator.

The opening algorithm is pure geometry. Everything that touches a host
model sits behind one of these abstract classes:

- ModelRepository: yields walls and answers the broad-phase duct query
- PlacementService: turns an OpeningSpec into a host element
- AutoCreateObjects: single-operation strategy run by command entry points

Implementations are injected through constructors, so the same algorithm
serves every entry point (in-memory tests, Revit, batch jobs).
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, TYPE_CHECKING

from src.round_opening_generator.core.geometry import BoundingBox
from src.round_opening_generator.core.model_types import (
    DuctGeometry,
    OpeningSpec,
    PlanarFace,
    WallGeometry,
)

if TYPE_CHECKING:
    from src.round_opening_generator.openings.opening_creator import CreationReport


class ModelRepository(ABC):
    """Source of wall and duct geometry."""

    @abstractmethod
    def get_walls(self) -> Iterable[WallGeometry]:
        """Return every wall to examine."""
        ...

    @abstractmethod
    def find_ducts_intersecting(self, bounding_box: BoundingBox) -> List[DuctGeometry]:
        """
        Broad-phase query for ducts whose bounding box overlaps the given box.

        Args:
            bounding_box: Bounding box of the wall being processed

        Returns:
            Candidate ducts; exact crossing is decided later per face
        """
        ...


class PlacementService(ABC):
    """Sink for computed openings."""

    @abstractmethod
    def place_opening(self, spec: OpeningSpec, host_face: PlanarFace) -> Any:
        """
        Create an opening in the host model.

        Args:
            spec: Computed opening parameters
            host_face: Wall side face the opening is hosted on

        Returns:
            Host-specific handle of the created opening
        """
        ...


class AutoCreateObjects(ABC):
    """Compute and place openings for the active geometry set."""

    @abstractmethod
    def auto_create_objects(self) -> "CreationReport":
        ...

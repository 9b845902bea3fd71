# File: src/round_opening_generator/openings/opening_creator.py
"""
Round opening creation across a model.

RoundOpeningCreator walks every wall of a model repository and, for each
duct crossing it, computes a round opening and hands it to a placement
service:

1. Broad phase: ducts whose bounding box overlaps the wall's
2. Side faces: walls without exactly two side faces are skipped
3. Narrow phase: centerline crossings on the front and back faces
4. Opening parameters, then placement on the front face

Usage:
    from src.round_opening_generator.openings.opening_creator import RoundOpeningCreator

    creator = RoundOpeningCreator(repository, placement_service)
    report = creator.auto_create_objects()
    print(report.to_dict())
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.round_opening_generator.config.settings import OpeningSettings
from src.round_opening_generator.core.errors import OpeningGenerationError
from src.round_opening_generator.core.interfaces import (
    AutoCreateObjects,
    ModelRepository,
    PlacementService,
)
from src.round_opening_generator.core.model_types import (
    DuctGeometry,
    OpeningSpec,
    PlanarFace,
    WallGeometry,
)
from src.round_opening_generator.openings.duct_curve import find_duct_curve
from src.round_opening_generator.openings.face_selector import find_wall_side_faces
from src.round_opening_generator.openings.intersection import find_intersection
from src.round_opening_generator.openings.opening_calculator import (
    compute_opening_spec,
    get_ref_dir,
)

logger = logging.getLogger(__name__)


@dataclass
class CreationReport:
    """Outcome of one opening generation pass.

    Attributes:
        walls_examined: Walls read from the repository
        walls_without_candidates: Walls with no duct in the broad phase
        walls_skipped_non_simple: Walls whose side face count was not two
        pairs_without_intersection: Wall/duct pairs missing a face crossing
        openings: Opening specs handed to the placement service
        placed: Values returned by the placement service, same order as openings
        errors: One entry per failed wall/duct pair
    """
    walls_examined: int = 0
    walls_without_candidates: int = 0
    walls_skipped_non_simple: int = 0
    pairs_without_intersection: int = 0
    openings: List[OpeningSpec] = field(default_factory=list)
    placed: List[Any] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def status(self) -> str:
        if self.errors:
            return "partial"
        if not self.openings:
            return "no_openings"
        return "succeeded"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict for JSON output."""
        return {
            "status": self.status,
            "walls_examined": self.walls_examined,
            "walls_without_candidates": self.walls_without_candidates,
            "walls_skipped_non_simple": self.walls_skipped_non_simple,
            "pairs_without_intersection": self.pairs_without_intersection,
            "openings_count": len(self.openings),
            "openings": [spec.to_dict() for spec in self.openings],
            "errors": self.errors,
        }


class RoundOpeningCreator(AutoCreateObjects):
    """Places round openings where ducts cross walls.

    Args:
        repository: Source of walls and the broad-phase duct query
        placement_service: Receives each computed opening
        settings: Tolerances; defaults when omitted
    """

    def __init__(
        self,
        repository: ModelRepository,
        placement_service: PlacementService,
        settings: Optional[OpeningSettings] = None,
    ):
        self._repository = repository
        self._placement_service = placement_service
        self._settings = settings or OpeningSettings()

    def auto_create_objects(self) -> CreationReport:
        """Run one pass over every wall of the repository."""
        report = CreationReport()

        for wall in self._repository.get_walls():
            report.walls_examined += 1
            self._process_wall(wall, report)

        logger.info(
            f"Placed {len(report.openings)} openings on {report.walls_examined} walls "
            f"({report.walls_skipped_non_simple} non-simple, "
            f"{report.pairs_without_intersection} pairs without crossing, "
            f"{len(report.errors)} errors)"
        )
        return report

    def _process_wall(self, wall: WallGeometry, report: CreationReport) -> None:
        ducts = self._repository.find_ducts_intersecting(wall.bounding_box)
        if not ducts:
            report.walls_without_candidates += 1
            return

        logger.debug(f"Wall {wall.id}: {len(ducts)} candidate duct(s)")

        wall_faces = find_wall_side_faces(wall, self._settings)
        if len(wall_faces) != 2:
            logger.warning(
                f"Skipping wall {wall.id}: expected 2 side faces, found {len(wall_faces)}"
            )
            report.walls_skipped_non_simple += 1
            return

        front_face, back_face = wall_faces
        for duct in ducts:
            try:
                self._process_pair(wall, duct, front_face, back_face, report)
            except OpeningGenerationError as e:
                logger.error(f"Wall {wall.id}, duct {duct.id}: {e}")
                report.errors.append({
                    "wall_id": wall.id,
                    "duct_id": duct.id,
                    "error": e.to_dict(),
                })

    def _process_pair(
        self,
        wall: WallGeometry,
        duct: DuctGeometry,
        front_face: PlanarFace,
        back_face: PlanarFace,
        report: CreationReport,
    ) -> None:
        duct_curve = find_duct_curve(duct)
        front = find_intersection(duct_curve, front_face, self._settings)
        back = find_intersection(duct_curve, back_face, self._settings)

        spec = compute_opening_spec(
            front,
            back,
            get_ref_dir(front_face),
            wall.width,
            duct.diameter,
            wall_id=wall.id,
            duct_id=duct.id,
        )
        if spec is None:
            logger.debug(f"Duct {duct.id} does not cross both faces of wall {wall.id}")
            report.pairs_without_intersection += 1
            return

        placed = self._placement_service.place_opening(spec, front_face)
        report.openings.append(spec)
        report.placed.append(placed)

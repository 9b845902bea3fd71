# File: tests/openings/test_opening_creator.py
"""Tests for model-wide round opening creation."""

import math
from unittest.mock import MagicMock

import pytest

from src.round_opening_generator.core.errors import PlacementError
from src.round_opening_generator.core.interfaces import AutoCreateObjects, PlacementService
from src.round_opening_generator.core.model_types import CurvedFace, DuctGeometry
from src.round_opening_generator.model.in_memory import (
    InMemoryModelRepository,
    RecordingPlacementService,
)
from src.round_opening_generator.model.slab_wall import build_round_duct, build_slab_wall
from src.round_opening_generator.openings.opening_creator import (
    CreationReport,
    RoundOpeningCreator,
)


def run(walls, ducts, placement=None):
    placement = placement or RecordingPlacementService()
    repository = InMemoryModelRepository(walls, ducts)
    report = RoundOpeningCreator(repository, placement).auto_create_objects()
    return report, placement


class TestRoundOpeningCreator:
    """Test the wall/duct pipeline end to end."""

    def test_is_auto_create_objects(self):
        creator = RoundOpeningCreator(InMemoryModelRepository(), RecordingPlacementService())
        assert isinstance(creator, AutoCreateObjects)

    def test_perpendicular_duct(self, x_wall, perpendicular_duct):
        report, placement = run([x_wall], [perpendicular_duct])

        assert report.status == "succeeded"
        assert len(placement.placed) == 1
        spec = placement.placed[0].spec
        assert spec.center == pytest.approx((5.0, -0.5, 3.0))
        assert spec.diameter == 0.5
        assert spec.depth == 1.0
        assert spec.orientation == pytest.approx((-1.0, 0.0, 0.0))
        assert spec.wall_id == "wall_x"
        assert spec.duct_id == "duct_perp"

    def test_opening_hosted_on_front_face(self, x_wall, perpendicular_duct):
        _, placement = run([x_wall], [perpendicular_duct])
        assert placement.placed[0].host_face_id == "wall_x_side_pos"

    def test_skewed_duct(self, x_wall, skewed_duct):
        report, placement = run([x_wall], [skewed_duct])

        spec = placement.placed[0].spec
        # Crossings at (4.8, -0.5, 3.8) and (5.2, 0.5, 4.2)
        assert spec.center == pytest.approx((5.0, -0.5, 4.0))
        diff = math.sqrt(0.4 ** 2 + 0.4 ** 2)
        expected = math.sqrt(0.5 ** 2 + (0.5 * diff) ** 2) + diff
        assert spec.diameter == pytest.approx(expected)
        assert spec.diameter > skewed_duct.diameter

    def test_wall_along_y(self, y_wall):
        duct = build_round_duct("d_y", (15.0, 4.0, 2.0), (25.0, 4.0, 2.0), 0.5)
        _, placement = run([y_wall], [duct])

        spec = placement.placed[0].spec
        assert spec.center == pytest.approx((20.5, 4.0, 2.0))
        assert spec.orientation == pytest.approx((0.0, -1.0, 0.0))
        assert spec.diameter == 0.5

    def test_report_matches_placements(self, x_wall, perpendicular_duct, skewed_duct):
        report, placement = run([x_wall], [perpendicular_duct, skewed_duct])
        assert report.openings == [p.spec for p in placement.placed]
        assert report.placed == placement.placed

    def test_no_candidates(self, y_wall, perpendicular_duct):
        """Broad phase keeps ducts far from the wall out."""
        report, placement = run([y_wall], [perpendicular_duct])
        assert report.walls_without_candidates == 1
        assert placement.placed == []
        assert report.status == "no_openings"

    def test_broad_phase_excluded_duct_never_intersected(self, x_wall, perpendicular_duct, monkeypatch):
        """A duct outside the wall box never reaches face intersection."""
        far_duct = build_round_duct("far", (50.0, -5.0, 3.0), (50.0, 5.0, 3.0), 0.5)
        seen = []

        from src.round_opening_generator.openings import opening_creator
        real_find_duct_curve = opening_creator.find_duct_curve

        def spy(duct):
            seen.append(duct.id)
            return real_find_duct_curve(duct)

        monkeypatch.setattr(opening_creator, "find_duct_curve", spy)
        run([x_wall], [far_duct, perpendicular_duct])

        assert seen == ["duct_perp"]

    def test_duct_parallel_to_wall_skipped(self, x_wall):
        """Inside the wall box but never crossing the side faces."""
        duct = build_round_duct("along", (1.0, 0.0, 3.0), (9.0, 0.0, 3.0), 0.5)
        report, placement = run([x_wall], [duct])
        assert report.pairs_without_intersection == 1
        assert placement.placed == []

    def test_duct_passing_above_side_faces_skipped(self, x_wall):
        """A duct whose box touches the wall box but crosses above it."""
        duct = build_round_duct("above", (5.0, -5.0, 10.2), (5.0, 5.0, 10.2), 0.5)
        report, placement = run([x_wall], [duct])
        assert report.pairs_without_intersection == 1
        assert placement.placed == []

    def test_non_simple_wall_skipped(self):
        """Walls without exactly two side faces get no openings."""
        diagonal = build_slab_wall("diag", (0.0, 0.0), (10.0, 10.0), width=1.0, height=10.0)
        duct = build_round_duct("d", (0.0, 10.0, 3.0), (10.0, 0.0, 3.0), 0.5)
        report, placement = run([diagonal], [duct])

        assert report.walls_skipped_non_simple == 1
        assert placement.placed == []

    def test_wall_with_one_side_face_skipped(self, x_wall, perpendicular_duct):
        x_wall.faces = [f for f in x_wall.faces if f.id != "wall_x_side_neg"]
        x_wall.faces.append(CurvedFace("curved"))
        report, placement = run([x_wall], [perpendicular_duct])
        assert report.walls_skipped_non_simple == 1
        assert placement.placed == []

    def test_malformed_duct_does_not_stop_run(self, x_wall, perpendicular_duct):
        """A duct with one connector is reported and the next duct still placed."""
        broken = DuctGeometry("broken", 0.5, [(5.0, 0.0, 5.0)])
        report, placement = run([x_wall], [broken, perpendicular_duct])

        assert len(placement.placed) == 1
        assert report.status == "partial"
        assert report.errors[0]["wall_id"] == "wall_x"
        assert report.errors[0]["duct_id"] == "broken"
        assert report.errors[0]["error"]["error"] == "MalformedDuctError"

    def test_placement_error_recorded(self, x_wall, perpendicular_duct, skewed_duct):
        placement = MagicMock(spec=PlacementService)
        placement.place_opening.side_effect = [PlacementError("rejected"), "instance_2"]

        report, _ = run([x_wall], [perpendicular_duct, skewed_duct], placement)

        assert placement.place_opening.call_count == 2
        assert report.placed == ["instance_2"]
        assert len(report.errors) == 1
        assert report.errors[0]["duct_id"] == "duct_perp"

    def test_unexpected_errors_propagate(self, x_wall, perpendicular_duct):
        """Only opening generation errors are absorbed per duct."""
        placement = MagicMock(spec=PlacementService)
        placement.place_opening.side_effect = RuntimeError("host crashed")
        with pytest.raises(RuntimeError):
            run([x_wall], [perpendicular_duct], placement)

    def test_multiple_walls(self, x_wall, y_wall, perpendicular_duct):
        y_duct = build_round_duct("d_y", (15.0, 4.0, 2.0), (25.0, 4.0, 2.0), 0.5)
        report, placement = run([x_wall, y_wall], [perpendicular_duct, y_duct])

        assert report.walls_examined == 2
        assert {(p.spec.wall_id, p.spec.duct_id) for p in placement.placed} == {
            ("wall_x", "duct_perp"),
            ("wall_y", "d_y"),
        }

    def test_wall_order_does_not_change_results(self, x_wall, y_wall, perpendicular_duct):
        y_duct = build_round_duct("d_y", (15.0, 4.0, 2.0), (25.0, 4.0, 2.0), 0.5)
        first, _ = run([x_wall, y_wall], [perpendicular_duct, y_duct])
        second, _ = run([y_wall, x_wall], [y_duct, perpendicular_duct])

        def key(spec):
            return spec.wall_id

        assert sorted(first.openings, key=key) == sorted(second.openings, key=key)


class TestCreationReport:
    def test_empty_report(self):
        report = CreationReport()
        assert report.status == "no_openings"
        assert report.to_dict()["openings_count"] == 0

    def test_to_dict(self, x_wall, perpendicular_duct):
        report, _ = run([x_wall], [perpendicular_duct])
        data = report.to_dict()
        assert data["status"] == "succeeded"
        assert data["walls_examined"] == 1
        assert data["openings_count"] == 1
        assert data["openings"][0]["duct_id"] == "duct_perp"
        assert data["errors"] == []

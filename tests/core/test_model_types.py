# File: tests/core/test_model_types.py
"""Tests for faces, walls, ducts and opening specs."""

import pytest

from src.round_opening_generator.core.errors import GeometryError
from src.round_opening_generator.core.model_types import (
    CurvedFace,
    DuctGeometry,
    OpeningSpec,
    PlanarFace,
    UnboundLine,
)


@pytest.fixture
def square_face():
    """1x1 face in the plane y = 0 facing -Y."""
    return PlanarFace(
        id="face_1",
        origin=(0.0, 0.0, 0.0),
        normal=(0.0, -2.0, 0.0),  # Normalized on creation
        x_vector=(1.0, 0.0, 0.0),
        boundary=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 0.0, 1.0), (0.0, 0.0, 1.0)],
    )


class TestPlanarFace:
    """Test cases for PlanarFace."""

    def test_normal_is_normalized(self, square_face):
        assert square_face.normal == pytest.approx((0.0, -1.0, 0.0))

    def test_y_vector_completes_frame(self, square_face):
        """y = normal x x_vector points up for a -Y facing face."""
        assert square_face.y_vector == pytest.approx((0.0, 0.0, 1.0))

    def test_x_vector_projected_into_plane(self):
        """An x_vector with a normal component is projected onto the plane."""
        face = PlanarFace(
            id="f",
            origin=(0.0, 0.0, 0.0),
            normal=(0.0, 0.0, 1.0),
            x_vector=(1.0, 0.0, 1.0),
            boundary=[(0, 0, 0), (1, 0, 0), (1, 1, 0)],
        )
        assert face.x_vector == pytest.approx((1.0, 0.0, 0.0))

    def test_to_uv_and_evaluate(self, square_face):
        """evaluate() inverts to_uv() for points on the plane."""
        point = (0.25, 0.0, 0.75)
        uv = square_face.to_uv(point)
        assert uv == pytest.approx((0.25, 0.75))
        assert square_face.evaluate(uv) == pytest.approx(point)

    def test_bounding_box_center(self, square_face):
        bbox = square_face.get_bounding_box()
        assert bbox.min_uv == pytest.approx((0.0, 0.0))
        assert bbox.max_uv == pytest.approx((1.0, 1.0))
        assert bbox.center == pytest.approx((0.5, 0.5))

    def test_compute_normal_is_constant(self, square_face):
        assert square_face.compute_normal((0.1, 0.9)) == square_face.normal

    def test_too_few_boundary_points(self):
        with pytest.raises(GeometryError, match="at least 3"):
            PlanarFace("f", (0, 0, 0), (0, 0, 1), (1, 0, 0), [(0, 0, 0), (1, 0, 0)])

    def test_degenerate_frame(self):
        """x_vector parallel to the normal cannot define a frame."""
        with pytest.raises(GeometryError, match="degenerate"):
            PlanarFace("f", (0, 0, 0), (0, 0, 1), (0, 0, 1), [(0, 0, 0), (1, 0, 0), (1, 1, 0)])

    def test_dict_round_trip(self, square_face):
        restored = PlanarFace.from_dict(square_face.to_dict())
        assert restored == square_face

    def test_inner_loops_round_trip(self, square_face):
        square_face.inner_loops = [[(0.4, 0.0, 0.4), (0.6, 0.0, 0.4), (0.6, 0.0, 0.6)]]
        data = square_face.to_dict()
        assert len(data["inner_loops"]) == 1
        assert PlanarFace.from_dict(data).inner_loops == square_face.inner_loops

    def test_inner_loops_default_empty(self, square_face):
        assert square_face.inner_loops == []
        assert square_face.inner_loops_uv() == []

    def test_reference_not_compared(self, square_face):
        """Host handles do not take part in equality."""
        other = PlanarFace.from_dict(square_face.to_dict())
        other.reference = object()
        assert other == square_face


class TestCurvedFace:
    def test_to_dict(self):
        assert CurvedFace("c1").to_dict() == {"id": "c1", "planar": False}


class TestDuctGeometry:
    """Test cases for DuctGeometry."""

    def test_bounding_box_grows_by_radius(self):
        duct = DuctGeometry("d1", 0.5, [(0.0, 0.0, 0.0), (10.0, 0.0, 0.0)])
        box = duct.bounding_box
        assert box.min_point == pytest.approx((-0.25, -0.25, -0.25))
        assert box.max_point == pytest.approx((10.25, 0.25, 0.25))

    def test_bounding_box_without_connectors(self):
        assert DuctGeometry("d1", 0.5).bounding_box is None

    def test_dict_round_trip(self):
        duct = DuctGeometry("d1", 0.5, [(0.0, 1.0, 2.0), (3.0, 4.0, 5.0)])
        assert DuctGeometry.from_dict(duct.to_dict()) == duct


class TestUnboundLine:
    def test_point_at_negative_parameter(self):
        """The line extends behind its origin."""
        line = UnboundLine((1.0, 1.0, 1.0), (1.0, 0.0, 0.0))
        assert line.point_at(-3.0) == (-2.0, 1.0, 1.0)


class TestOpeningSpec:
    """Test cases for OpeningSpec."""

    def test_rejects_non_positive_diameter(self):
        with pytest.raises(GeometryError, match="diameter"):
            OpeningSpec((0, 0, 0), (1, 0, 0), diameter=0.0, depth=1.0)

    def test_rejects_non_positive_depth(self):
        with pytest.raises(GeometryError, match="depth"):
            OpeningSpec((0, 0, 0), (1, 0, 0), diameter=1.0, depth=-1.0)

    def test_to_dict_in_feet(self):
        spec = OpeningSpec((1.0, 2.0, 3.0), (1.0, 0.0, 0.0), 0.5, 1.0, "w1", "d1")
        data = spec.to_dict()
        assert data["wall_id"] == "w1"
        assert data["duct_id"] == "d1"
        assert data["center"] == {"x": 1.0, "y": 2.0, "z": 3.0}
        assert data["diameter"] == 0.5

    def test_to_dict_in_millimeters(self):
        """Lengths convert; the orientation stays a unit vector."""
        spec = OpeningSpec((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), 1.0, 0.5)
        data = spec.to_dict(units="millimeters")
        assert data["center"]["x"] == pytest.approx(304.8)
        assert data["diameter"] == pytest.approx(304.8)
        assert data["depth"] == pytest.approx(152.4)
        assert data["orientation"] == {"x": 0.0, "y": 1.0, "z": 0.0}

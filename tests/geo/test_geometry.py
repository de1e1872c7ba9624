"""Tests for geometry module."""

from domain.grid_types import ProjectedExtent
from geo.geometry import clip_segment, point_in_extent

RECT = ProjectedExtent(0.0, 0.0, 100.0, 50.0)


class TestPointInExtent:
    """Tests for point_in_extent function."""

    def test_inside(self):
        """Interior point is inside."""
        assert point_in_extent((10.0, 10.0), RECT)

    def test_on_boundary(self):
        """Corner point counts as inside."""
        assert point_in_extent((100.0, 50.0), RECT)

    def test_outside(self):
        """Point just past the east edge is outside."""
        assert not point_in_extent((100.1, 10.0), RECT)


class TestClipSegment:
    """Tests for clip_segment function."""

    def test_inside_unchanged(self):
        """Segment fully inside is returned as is."""
        assert clip_segment((10.0, 10.0), (20.0, 30.0), RECT) == (
            (10.0, 10.0),
            (20.0, 30.0),
        )

    def test_horizontal_crossing(self):
        """Clipped endpoints take the rectangle's literal edge values."""
        start, end = clip_segment((-50.0, 25.0), (150.0, 25.0), RECT)
        assert start == (0.0, 25.0)
        assert end == (100.0, 25.0)

    def test_vertical_crossing(self):
        """Vertical segment is cut at the bottom and top edges."""
        start, end = clip_segment((40.0, -10.0), (40.0, 80.0), RECT)
        assert start == (40.0, 0.0)
        assert end == (40.0, 50.0)

    def test_diagonal_partial(self):
        """Segment leaving through the east edge keeps its inner start."""
        start, end = clip_segment((50.0, 25.0), (150.0, 60.0), RECT)
        assert start == (50.0, 25.0)
        assert end[0] == 100.0
        assert 25.0 < end[1] < 50.0

    def test_miss_parallel(self):
        """Vertical segment left of the rectangle returns None."""
        assert clip_segment((-10.0, 0.0), (-10.0, 50.0), RECT) is None

    def test_miss_diagonal(self):
        """Diagonal passing the top-right corner returns None."""
        assert clip_segment((95.0, 70.0), (115.0, 45.0), RECT) is None

    def test_touching_corner(self):
        """Segment through the top-left corner starts on the corner."""
        result = clip_segment((-10.0, 60.0), (10.0, 40.0), RECT)
        assert result is not None
        start, end = result
        assert start == (0.0, 50.0)

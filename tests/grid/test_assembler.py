"""Tests for the full grid pass."""

import math

import pytest

from domain.exceptions import (
    InvalidExtentError,
    InvalidResolutionError,
    UnsupportedIntervalError,
)
from grid.assembler import GridAssembler, compute_grid
from grid.intervals import ZONE_ONLY
from shared.constants import AnchorClass, GridAxis, LineRole


@pytest.fixture
def assembler(transforms):
    return GridAssembler(transforms)


def _texts(result, anchor_class):
    return [lb.text for lb in result.labels if lb.anchor_class is anchor_class]


class TestNorthernFrance:
    """Viewport lon 0..1, lat 50..51 (zone 31U)."""

    def test_kilometre_grid(self, assembler, northern_france):
        """Resolution 20 gives a 1 km grid in zone 31."""
        result = assembler.compute(northern_france, 20.0)
        assert result.zones == (31,)
        assert result.interval == 1_000

        eastings = result.lines_for(31, GridAxis.EASTING)
        northings = result.lines_for(31, GridAxis.NORTHING)
        assert eastings and northings
        for lines in (eastings, northings):
            values = [ln.value for ln in lines]
            assert all(b - a == 1_000 for a, b in zip(values, values[1:]))

    def test_kilometre_grid_square_letters(self, assembler, northern_france):
        """Square letters and zone label of the 1 km grid."""
        result = assembler.compute(northern_france, 20.0)
        assert _texts(result, AnchorClass.EASTING_SQUARE_END) == ['B']
        assert _texts(result, AnchorClass.EASTING_SQUARE_START) == ['C']
        assert _texts(result, AnchorClass.NORTHING_SQUARE_END) == ['R']
        assert _texts(result, AnchorClass.NORTHING_SQUARE_START) == ['S']
        assert _texts(result, AnchorClass.ZONE) == ['31U']

    def test_resolution_50_gives_10km(self, assembler, northern_france):
        """Resolution 50 falls into the 10 km step."""
        result = assembler.compute(northern_france, 50.0)
        assert result.interval == 10_000
        values = [ln.value for ln in result.lines_for(31, GridAxis.EASTING)]
        assert all(v % 10_000 == 0 for v in values)

    def test_zone_boundary_first(self, assembler, northern_france):
        """The zone boundary leads the line list."""
        result = assembler.compute(northern_france, 20.0)
        assert result.lines[0].role is LineRole.ZONE_BOUNDARY
        assert len(result.zone_lines) == 1

    def test_grid_lines_clipped_to_viewport(self, assembler, northern_france):
        """Grid line endpoints stay inside the viewport."""
        result = assembler.compute(northern_france, 20.0)
        eps = 1e-6
        for line in result.grid_lines:
            for x, y in line.points:
                assert northern_france.min_x - eps <= x <= northern_france.max_x + eps
                assert northern_france.min_y - eps <= y <= northern_france.max_y + eps

    def test_full_zone_clipped_vertically(self, assembler, make_extent):
        """A viewport spanning exactly one zone keeps lines inside its height."""
        extent = make_extent(0.0, 50.0, 6.0, 51.0)
        result = assembler.compute(extent, 50.0)
        assert 31 in result.zones
        assert result.lines_for(31, GridAxis.EASTING)
        for line in result.grid_lines:
            for _, y in line.points:
                assert extent.min_y <= y <= extent.max_y

    def test_idempotent(self, assembler, northern_france):
        """Same input gives an equal result."""
        first = assembler.compute(northern_france, 20.0)
        second = assembler.compute(northern_france, 20.0)
        assert first == second

    def test_extent_as_sequence(self, assembler, northern_france):
        """A plain 4-sequence is accepted as extent."""
        result = assembler.compute(list(northern_france.as_tuple()), 20.0)
        assert result.extent == northern_france


class TestZoneOnly:
    """Coarse resolutions draw zone boundaries only."""

    def test_only_zone_output(self, assembler, northern_france):
        """Only the boundary and zone label are produced."""
        result = assembler.compute(northern_france, 5_000.0)
        assert result.interval is ZONE_ONLY
        assert [ln.role for ln in result.lines] == [LineRole.ZONE_BOUNDARY]
        assert [lb.text for lb in result.labels] == ['31U']

    def test_without_zone_labels(self, transforms, northern_france):
        """Zone labels can be switched off."""
        result = GridAssembler(transforms, zone_labels=False).compute(
            northern_france, 5_000.0
        )
        assert result.labels == ()

    def test_whole_world(self, assembler):
        """World view emits all 60 zone boundaries and no grid lines."""
        half_world = 20_037_508.342789244
        extent = (-half_world, -15_000_000.0, half_world, 15_000_000.0)
        result = assembler.compute(extent, 40_000.0)
        assert result.zones == tuple(range(1, 61))
        assert len(result.zone_lines) == 60
        assert result.grid_lines == ()


class TestMultiZone:
    """Viewport straddling the 6°E zone edge."""

    def test_zones_in_order(self, assembler, make_extent):
        """Lines are grouped by zone in ascending order."""
        result = assembler.compute(make_extent(5.0, 50.0, 7.0, 51.0), 50.0)
        assert result.zones == (31, 32)
        zones = [ln.zone for ln in result.lines]
        assert zones == sorted(zones)
        assert len(result.zone_lines) == 2
        assert result.lines_for(31, GridAxis.EASTING)
        assert result.lines_for(32, GridAxis.EASTING)

    def test_zone_labels(self, assembler, make_extent):
        """Each visible zone gets its own label."""
        result = assembler.compute(make_extent(5.0, 50.0, 7.0, 51.0), 50.0)
        assert _texts(result, AnchorClass.ZONE) == ['31U', '32U']


class TestEquator:
    """Viewport crossing the equator in zone 32."""

    def test_square_letters_at_equator(self, assembler, make_extent):
        """Row F starts at the equator in even zones."""
        result = assembler.compute(make_extent(10.0, -1.0, 11.0, 1.0), 50.0)
        assert result.zones == (32,)
        assert 'F' in _texts(result, AnchorClass.NORTHING_SQUARE_START)

    def test_southern_labels_are_digits(self, assembler, make_extent):
        """Southern northing labels stay numeric."""
        result = assembler.compute(make_extent(10.0, -1.0, 11.0, 1.0), 50.0)
        texts = _texts(result, AnchorClass.NORTHING)
        assert texts
        assert all(t.isdigit() for t in texts)


class TestCustomIntervalFn:
    """Host-supplied interval functions."""

    def test_100km_only(self, transforms, make_extent):
        """A 100 km step draws square lines without digit labels."""
        assembler = GridAssembler(transforms, lambda r: 100_000)
        result = assembler.compute(make_extent(0.0, 48.0, 4.0, 52.0), 20.0)
        assert result.interval == 100_000
        assert all(ln.value % 100_000 == 0 for ln in result.grid_lines)
        assert not _texts(result, AnchorClass.EASTING)
        assert not _texts(result, AnchorClass.NORTHING)

    def test_unsupported(self, transforms, northern_france):
        """Interval outside the ladder is rejected."""
        assembler = GridAssembler(transforms, lambda r: 5_000)
        with pytest.raises(UnsupportedIntervalError):
            assembler.compute(northern_france, 20.0)


class TestInvalidInput:
    """Invalid viewports and resolutions."""

    def test_inverted_extent(self, assembler):
        """min_x > max_x is rejected."""
        with pytest.raises(InvalidExtentError):
            assembler.compute((1.0, 0.0, 0.0, 1.0), 20.0)

    def test_non_finite_extent(self, assembler):
        """NaN in the extent is rejected."""
        with pytest.raises(InvalidExtentError):
            assembler.compute((0.0, 0.0, math.nan, 1.0), 20.0)

    def test_wrong_length(self, assembler):
        """Extent needs exactly four numbers."""
        with pytest.raises(InvalidExtentError):
            assembler.compute((0.0, 0.0, 1.0), 20.0)

    @pytest.mark.parametrize('resolution', [0.0, -5.0, math.inf])
    def test_bad_resolution(self, assembler, northern_france, resolution):
        """Resolution must be positive and finite."""
        with pytest.raises(InvalidResolutionError):
            assembler.compute(northern_france, resolution)

    def test_errors_are_value_errors(self, assembler):
        """Input errors are catchable as ValueError."""
        with pytest.raises(ValueError):
            assembler.compute((1.0, 0.0, 0.0, 1.0), 20.0)


def test_compute_grid_helper(transforms, northern_france):
    """Module-level helper runs a full pass."""
    result = compute_grid(northern_france, 20.0, transforms)
    assert result.interval == 1_000
    assert result.zones == (31,)

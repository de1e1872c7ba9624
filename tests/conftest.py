"""Pytest configuration and fixtures for USNG grid tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from domain.grid_types import ProjectedExtent  # noqa: E402
from geo.transforms import PyprojGridTransforms  # noqa: E402


@pytest.fixture(scope='session')
def transforms():
    """Web Mercator display transforms shared by the whole session."""
    return PyprojGridTransforms()


@pytest.fixture
def make_extent(transforms):
    """Build a projected extent from a WGS84 bounding box."""

    def _make(min_lon, min_lat, max_lon, max_lat):
        min_x, min_y = transforms.geo_to_projected(min_lon, min_lat)
        max_x, max_y = transforms.geo_to_projected(max_lon, max_lat)
        return ProjectedExtent(min_x, min_y, max_x, max_y)

    return _make


@pytest.fixture
def northern_france(make_extent):
    """One-degree viewport lon 0..1, lat 50..51, entirely in zone 31."""
    return make_extent(0.0, 50.0, 1.0, 51.0)

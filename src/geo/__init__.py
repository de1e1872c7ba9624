"""Geo module - UTM zones, coordinate transforms and geometry utilities."""

from .geometry import clip_segment, point_in_extent
from .transforms import (
    GridTransforms,
    PyprojGridTransforms,
    UTMCoordinate,
    extent_to_geo,
)
from .utm import (
    build_utm_crs,
    central_meridian,
    latitude_band,
    zone_for_longitude,
    zone_lon_bounds,
)
from .zones import zones_in_extent

__all__ = [
    'GridTransforms',
    'PyprojGridTransforms',
    'UTMCoordinate',
    'build_utm_crs',
    'central_meridian',
    'clip_segment',
    'extent_to_geo',
    'latitude_band',
    'point_in_extent',
    'zone_for_longitude',
    'zone_lon_bounds',
    'zones_in_extent',
]

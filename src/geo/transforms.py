"""Coordinate transformations between WGS84, UTM and the display projection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from pyproj import CRS, Transformer

from domain.grid_types import GeoExtent, ProjectedExtent
from geo.utm import build_utm_crs, zone_for_longitude
from shared.constants import (
    DEFAULT_DISPLAY_CRS,
    WGS84_CODE,
    WORLD_EDGE_EPSILON_DEG,
    WORLD_LON_MAX,
)

logger = logging.getLogger(__name__)

# Географическая WGS84
crs_wgs84 = CRS.from_epsg(WGS84_CODE)


@dataclass(frozen=True)
class UTMCoordinate:
    """
    Point in a UTM zone.

    ``northern=False`` means the southern-hemisphere frame with the
    10 000 000 m false northing.
    """

    zone: int
    easting: float
    northing: float
    northern: bool = True


class GridTransforms(Protocol):
    """
    Bidirectional mappings the grid generator depends on.

    Precondition for every method: longitude within ±180° and latitude
    within ±90°; nothing beyond that range is validated here.
    """

    def geo_to_utm(
        self,
        lon: float,
        lat: float,
        zone: int | None = None,
        *,
        northern: bool | None = None,
    ) -> UTMCoordinate: ...

    def utm_to_geo(self, coord: UTMCoordinate) -> tuple[float, float]: ...

    def geo_to_projected(self, lon: float, lat: float) -> tuple[float, float]: ...

    def projected_to_geo(self, x: float, y: float) -> tuple[float, float]: ...


@lru_cache(maxsize=None)
def _utm_transformers(zone: int, south: bool) -> tuple[Transformer, Transformer]:
    """(WGS84 -> UTM, UTM -> WGS84) transformers for a zone/hemisphere."""
    crs_utm = build_utm_crs(zone, south=south)
    t_utm_from_wgs = Transformer.from_crs(crs_wgs84, crs_utm, always_xy=True)
    t_wgs_from_utm = Transformer.from_crs(crs_utm, crs_wgs84, always_xy=True)
    return t_utm_from_wgs, t_wgs_from_utm


class PyprojGridTransforms:
    """Default :class:`GridTransforms` backed by pyproj."""

    def __init__(self, display_crs: str = DEFAULT_DISPLAY_CRS):
        """
        Build display transformers.

        Args:
            display_crs: Any CRS definition accepted by
                ``pyproj.CRS.from_user_input`` (EPSG code, WKT, proj4).

        """
        self.crs_display = CRS.from_user_input(display_crs)
        # Important: always_xy=True keeps (lon, lat) / (x, y) ordering
        # regardless of the axis order declared by the CRS.
        self.t_display_from_wgs = Transformer.from_crs(
            crs_wgs84, self.crs_display, always_xy=True
        )
        self.t_wgs_from_display = Transformer.from_crs(
            self.crs_display, crs_wgs84, always_xy=True
        )
        logger.debug('Display CRS: %s', self.crs_display.name)

    def geo_to_utm(
        self,
        lon: float,
        lat: float,
        zone: int | None = None,
        *,
        northern: bool | None = None,
    ) -> UTMCoordinate:
        """
        Convert WGS84 to UTM.

        Args:
            lon: Longitude, degrees.
            lat: Latitude, degrees.
            zone: Target zone; derived from ``lon`` when omitted. Points on a
                zone edge may be expressed in either neighbouring zone.
            northern: Hemisphere frame; derived from ``lat`` when omitted.

        """
        if zone is None:
            zone = zone_for_longitude(lon)
        if northern is None:
            northern = lat >= 0
        t_utm_from_wgs, _ = _utm_transformers(zone, not northern)
        easting, northing = t_utm_from_wgs.transform(lon, lat)
        return UTMCoordinate(zone, easting, northing, northern)

    def utm_to_geo(self, coord: UTMCoordinate) -> tuple[float, float]:
        """Convert UTM to WGS84 ``(lon, lat)``."""
        _, t_wgs_from_utm = _utm_transformers(coord.zone, not coord.northern)
        lon, lat = t_wgs_from_utm.transform(coord.easting, coord.northing)
        return lon, lat

    def geo_to_projected(self, lon: float, lat: float) -> tuple[float, float]:
        x, y = self.t_display_from_wgs.transform(lon, lat)
        return x, y

    def projected_to_geo(self, x: float, y: float) -> tuple[float, float]:
        lon, lat = self.t_wgs_from_display.transform(x, y)
        return lon, lat


def extent_to_geo(extent: ProjectedExtent, transforms: GridTransforms) -> GeoExtent:
    """
    Convert a projected viewport to degrees via its two corners.

    Raises:
        InvalidExtentError: If the corners fall outside the world or the
            projection inverts the rectangle.

    """
    min_lon, min_lat = transforms.projected_to_geo(extent.min_x, extent.min_y)
    max_lon, max_lat = transforms.projected_to_geo(extent.max_x, extent.max_y)
    return GeoExtent(
        _snap_world_edge(min_lon), min_lat, _snap_world_edge(max_lon), max_lat
    )


def _snap_world_edge(lon: float) -> float:
    # x = ±20037508.34 in Web Mercator comes back as ±180.00000000000003
    if abs(abs(lon) - WORLD_LON_MAX) < WORLD_EDGE_EPSILON_DEG:
        return WORLD_LON_MAX if lon > 0 else -WORLD_LON_MAX
    return lon

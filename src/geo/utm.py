from __future__ import annotations

import math
from functools import lru_cache

from pyproj import CRS
from pyproj.exceptions import CRSError

from shared.constants import (
    EPSG_UTM_NORTH_BASE,
    EPSG_UTM_SOUTH_BASE,
    LATITUDE_BAND_HEIGHT_DEG,
    LATITUDE_BAND_MAX_DEG,
    LATITUDE_BAND_MIN_DEG,
    LATITUDE_BAND_X_START_DEG,
    LATITUDE_BANDS,
    MAX_UTM_ZONE,
    UTM_FALSE_EASTING,
    UTM_FALSE_NORTHING_SOUTH,
    UTM_LON_ORIGIN_DEG,
    UTM_ZONE_WIDTH_DEG,
)


def validate_zone(zone: int) -> None:
    """Raise ``ValueError`` if ``zone`` is not a UTM zone number (1..60)."""
    if not 1 <= zone <= MAX_UTM_ZONE:
        msg = f'Номер зоны UTM вне диапазона 1..{MAX_UTM_ZONE}: {zone}'
        raise ValueError(msg)


def zone_for_longitude(lon: float) -> int:
    """
    Determine the UTM zone number containing ``lon``.

    A longitude lying exactly on a zone edge belongs to the eastern zone;
    +180° is folded into zone 60.
    """
    zone = int(math.floor((lon - UTM_LON_ORIGIN_DEG) / UTM_ZONE_WIDTH_DEG)) + 1
    return max(1, min(MAX_UTM_ZONE, zone))


def zone_lon_bounds(zone: int) -> tuple[float, float]:
    """Return (west, east) longitudes of a zone in degrees."""
    west = UTM_LON_ORIGIN_DEG + UTM_ZONE_WIDTH_DEG * (zone - 1)
    return float(west), float(west + UTM_ZONE_WIDTH_DEG)


def central_meridian(zone: int) -> float:
    west, east = zone_lon_bounds(zone)
    return (west + east) / 2


def latitude_band(lat: float) -> str | None:
    """
    Latitude band letter for ``lat`` or ``None`` outside 80°S..84°N.

    Bands are 8° tall except ``X`` which spans 72°..84°.
    """
    if lat < LATITUDE_BAND_MIN_DEG or lat > LATITUDE_BAND_MAX_DEG:
        return None
    if lat >= LATITUDE_BAND_X_START_DEG:
        return LATITUDE_BANDS[-1]
    idx = int((lat - LATITUDE_BAND_MIN_DEG) // LATITUDE_BAND_HEIGHT_DEG)
    return LATITUDE_BANDS[idx]


@lru_cache(maxsize=2 * MAX_UTM_ZONE)
def build_utm_crs(zone: int, *, south: bool = False) -> CRS:
    """
    Build pyproj CRS for a WGS84 / UTM zone.

    Tries EPSG codes first; falls back to proj4 on the WGS84 ellipsoid.
    """
    validate_zone(zone)
    base = EPSG_UTM_SOUTH_BASE if south else EPSG_UTM_NORTH_BASE
    try:
        return CRS.from_epsg(base + zone)
    except CRSError:
        y_0 = UTM_FALSE_NORTHING_SOUTH if south else 0
        proj4 = (
            f'+proj=tmerc +lat_0=0 +lon_0={central_meridian(zone)} +k=0.9996 '
            f'+x_0={UTM_FALSE_EASTING} +y_0={y_0} +datum=WGS84 +units=m '
            '+no_defs +type=crs'
        )
        return CRS.from_proj4(proj4)

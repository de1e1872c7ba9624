from __future__ import annotations

import math

from domain.grid_types import GeoExtent
from shared.constants import MAX_UTM_ZONE, UTM_LON_ORIGIN_DEG, UTM_ZONE_WIDTH_DEG


def zones_in_extent(extent84: GeoExtent) -> list[int]:
    """
    Ascending UTM zone numbers intersecting the extent.

    Runs from ``floor((180 + minLon) / 6) + 1`` up to, but excluding,
    ``ceil((180 + maxLon) / 6) + 1``. A degenerate extent lying exactly on a
    zone edge still yields the zone to its east. The ±180° wrap is not
    handled: callers must keep the extent inside one world copy.
    """
    left = math.floor((extent84.min_lon - UTM_LON_ORIGIN_DEG) / UTM_ZONE_WIDTH_DEG) + 1
    right = math.ceil((extent84.max_lon - UTM_LON_ORIGIN_DEG) / UTM_ZONE_WIDTH_DEG) + 1
    # +180° itself belongs to zone 60
    left = min(left, MAX_UTM_ZONE)
    right = max(right, left + 1)
    return list(range(left, right))

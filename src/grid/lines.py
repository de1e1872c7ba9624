"""Per-zone grid line and label anchor generation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from domain.grid_types import GeoExtent, GridLabel, GridLine, Point, ProjectedExtent
from geo.geometry import clip_segment, point_in_extent
from geo.transforms import GridTransforms, UTMCoordinate
from geo.utm import central_meridian, zone_lon_bounds
from grid.labels import (
    format_label,
    format_zone_label,
    has_easting_letter,
    normalize_northing,
)
from shared.constants import (
    SQUARE_SIZE_M,
    AnchorClass,
    GridAxis,
    LineRole,
)

logger = logging.getLogger(__name__)

# Уточнение широты точки на меридиане для заданного northing
MERIDIAN_LAT_MAX_ITERATIONS = 20
MERIDIAN_LAT_TOLERANCE_DEG = 1e-10


@dataclass(frozen=True)
class ZoneWindow:
    """
    Part of a zone visible in the viewport.

    ``west_x``/``east_x`` are the viewport's literal projected edges where
    the viewport edge lies inside the zone, otherwise the projected zone
    meridians.
    """

    zone: int
    west_lon: float
    east_lon: float
    west_x: float
    east_x: float
    zone_edge_west_visible: bool
    zone_edge_east_visible: bool


@dataclass
class ZoneGrid:
    """Lines and label anchors of one zone along one axis."""

    lines: list[GridLine] = field(default_factory=list)
    labels: list[GridLabel] = field(default_factory=list)


def floor_to_step(v: float, step: int) -> int:
    return int(math.floor(v / step) * step)


def ceil_to_step(v: float, step: int) -> int:
    return int(math.ceil(v / step) * step)


class GridLineGenerator:
    """
    Builds easting/northing lines of single zones for one viewport.

    All UTM work happens in the northern-hemisphere frame of the zone so
    that northings stay continuous across the equator; labels map negative
    northings back onto the southern range.
    """

    def __init__(
        self,
        transforms: GridTransforms,
        extent: ProjectedExtent,
        extent84: GeoExtent,
    ):
        self.transforms = transforms
        self.extent = extent
        self.extent84 = extent84
        # Широта, на которой зона шире всего в пределах окна (ближе к экватору)
        self.widest_lat = min(max(0.0, extent84.min_lat), extent84.max_lat)
        _, self.mid_lat = extent84.center

    # --- helpers -------------------------------------------------------------

    def _to_utm(self, lon: float, lat: float, zone: int) -> UTMCoordinate:
        return self.transforms.geo_to_utm(lon, lat, zone, northern=True)

    def _to_geo(
        self, zone: int, easting: float, northing: float
    ) -> tuple[float, float]:
        return self.transforms.utm_to_geo(UTMCoordinate(zone, easting, northing, True))

    def _projected_x(self, lon: float) -> float:
        x, _ = self.transforms.geo_to_projected(lon, self.mid_lat)
        return x

    def _latitude_on_meridian(self, zone: int, lon: float, northing: float) -> float:
        """Latitude where the line of constant ``northing`` crosses ``lon``."""
        lat = self.mid_lat
        for _ in range(MERIDIAN_LAT_MAX_ITERATIONS):
            easting = self._to_utm(lon, lat, zone).easting
            _, next_lat = self._to_geo(zone, easting, northing)
            if abs(next_lat - lat) < MERIDIAN_LAT_TOLERANCE_DEG:
                return next_lat
            lat = next_lat
        logger.debug(
            'Широта northing=%s на долготе %s не сошлась: %s', northing, lon, lat
        )
        return lat

    def zone_window(self, zone: int) -> ZoneWindow:
        """Clamp the zone's longitudinal bounds to the viewport."""
        zone_west, zone_east = zone_lon_bounds(zone)
        west_visible = zone_west > self.extent84.min_lon
        east_visible = zone_east < self.extent84.max_lon
        west_lon = zone_west if west_visible else self.extent84.min_lon
        east_lon = zone_east if east_visible else self.extent84.max_lon
        west_x = self._projected_x(zone_west) if west_visible else self.extent.min_x
        east_x = self._projected_x(zone_east) if east_visible else self.extent.max_x
        return ZoneWindow(
            zone=zone,
            west_lon=west_lon,
            east_lon=east_lon,
            west_x=west_x,
            east_x=east_x,
            zone_edge_west_visible=west_visible,
            zone_edge_east_visible=east_visible,
        )

    def _window_rect(self, window: ZoneWindow) -> ProjectedExtent:
        return ProjectedExtent(
            window.west_x, self.extent.min_y, window.east_x, self.extent.max_y
        )

    # --- easting -------------------------------------------------------------

    def easting_range(self, window: ZoneWindow) -> tuple[float, float]:
        """
        Min/max easting along the window's west and east meridians.

        Easting on a fixed meridian is monotonic in latitude on each side of
        the equator, so the viewport's latitude bounds and the widest
        latitude cover its extremes. A visible zone edge bounds the range by
        the true edge easting.
        """
        starts, ends = [], []
        for lat in {self.extent84.min_lat, self.widest_lat, self.extent84.max_lat}:
            starts.append(self._to_utm(window.west_lon, lat, window.zone).easting)
            ends.append(self._to_utm(window.east_lon, lat, window.zone).easting)
        return min(starts), max(ends)

    def easting_lines(self, zone: int, interval: int) -> ZoneGrid:
        """
        Vertical lines of constant easting, spanning the viewport height.

        Every line is clipped to the zone window; label anchors sit on the
        viewport's southern edge.
        """
        result = ZoneGrid()
        window = self.zone_window(zone)
        rect = self._window_rect(window)
        start, end = self.easting_range(window)
        centre_lon = min(max(central_meridian(zone), window.west_lon), window.east_lon)
        northing_s = self._to_utm(centre_lon, self.extent84.min_lat, zone).northing
        northing_n = self._to_utm(centre_lon, self.extent84.max_lat, zone).northing

        easting = floor_to_step(start, interval)
        last = ceil_to_step(end, interval)
        while easting <= last:
            lon_s, _ = self._to_geo(zone, easting, northing_s)
            lon_n, _ = self._to_geo(zone, easting, northing_n)
            x_s, _ = self.transforms.geo_to_projected(lon_s, self.extent84.min_lat)
            x_n, _ = self.transforms.geo_to_projected(lon_n, self.extent84.max_lat)
            clipped = clip_segment(
                (x_s, self.extent.min_y), (x_n, self.extent.max_y), rect
            )
            if clipped is not None:
                result.lines.append(
                    GridLine(
                        points=clipped,
                        role=LineRole.GRID_LINE,
                        zone=zone,
                        axis=GridAxis.EASTING,
                        value=easting,
                    )
                )
                if easting % SQUARE_SIZE_M == 0:
                    result.labels.extend(
                        self._easting_square_labels(zone, easting, clipped[0])
                    )

            if interval < SQUARE_SIZE_M:
                # Подпись столбца - в центре квадрата справа от линии
                lon_c, _ = self._to_geo(zone, easting + interval / 2, northing_s)
                x_c, _ = self.transforms.geo_to_projected(lon_c, self.extent84.min_lat)
                if point_in_extent((x_c, self.extent.min_y), rect):
                    result.labels.append(
                        GridLabel(
                            position=(x_c, self.extent.min_y),
                            text=format_label(
                                easting, interval, zone, GridAxis.EASTING
                            ),
                            anchor_class=AnchorClass.EASTING,
                            zone=zone,
                        )
                    )
            easting += interval
        return result

    def _easting_square_labels(
        self, zone: int, easting: int, anchor: Point
    ) -> list[GridLabel]:
        """Letters of the two squares meeting at a 100 km easting line."""
        labels = []
        west_square = easting - SQUARE_SIZE_M
        if has_easting_letter(west_square):
            labels.append(
                GridLabel(
                    position=anchor,
                    text=format_label(
                        west_square, SQUARE_SIZE_M, zone, GridAxis.EASTING
                    ),
                    anchor_class=AnchorClass.EASTING_SQUARE_END,
                    zone=zone,
                )
            )
        if has_easting_letter(easting):
            labels.append(
                GridLabel(
                    position=anchor,
                    text=format_label(easting, SQUARE_SIZE_M, zone, GridAxis.EASTING),
                    anchor_class=AnchorClass.EASTING_SQUARE_START,
                    zone=zone,
                )
            )
        return labels

    # --- northing ------------------------------------------------------------

    def northing_range(self, window: ZoneWindow) -> tuple[float, float]:
        """
        Min/max northing over the window.

        Lines of constant northing bow away from the central meridian, so
        both window edges and the meridian itself are sampled.
        """
        cm = min(max(central_meridian(window.zone), window.west_lon), window.east_lon)
        samples = [
            self._to_utm(lon, lat, window.zone).northing
            for lon in (window.west_lon, cm, window.east_lon)
            for lat in (self.extent84.min_lat, self.extent84.max_lat)
        ]
        return min(samples), max(samples)

    def northing_lines(self, zone: int, interval: int) -> ZoneGrid:
        """
        Horizontal lines of constant northing across the zone window.

        Endpoints sit on the zone meridians, or on the viewport's literal
        edge where the zone extends past it; label anchors are pinned to the
        window's western edge.
        """
        result = ZoneGrid()
        window = self.zone_window(zone)
        rect = self._window_rect(window)
        start, end = self.northing_range(window)

        northing = floor_to_step(start, interval)
        last = ceil_to_step(end, interval)
        while northing <= last:
            lat_w = self._latitude_on_meridian(zone, window.west_lon, northing)
            lat_e = self._latitude_on_meridian(zone, window.east_lon, northing)
            _, y_w = self.transforms.geo_to_projected(window.west_lon, lat_w)
            _, y_e = self.transforms.geo_to_projected(window.east_lon, lat_e)
            clipped = clip_segment((window.west_x, y_w), (window.east_x, y_e), rect)
            label_value = normalize_northing(northing)
            if clipped is not None:
                result.lines.append(
                    GridLine(
                        points=clipped,
                        role=LineRole.GRID_LINE,
                        zone=zone,
                        axis=GridAxis.NORTHING,
                        value=northing,
                    )
                )
                if northing % SQUARE_SIZE_M == 0:
                    result.labels.extend(
                        self._northing_square_labels(zone, label_value, clipped[0])
                    )

            if interval < SQUARE_SIZE_M:
                # Подпись строки - в центре квадрата выше линии, у западного края
                lat_c = self._latitude_on_meridian(
                    zone, window.west_lon, northing + interval / 2
                )
                _, y_c = self.transforms.geo_to_projected(window.west_lon, lat_c)
                if point_in_extent((window.west_x, y_c), rect):
                    result.labels.append(
                        GridLabel(
                            position=(window.west_x, y_c),
                            text=format_label(
                                label_value, interval, zone, GridAxis.NORTHING
                            ),
                            anchor_class=AnchorClass.NORTHING,
                            zone=zone,
                        )
                    )
            northing += interval
        return result

    def _northing_square_labels(
        self, zone: int, northing: float, anchor: Point
    ) -> list[GridLabel]:
        """Letters of the two squares meeting at a 100 km northing line."""
        south_square = normalize_northing(northing - SQUARE_SIZE_M)
        return [
            GridLabel(
                position=anchor,
                text=format_label(south_square, SQUARE_SIZE_M, zone, GridAxis.NORTHING),
                anchor_class=AnchorClass.NORTHING_SQUARE_END,
                zone=zone,
            ),
            GridLabel(
                position=anchor,
                text=format_label(northing, SQUARE_SIZE_M, zone, GridAxis.NORTHING),
                anchor_class=AnchorClass.NORTHING_SQUARE_START,
                zone=zone,
            ),
        ]

    # --- zone ----------------------------------------------------------------

    def zone_boundary(self, zone: int) -> GridLine:
        """East meridian of the zone across the full viewport height."""
        _, zone_east = zone_lon_bounds(zone)
        x = self._projected_x(zone_east)
        return GridLine(
            points=((x, self.extent.min_y), (x, self.extent.max_y)),
            role=LineRole.ZONE_BOUNDARY,
            zone=zone,
        )

    def zone_label(self, zone: int) -> GridLabel:
        """Zone designation centred on the window's northern edge."""
        window = self.zone_window(zone)
        return GridLabel(
            position=((window.west_x + window.east_x) / 2, self.extent.max_y),
            text=format_zone_label(zone, self.mid_lat),
            anchor_class=AnchorClass.ZONE,
            zone=zone,
        )

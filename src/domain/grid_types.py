"""Value types produced and consumed by one grid computation pass."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from domain.exceptions import InvalidExtentError
from shared.constants import (
    WORLD_LAT_MAX,
    WORLD_LAT_MIN,
    WORLD_LON_MAX,
    WORLD_LON_MIN,
    AnchorClass,
    GridAxis,
    LineRole,
)

Point = tuple[float, float]


def _check_bounds(
    min_x: float, min_y: float, max_x: float, max_y: float, kind: str
) -> None:
    if not all(math.isfinite(v) for v in (min_x, min_y, max_x, max_y)):
        msg = f'{kind}: границы должны быть конечными числами'
        raise InvalidExtentError(msg)
    if min_x > max_x or min_y > max_y:
        msg = (
            f'{kind}: минимум больше максимума '
            f'({min_x}, {min_y}, {max_x}, {max_y})'
        )
        raise InvalidExtentError(msg)


@dataclass(frozen=True)
class ProjectedExtent:
    """Viewport rectangle in the host display projection."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        _check_bounds(self.min_x, self.min_y, self.max_x, self.max_y, 'Extent')

    @classmethod
    def from_sequence(cls, extent: Sequence[float]) -> ProjectedExtent:
        """Build from ``(minX, minY, maxX, maxY)`` as handed over by the host."""
        if len(extent) != 4:
            msg = f'Extent должен содержать 4 числа, получено {len(extent)}'
            raise InvalidExtentError(msg)
        return cls(*(float(v) for v in extent))

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class GeoExtent:
    """Viewport rectangle in degrees (WGS84 longitude/latitude)."""

    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float

    def __post_init__(self) -> None:
        _check_bounds(
            self.min_lon, self.min_lat, self.max_lon, self.max_lat, 'GeoExtent'
        )
        # Переход через антимеридиан не моделируется
        if self.min_lon < WORLD_LON_MIN or self.max_lon > WORLD_LON_MAX:
            msg = (
                f'Долгота вне [{WORLD_LON_MIN}, {WORLD_LON_MAX}]: '
                f'{self.min_lon}..{self.max_lon}'
            )
            raise InvalidExtentError(msg)
        if self.min_lat < WORLD_LAT_MIN or self.max_lat > WORLD_LAT_MAX:
            msg = (
                f'Широта вне [{WORLD_LAT_MIN}, {WORLD_LAT_MAX}]: '
                f'{self.min_lat}..{self.max_lat}'
            )
            raise InvalidExtentError(msg)

    @property
    def center(self) -> Point:
        return (
            (self.min_lon + self.max_lon) / 2,
            (self.min_lat + self.max_lat) / 2,
        )


@dataclass(frozen=True)
class GridLine:
    """
    Polyline in projected coordinates.

    ``value`` is the easting or northing in meters for grid lines and
    ``None`` for zone boundaries.
    """

    points: tuple[Point, ...]
    role: LineRole
    zone: int
    axis: GridAxis | None = None
    value: int | None = None


@dataclass(frozen=True)
class GridLabel:
    """Label text anchored at a projected point."""

    position: Point
    text: str
    anchor_class: AnchorClass
    zone: int


@dataclass(frozen=True)
class GridResult:
    """Complete output of one pass; replaced wholesale on the next one."""

    extent: ProjectedExtent
    resolution: float
    interval: int | None
    zones: tuple[int, ...]
    lines: tuple[GridLine, ...] = field(default_factory=tuple)
    labels: tuple[GridLabel, ...] = field(default_factory=tuple)

    @property
    def zone_lines(self) -> tuple[GridLine, ...]:
        return tuple(ln for ln in self.lines if ln.role is LineRole.ZONE_BOUNDARY)

    @property
    def grid_lines(self) -> tuple[GridLine, ...]:
        return tuple(ln for ln in self.lines if ln.role is LineRole.GRID_LINE)

    def lines_for(self, zone: int, axis: GridAxis) -> list[GridLine]:
        """Grid lines of one zone along one axis, in generation order."""
        return [
            ln
            for ln in self.lines
            if ln.role is LineRole.GRID_LINE and ln.zone == zone and ln.axis is axis
        ]

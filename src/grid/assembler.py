"""Full grid pass: viewport + resolution -> lines and labels."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from domain.grid_types import GridLabel, GridLine, GridResult, ProjectedExtent
from geo.transforms import GridTransforms, PyprojGridTransforms, extent_to_geo
from geo.zones import zones_in_extent
from grid.intervals import ZONE_ONLY, IntervalFn, select_interval, validate_resolution
from grid.lines import GridLineGenerator

logger = logging.getLogger(__name__)


class GridAssembler:
    """
    Orchestrates zone lookup, interval selection and line generation.

    Holds configuration only; every :meth:`compute` call is independent and
    returns a fresh :class:`GridResult`.
    """

    def __init__(
        self,
        transforms: GridTransforms | None = None,
        interval_fn: IntervalFn | None = None,
        *,
        zone_labels: bool = True,
    ):
        self.transforms = transforms or PyprojGridTransforms()
        self.interval_fn = interval_fn
        self.zone_labels = zone_labels

    def compute(
        self,
        extent: ProjectedExtent | Sequence[float],
        resolution: float,
    ) -> GridResult:
        """
        Build the grid for one viewport.

        Args:
            extent: Viewport ``(minX, minY, maxX, maxY)`` in display units.
            resolution: Display units per pixel.

        Returns:
            Zone boundaries and grid lines, concatenated in zone order, plus
            their labels.

        Raises:
            InvalidExtentError: Non-finite, inverted or out-of-world extent.
            InvalidResolutionError: Resolution not positive and finite.
            UnsupportedIntervalError: Interval function returned an unknown
                spacing.
            LetterIndexError: A letter lookup fell outside its table.

        """
        if not isinstance(extent, ProjectedExtent):
            extent = ProjectedExtent.from_sequence(extent)
        validate_resolution(resolution)

        interval = select_interval(resolution, self.interval_fn)
        extent84 = extent_to_geo(extent, self.transforms)
        zones = zones_in_extent(extent84)
        logger.debug(
            'Grid pass: extent84=%s interval=%s zones=%s', extent84, interval, zones
        )

        generator = GridLineGenerator(self.transforms, extent, extent84)
        lines: list[GridLine] = []
        labels: list[GridLabel] = []
        for zone in zones:
            lines.append(generator.zone_boundary(zone))
            if self.zone_labels:
                labels.append(generator.zone_label(zone))
            if interval is ZONE_ONLY:
                continue

            eastings = generator.easting_lines(zone, interval)
            northings = generator.northing_lines(zone, interval)
            lines.extend(eastings.lines)
            lines.extend(northings.lines)
            labels.extend(eastings.labels)
            labels.extend(northings.labels)
            logger.debug(
                'Zone %d: %d easting / %d northing lines, %d labels',
                zone,
                len(eastings.lines),
                len(northings.lines),
                len(eastings.labels) + len(northings.labels),
            )

        result = GridResult(
            extent=extent,
            resolution=resolution,
            interval=interval,
            zones=tuple(zones),
            lines=tuple(lines),
            labels=tuple(labels),
        )
        logger.info(
            'Сетка USNG: зоны %s, шаг %s м, линий %d, подписей %d',
            zones,
            interval if interval is not ZONE_ONLY else '-',
            len(result.lines),
            len(result.labels),
        )
        return result


def compute_grid(
    extent: ProjectedExtent | Sequence[float],
    resolution: float,
    transforms: GridTransforms | None = None,
    interval_fn: IntervalFn | None = None,
) -> GridResult:
    """Single-call form of :meth:`GridAssembler.compute`."""
    return GridAssembler(transforms, interval_fn).compute(extent, resolution)

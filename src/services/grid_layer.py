"""Host-side state around the pure grid computation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from domain.grid_types import GridLabel, GridLine, GridResult, ProjectedExtent
from domain.models import GridSettings
from geo.transforms import GridTransforms, PyprojGridTransforms
from grid.assembler import GridAssembler
from grid.intervals import IntervalFn, build_interval_fn

logger = logging.getLogger(__name__)


class GridRenderer(Protocol):
    """Narrow adapter the host implements to turn grid output into drawables."""

    def draw_line(self, line: GridLine) -> None: ...

    def draw_label(self, label: GridLabel) -> None: ...


class GridLayer:
    """
    Owns the last computed extent and result for one map view.

    The core keeps no state between passes; this object decides when a new
    pass is needed and keeps the previous output if a pass fails.
    """

    def __init__(
        self,
        settings: GridSettings | None = None,
        transforms: GridTransforms | None = None,
        interval_fn: IntervalFn | None = None,
    ):
        self.settings = settings or GridSettings()
        transforms = transforms or PyprojGridTransforms(self.settings.display_crs)
        interval_fn = interval_fn or build_interval_fn(self.settings.ladder_pairs())
        self.assembler = GridAssembler(
            transforms,
            interval_fn,
            zone_labels=self.settings.show_zone_labels,
        )
        self.previous_extent: ProjectedExtent | None = None
        self.previous_resolution: float | None = None
        self.result: GridResult | None = None

    def needs_refresh(
        self, extent: ProjectedExtent | Sequence[float], resolution: float
    ) -> bool:
        if not isinstance(extent, ProjectedExtent):
            extent = ProjectedExtent.from_sequence(extent)
        return (
            self.result is None
            or extent != self.previous_extent
            or resolution != self.previous_resolution
        )

    def refresh(
        self, extent: ProjectedExtent | Sequence[float], resolution: float
    ) -> GridResult:
        """
        Recompute if the view changed and return the current result.

        On failure the previous result stays in place and the error is
        re-raised to the host.
        """
        if not isinstance(extent, ProjectedExtent):
            extent = ProjectedExtent.from_sequence(extent)
        if not self.needs_refresh(extent, resolution):
            logger.debug('Grid view unchanged, reusing previous result')
            return self.result  # type: ignore[return-value]
        try:
            result = self.assembler.compute(extent, resolution)
        except Exception:
            logger.exception(
                'Grid pass failed for extent=%s resolution=%s; keeping previous result',
                extent.as_tuple(),
                resolution,
            )
            raise
        self.previous_extent = extent
        self.previous_resolution = resolution
        self.result = result
        return result

    def render(self, renderer: GridRenderer) -> None:
        """Feed the current result to a host renderer, lines before labels."""
        if self.result is None:
            return
        for line in self.result.lines:
            renderer.draw_line(line)
        for label in self.result.labels:
            renderer.draw_label(label)

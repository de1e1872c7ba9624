"""Pillow rendering of USNG grid output - reference host adapter."""

from __future__ import annotations

import logging
import math

import numpy as np
from PIL import Image, ImageDraw

from domain.grid_types import GridLabel, GridLine, GridResult, ProjectedExtent
from domain.models import GridSettings, LineStyle
from imaging.text import draw_grid_label
from shared.constants import CANVAS_BG_COLOR, MIN_POINTS_FOR_LINE, LineRole

logger = logging.getLogger(__name__)


def projected_to_pixels(
    points: np.ndarray | list[tuple[float, float]],
    extent: ProjectedExtent,
    size: tuple[int, int],
) -> np.ndarray:
    """
    Map projected coordinates to image pixels.

    The image covers ``extent`` exactly; projected Y grows north, pixel Y
    grows down.
    """
    w, h = size
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    px = (pts[:, 0] - extent.min_x) / extent.width * w
    py = (extent.max_y - pts[:, 1]) / extent.height * h
    return np.column_stack((px, py))


def dash_segments(
    p0: tuple[float, float],
    p1: tuple[float, float],
    dash: tuple[int, int],
) -> list[tuple[tuple[float, float], tuple[float, float]]]:
    """Split a pixel segment into dash pieces ``(on, off)``."""
    on, off = dash
    length = math.hypot(p1[0] - p0[0], p1[1] - p0[1])
    period = on + off
    if length == 0 or period <= 0:
        return [(p0, p1)]
    ux = (p1[0] - p0[0]) / length
    uy = (p1[1] - p0[1]) / length
    pieces = []
    pos = 0.0
    while pos < length:
        end = min(pos + on, length)
        pieces.append(
            (
                (p0[0] + ux * pos, p0[1] + uy * pos),
                (p0[0] + ux * end, p0[1] + uy * end),
            )
        )
        pos += period
    return pieces


class PilGridRenderer:
    """
    Draws grid lines and labels on a Pillow image covering ``extent``.

    Styles are resolved here from ``settings``; the grid core only tags
    lines with a role and labels with an anchor class.
    """

    def __init__(
        self,
        img: Image.Image,
        extent: ProjectedExtent,
        settings: GridSettings | None = None,
    ):
        self.img = img
        self.extent = extent
        self.settings = settings or GridSettings()
        self.draw = ImageDraw.Draw(img)

    def _line_style(self, line: GridLine) -> LineStyle:
        if line.role is LineRole.ZONE_BOUNDARY:
            return self.settings.zone_line_style
        return self.settings.grid_line_style

    def draw_line(self, line: GridLine) -> None:
        if len(line.points) < MIN_POINTS_FOR_LINE:
            return
        style = self._line_style(line)
        pixels = [
            (float(px), float(py))
            for px, py in projected_to_pixels(line.points, self.extent, self.img.size)
        ]
        if style.dash is None:
            self.draw.line(pixels, fill=style.color, width=style.width_px)
            return
        for a, b in zip(pixels, pixels[1:]):
            for d0, d1 in dash_segments(a, b, style.dash):
                self.draw.line([d0, d1], fill=style.color, width=style.width_px)

    def draw_label(self, label: GridLabel) -> None:
        style = self.settings.label_style(label.anchor_class)
        x, y = projected_to_pixels([label.position], self.extent, self.img.size)[0]
        xy = (x + style.offset_px[0], y + style.offset_px[1])
        draw_grid_label(self.draw, xy, label.text, style, self.img.size)


def render_grid(
    result: GridResult,
    size: tuple[int, int],
    settings: GridSettings | None = None,
    base: Image.Image | None = None,
) -> Image.Image:
    """
    Draw ``result`` on ``base`` (or a blank canvas of ``size``).

    Returns:
        The image with the overlay drawn on top.

    """
    img = base.copy() if base is not None else Image.new('RGB', size, CANVAS_BG_COLOR)
    renderer = PilGridRenderer(img, result.extent, settings)
    for line in result.lines:
        renderer.draw_line(line)
    for label in result.labels:
        renderer.draw_label(label)
    logger.debug(
        'Rendered %d lines, %d labels on %dx%d image',
        len(result.lines),
        len(result.labels),
        *img.size,
    )
    return img

"""Imaging package - Pillow rendering of grid overlays."""

from imaging.grid import (
    PilGridRenderer,
    dash_segments,
    projected_to_pixels,
    render_grid,
)
from imaging.text import draw_grid_label, label_box, load_grid_font

__all__ = [
    'PilGridRenderer',
    'dash_segments',
    'draw_grid_label',
    'label_box',
    'load_grid_font',
    'projected_to_pixels',
    'render_grid',
]

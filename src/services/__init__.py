"""Services package - host-side grid layer state."""

from services.grid_layer import GridLayer, GridRenderer

__all__ = [
    'GridLayer',
    'GridRenderer',
]

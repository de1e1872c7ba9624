"""USNG grid computation: intervals, labels, lines and the full pass."""

from .assembler import GridAssembler, compute_grid
from .intervals import (
    ZONE_ONLY,
    build_interval_fn,
    default_interval_fn,
    select_interval,
)
from .labels import format_label, format_zone_label

__all__ = [
    'ZONE_ONLY',
    'GridAssembler',
    'build_interval_fn',
    'compute_grid',
    'default_interval_fn',
    'format_label',
    'format_zone_label',
    'select_interval',
]

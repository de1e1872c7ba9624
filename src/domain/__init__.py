"""Domain layer - grid value types, settings and profiles."""
from domain.exceptions import (
    GridError,
    InvalidExtentError,
    InvalidResolutionError,
    LetterIndexError,
    UnsupportedIntervalError,
)
from domain.grid_types import (
    GeoExtent,
    GridLabel,
    GridLine,
    GridResult,
    ProjectedExtent,
)
from domain.models import GridSettings, IntervalStep, LabelStyle, LineStyle
from domain.profiles import (
    delete_profile,
    ensure_profiles_dir,
    list_profiles,
    load_profile,
    save_profile,
)

__all__ = [
    'GeoExtent',
    'GridError',
    'GridLabel',
    'GridLine',
    'GridResult',
    'GridSettings',
    'IntervalStep',
    'InvalidExtentError',
    'InvalidResolutionError',
    'LabelStyle',
    'LetterIndexError',
    'LineStyle',
    'ProjectedExtent',
    'UnsupportedIntervalError',
    'delete_profile',
    'ensure_profiles_dir',
    'list_profiles',
    'load_profile',
    'save_profile',
]

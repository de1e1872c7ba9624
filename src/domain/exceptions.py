"""Ошибки построения сетки USNG."""


class GridError(Exception):
    """Base class for grid computation failures."""


class InvalidExtentError(GridError, ValueError):
    """Extent bounds are not finite, inverted or outside the world."""


class InvalidResolutionError(GridError, ValueError):
    """Resolution is not a positive finite number."""


class UnsupportedIntervalError(GridError, ValueError):
    """Interval function returned a spacing without a label format."""


class LetterIndexError(GridError, IndexError):
    """Zone/value combination points outside a 100 km letter table."""

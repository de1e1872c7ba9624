"""USNG label text: 100 km square letters and truncated grid digits."""

from __future__ import annotations

import math

from domain.exceptions import LetterIndexError, UnsupportedIntervalError
from geo.utm import latitude_band
from shared.constants import (
    EAST_WEST_LETTERS,
    EASTING_SQUARE_MAX,
    EASTING_SQUARE_MIN,
    LABEL_DIGITS,
    LABEL_DROPPED_DIGITS,
    LABEL_VALUE_WIDTH,
    NORTH_SOUTH_LETTERS,
    NORTHING_LETTER_CYCLE_M,
    SQUARE_SIZE_M,
    UTM_FALSE_NORTHING_SOUTH,
    GridAxis,
)


def normalize_northing(northing: float) -> float:
    """
    Map a northern-frame northing onto the 0..10 000 000 m label range.

    Negative values (south of the equator) get the southern false northing.
    """
    if northing < 0:
        return northing + UTM_FALSE_NORTHING_SOUTH
    return northing


def easting_letter(easting: float, zone: int) -> str:
    """
    Column letter of the 100 km square containing ``easting``.

    Raises:
        LetterIndexError: The easting lies outside 100 000..899 999 m, so the
            zone/easting pair has no column letter.

    """
    col = math.floor(easting / SQUARE_SIZE_M) - 1
    row = EAST_WEST_LETTERS[zone % len(EAST_WEST_LETTERS)]
    if not 0 <= col < len(row):
        msg = f'Easting {easting} вне столбцов 100-км квадратов зоны {zone}'
        raise LetterIndexError(msg)
    return row[col]


def northing_letter(northing: float, zone: int) -> str:
    """Row letter of the 100 km square containing ``northing``."""
    idx = math.floor((northing % NORTHING_LETTER_CYCLE_M) / SQUARE_SIZE_M)
    row = NORTH_SOUTH_LETTERS[zone % len(NORTH_SOUTH_LETTERS)]
    if not 0 <= idx < len(row):
        msg = f'Northing {northing} вне строк 100-км квадратов зоны {zone}'
        raise LetterIndexError(msg)
    return row[idx]


def has_easting_letter(easting: float) -> bool:
    """True if a 100 km column letter exists for ``easting``."""
    return EASTING_SQUARE_MIN <= easting < EASTING_SQUARE_MAX


def format_label(
    value: float,
    interval: int,
    zone: int,
    axis: GridAxis | str,
) -> str:
    """
    Format a grid coordinate the USNG way.

    At 100 000 m the label is the square letter for the axis. At finer
    intervals the value is written as a 7-digit numeral, the two leading
    (100 km) digits are dropped and the rest is truncated to the number of
    digits the interval resolves: ``format_label(512345, 1000, 15, 'ew')``
    gives ``'12'``.

    Raises:
        LetterIndexError: See :func:`easting_letter`.
        UnsupportedIntervalError: ``interval`` has no digit width.

    """
    axis = GridAxis(axis)
    if interval == SQUARE_SIZE_M:
        if axis is GridAxis.EASTING:
            return easting_letter(value, zone)
        return northing_letter(value, zone)

    n_digits = LABEL_DIGITS.get(interval)
    if n_digits is None:
        msg = f'Нет формата подписи для шага {interval} м'
        raise UnsupportedIntervalError(msg)
    as_string = str(int(value)).zfill(LABEL_VALUE_WIDTH)
    return as_string[LABEL_DROPPED_DIGITS : LABEL_DROPPED_DIGITS + n_digits]


def format_zone_label(zone: int, lat: float) -> str:
    """Grid zone designation such as ``'31U'``; bare number near the poles."""
    band = latitude_band(lat)
    return f'{zone}{band}' if band else str(zone)

"""Grid spacing selection from the map resolution."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence

from domain.exceptions import InvalidResolutionError, UnsupportedIntervalError
from shared.constants import ALLOWED_INTERVALS, DEFAULT_INTERVAL_LADDER

logger = logging.getLogger(__name__)

# Шаг «только границы зон» - сетка внутри зон не строится
ZONE_ONLY: None = None

IntervalFn = Callable[[float], int | None]


def build_interval_fn(
    ladder: Sequence[tuple[float, int]] = DEFAULT_INTERVAL_LADDER,
) -> IntervalFn:
    """
    Build a step function over ``(max_resolution, interval)`` pairs.

    The first step whose threshold exceeds the resolution wins; resolutions
    at or above the last threshold map to :data:`ZONE_ONLY`.
    """
    steps = tuple(ladder)

    def interval_fn(resolution: float) -> int | None:
        for threshold, interval in steps:
            if resolution < threshold:
                return interval
        return ZONE_ONLY

    return interval_fn


default_interval_fn = build_interval_fn()


def validate_resolution(resolution: float) -> None:
    if not math.isfinite(resolution) or resolution <= 0:
        msg = f'Разрешение должно быть положительным конечным числом: {resolution}'
        raise InvalidResolutionError(msg)


def select_interval(
    resolution: float,
    interval_fn: IntervalFn | None = None,
) -> int | None:
    """
    Resolve the grid interval in meters for ``resolution``.

    Args:
        resolution: Display units per pixel.
        interval_fn: Optional override with the same signature as
            :func:`default_interval_fn`; its thresholds are not inspected.

    Returns:
        One of ``ALLOWED_INTERVALS`` or :data:`ZONE_ONLY`.

    Raises:
        InvalidResolutionError: Resolution is not positive and finite.
        UnsupportedIntervalError: The function returned a spacing without
            a label format.

    """
    validate_resolution(resolution)
    fn = interval_fn or default_interval_fn
    interval = fn(resolution)
    logger.debug('Resolution %.4f -> interval %s', resolution, interval)
    if interval is ZONE_ONLY:
        return ZONE_ONLY
    if interval not in ALLOWED_INTERVALS:
        msg = (
            f'Шаг сетки {interval!r} не поддерживается; '
            f'допустимые значения: {ALLOWED_INTERVALS}'
        )
        raise UnsupportedIntervalError(msg)
    return int(interval)

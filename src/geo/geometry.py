from __future__ import annotations

from domain.grid_types import Point, ProjectedExtent


def point_in_extent(point: Point, extent: ProjectedExtent) -> bool:
    """True if the point lies inside or on the boundary of ``extent``."""
    x, y = point
    return extent.min_x <= x <= extent.max_x and extent.min_y <= y <= extent.max_y


def _snap_to_edge(point: Point, edge: int, extent: ProjectedExtent) -> Point:
    # Координата на границе берётся из extent буквально
    x, y = point
    if edge == 0:
        return extent.min_x, y
    if edge == 1:
        return extent.max_x, y
    if edge == 2:
        return x, extent.min_y
    return x, extent.max_y


def clip_segment(
    p0: Point,
    p1: Point,
    extent: ProjectedExtent,
) -> tuple[Point, Point] | None:
    """
    Clip segment p0-p1 to the rectangle ``extent`` (Liang–Barsky).

    Endpoints already inside are returned untouched; endpoints moved onto
    the rectangle carry the viewport's literal coordinate on the clipped
    axis. Returns ``None`` if the segment misses the rectangle.
    """
    x0, y0 = p0
    x1, y1 = p1
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    edge0 = edge1 = -1
    checks = (
        (-dx, x0 - extent.min_x),
        (dx, extent.max_x - x0),
        (-dy, y0 - extent.min_y),
        (dy, extent.max_y - y0),
    )
    for edge, (p, q) in enumerate(checks):
        if p == 0:
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            if r > t1:
                return None
            if r > t0:
                t0, edge0 = r, edge
        else:
            if r < t0:
                return None
            if r < t1:
                t1, edge1 = r, edge
    start = p0
    if edge0 >= 0:
        start = _snap_to_edge((x0 + t0 * dx, y0 + t0 * dy), edge0, extent)
    end = p1
    if edge1 >= 0:
        end = _snap_to_edge((x0 + t1 * dx, y0 + t1 * dy), edge1, extent)
    return start, end

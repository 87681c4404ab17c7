"""Geometric helpers consumed by the follower.

This module provides the small collaborators the traversal relies on:
- Point-in-ring testing (ray casting algorithm)
- Boundary proximity testing
- Strict point-in-polygon membership with holes
- Duplicate-suppressing append
- Copying the vertices of a linestring between two segments

All functions are pure apart from the explicit output sequence they append to.
"""

import math
from collections.abc import MutableSequence, Sequence

from polyfollow.domain import Point, Polygon, SegmentId


def points_equal(a: Point, b: Point, tolerance: float = 0.0) -> bool:
    """Compare two points, optionally with a per-axis tolerance.

    Args:
        a: First point
        b: Second point
        tolerance: Max per-axis difference; 0 means exact equality

    Returns:
        True if the points coincide
    """
    if tolerance <= 0.0:
        return a == b
    return abs(a.x - b.x) <= tolerance and abs(a.y - b.y) <= tolerance


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Euclidean distance from a point to a line segment.

    Projects the point onto the infinite line, then clamps to the segment
    endpoints.

    Args:
        point: The point to measure from
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Distance to the nearest point of the segment

    Examples:
        >>> distance_to_segment(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        1.0
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq == 0.0:
        return math.hypot(point.x - seg_start.x, point.y - seg_start.y)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    return math.hypot(point.x - (seg_start.x + t * dx), point.y - (seg_start.y + t * dy))


def point_on_ring(point: Point, ring: Sequence[Point], tolerance: float = 1e-9) -> bool:
    """Check whether a point lies on the boundary of a closed ring.

    Args:
        point: The point to test
        ring: Points of the ring; the last point joins the first
        tolerance: Max distance from an edge to count as on it

    Returns:
        True if the point is within tolerance of any ring edge
    """
    n = len(ring)
    if n == 0:
        return False
    if n == 1:
        return distance_to_segment(point, ring[0], ring[0]) <= tolerance

    j = n - 1
    for i in range(n):
        if distance_to_segment(point, ring[j], ring[i]) <= tolerance:
            return True
        j = i
    return False


def point_in_ring(point: Point, ring: Sequence[Point]) -> bool:
    """Determine if a point is inside a ring using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts crossings
    with ring edges. Odd number of crossings = inside, even = outside.
    Boundary points get an arbitrary answer; use point_on_ring first when
    that matters.

    Args:
        point: The point to test
        ring: Points forming the ring

    Returns:
        True if point is inside the ring, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_ring(Point(1.0, 1.0), square)
        True
        >>> point_in_ring(Point(3.0, 3.0), square)
        False
    """
    n = len(ring)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = ring[i].x, ring[i].y
        xj, yj = ring[j].x, ring[j].y

        # Edge (j, i) straddles the ray's horizontal line
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def within(point: Point, polygon: Polygon, boundary_tolerance: float = 1e-9) -> bool:
    """Strict point-in-polygon membership.

    A point is within the polygon when it lies in the interior of the outer
    ring and outside every hole. Points on any ring boundary are not within.

    Args:
        point: The point to test
        polygon: Polygon with optional holes
        boundary_tolerance: Distance from an edge that counts as boundary

    Returns:
        True if the point lies in the polygon's interior
    """
    for ring in polygon.rings():
        if point_on_ring(point, ring, boundary_tolerance):
            return False

    if not point_in_ring(point, polygon.outer):
        return False

    return not any(point_in_ring(point, hole) for hole in polygon.holes)


def append_no_duplicates(
    sequence: MutableSequence[Point],
    point: Point,
    tolerance: float = 0.0,
) -> bool:
    """Append a point unless it repeats the sequence's last point.

    Args:
        sequence: Sequence being grown
        point: Point to append
        tolerance: Per-axis tolerance for the duplicate check

    Returns:
        True if the point was appended
    """
    if sequence and points_equal(sequence[-1], point, tolerance):
        return False
    sequence.append(point)
    return True


def copy_segments(
    linestring: Sequence[Point],
    seg_id: SegmentId,
    to_index: int,
    out: MutableSequence[Point],
    tolerance: float = 0.0,
) -> int:
    """Copy the linestring vertices that follow a segment up to a vertex.

    Segment i joins vertex i and vertex i + 1, so a walker standing on
    seg_id passes vertices seg_id.segment_index + 1 .. to_index (inclusive)
    before reaching a point on segment to_index. Those vertices are appended
    in order, skipping duplicates. Nothing is copied when the range is
    empty or falls outside the linestring.

    Args:
        linestring: Source vertices
        seg_id: Segment the walker starts on
        to_index: Index of the last vertex to copy
        out: Sequence receiving the vertices
        tolerance: Per-axis tolerance for the duplicate check

    Returns:
        Number of vertices actually appended
    """
    from_index = seg_id.segment_index + 1

    if from_index > to_index or from_index < 0 or to_index >= len(linestring):
        return 0

    appended = 0
    for i in range(from_index, to_index + 1):
        if append_no_duplicates(out, linestring[i], tolerance):
            appended += 1
    return appended

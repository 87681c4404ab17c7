"""Shared fixtures for polyfollow tests."""

from collections.abc import Callable

import pytest

from polyfollow.domain import Method, OperationType, Point, Polygon, SegmentId, Turn, TurnOperation

TurnFactory = Callable[..., Turn]


@pytest.fixture
def square() -> Polygon:
    """10x10 axis-aligned square at the origin."""
    return Polygon(outer=[Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)])


@pytest.fixture
def holed_square() -> Polygon:
    """10x10 square with a 2x2 hole in the middle."""
    return Polygon(
        outer=[Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)],
        holes=[[Point(4, 4), Point(6, 4), Point(6, 6), Point(4, 6)]],
    )


@pytest.fixture
def make_turn() -> TurnFactory:
    """Factory for turns whose first operation sits on a linestring segment."""

    def factory(
        x: float,
        y: float,
        segment: int,
        operation: OperationType,
        method: Method = Method.CROSSES,
        distance: float = 0.0,
    ) -> Turn:
        line_op = TurnOperation(operation, SegmentId(0, -1, -1, segment), distance)
        # Polygon side is irrelevant to the follower but present in real turns
        poly_op = TurnOperation(OperationType.NONE, SegmentId(1, -1, -1, 0), 0.0)
        return Turn(point=Point(x, y), method=method, operations=[line_op, poly_op])

    return factory

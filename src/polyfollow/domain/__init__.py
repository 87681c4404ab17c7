"""Domain models for polyfollow.

This module contains the records the follower consumes: points, linestrings,
polygons and the classified turns between a linestring and a polygon
boundary. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication
- Independent of how turns were detected

Key classes:
- Point: A 2D coordinate
- Polygon: Outer ring plus holes
- SegmentId: Totally ordered edge identifier
- TurnOperation: One geometry's role at a turn
- Turn: A classified intersection event
"""

from polyfollow.domain.geometry import LineString, Point, Polygon
from polyfollow.domain.turn import (
    NO_SEGMENT,
    Method,
    OperationType,
    SegmentId,
    Turn,
    TurnOperation,
)

__all__: list[str] = [
    # Enums
    "Method",
    "OperationType",
    # Core types
    "LineString",
    "NO_SEGMENT",
    "Point",
    "Polygon",
    "SegmentId",
    "Turn",
    "TurnOperation",
]
